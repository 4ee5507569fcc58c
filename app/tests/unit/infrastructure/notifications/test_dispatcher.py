"""Unit tests for NotificationDispatcher.

Tests cover:
- Validation before any collaborator is called
- Collaborator acquisition order
- Data enrichment (FROM, TO, forwarded headers)
- Language group and recipient ordering
- Inter-send throttling
- Aggregation into accepted, partial and failed results
"""

from unittest.mock import MagicMock, call

import pytest

from infrastructure.notifications.dispatcher import (
    FROM_KEY,
    TO_KEY,
    NotificationDispatcher,
)
from infrastructure.notifications.exceptions import (
    ConfigurationError,
    ResolutionError,
    SendError,
    SenderNotFoundError,
    TemplateNotFoundError,
    ValidationError,
)
from infrastructure.notifications.models import DispatchStatus


def build_dispatcher(sender, resolver, **kwargs):
    kwargs.setdefault("sleep", MagicMock())
    return NotificationDispatcher(
        sender_factory=lambda: sender,
        resolver_factory=lambda: resolver,
        **kwargs,
    )


@pytest.mark.unit
class TestValidation:
    """Tests for request validation happening before any I/O."""

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"to": []}, "empty to"),
            ({"from_": ""}, "empty from"),
            ({"event": ""}, "empty event"),
        ],
    )
    def test_invalid_request_raises_before_collaborators(
        self, request_factory, overrides, message
    ):
        sender_factory = MagicMock()
        resolver_factory = MagicMock()
        dispatcher = NotificationDispatcher(sender_factory, resolver_factory)

        with pytest.raises(ValidationError, match=message):
            dispatcher.create_notification(request_factory(**overrides))

        sender_factory.assert_not_called()
        resolver_factory.assert_not_called()

    def test_missing_data_is_rejected(self, request_factory):
        request = request_factory()
        request.data = None
        sender_factory = MagicMock()
        dispatcher = NotificationDispatcher(sender_factory, MagicMock())

        with pytest.raises(ValidationError, match="empty data"):
            dispatcher.create_notification(request)

        sender_factory.assert_not_called()

    def test_to_is_checked_first(self, request_factory):
        request = request_factory(to=[], from_="", event="")
        dispatcher = NotificationDispatcher(MagicMock(), MagicMock())

        with pytest.raises(ValidationError, match="empty to"):
            dispatcher.create_notification(request)


@pytest.mark.unit
class TestCollaborators:
    """Tests for sender and resolver acquisition."""

    def test_sender_configuration_error_skips_resolution(self, request_factory):
        resolver_factory = MagicMock()

        def broken_sender():
            raise ConfigurationError("unsupported mail provider: carrier-pigeon")

        dispatcher = NotificationDispatcher(broken_sender, resolver_factory)

        with pytest.raises(ConfigurationError):
            dispatcher.create_notification(request_factory())

        resolver_factory.assert_not_called()

    def test_resolution_error_propagates_without_sends(
        self, mock_sender, mock_resolver, request_factory
    ):
        mock_resolver.sub_to_info.side_effect = ResolutionError("boom")
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        with pytest.raises(ResolutionError, match="boom"):
            dispatcher.create_notification(request_factory())

        mock_sender.send.assert_not_called()

    def test_sender_not_found_propagates(
        self, mock_sender, mock_resolver, request_factory
    ):
        mock_resolver.sub_to_info.side_effect = SenderNotFoundError("sender")
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        with pytest.raises(SenderNotFoundError, match="from not found: sender"):
            dispatcher.create_notification(request_factory())

    def test_resolver_called_with_from_and_to(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory([("a", "en")])
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        dispatcher.create_notification(request_factory(to=["a"], from_="sender"))

        mock_resolver.sub_to_info.assert_called_once_with("sender", ["a"])


@pytest.mark.unit
class TestDispatchOrder:
    """Tests for language grouping and ordering."""

    def test_groups_in_first_seen_order(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory(
            [("a", "en"), ("b", "zh-TW"), ("c", "en")]
        )
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        result = dispatcher.create_notification(request_factory(to=["a", "b", "c"]))

        sent = [
            (c.args[0].recipients[0].sub, c.args[0].lang)
            for c in mock_sender.send.call_args_list
        ]
        assert sent == [("a", "en"), ("c", "en"), ("b", "zh-TW")]
        assert result.status == DispatchStatus.ACCEPTED
        assert [s.message_id for s in result.successes] == ["msg-a", "msg-c", "msg-b"]

    def test_each_send_has_a_single_recipient(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory(
            [("a", "en"), ("b", "en")]
        )
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        dispatcher.create_notification(request_factory(to=["a", "b"]))

        for c in mock_sender.send.call_args_list:
            notification = c.args[0]
            assert len(notification.recipients) == 1
            assert notification.sender.sub == "sender"
            assert notification.template_name == "welcome_en"

    def test_empty_language_is_a_group(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory([("a", "")])
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        dispatcher.create_notification(request_factory(to=["a"]))

        assert mock_sender.send.call_args.args[0].template_name == "welcome_"


@pytest.mark.unit
class TestDataEnrichment:
    """Tests for FROM/TO injection and header forwarding."""

    def test_from_and_to_are_injected_per_recipient(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory(
            [("alice", "en"), ("bob", "en")]
        )
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        dispatcher.create_notification(
            request_factory(to=["alice", "bob"], data={"link": "https://x"})
        )

        first, second = [c.args[0].data for c in mock_sender.send.call_args_list]
        assert first == {"link": "https://x", FROM_KEY: "Sender", TO_KEY: "Alice"}
        assert second == {"link": "https://x", FROM_KEY: "Sender", TO_KEY: "Bob"}

    def test_request_data_is_not_mutated(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory([("a", "en")])
        request = request_factory(to=["a"], data={"k": "v"})
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        dispatcher.create_notification(request)

        assert request.data == {"k": "v"}

    def test_forwarded_headers_are_copied(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory([("a", "en")])
        dispatcher = build_dispatcher(
            mock_sender, mock_resolver, forward_headers=["X-Tenant", "X-Trace"]
        )

        dispatcher.create_notification(
            request_factory(to=["a"]), headers={"x-tenant": "acme"}
        )

        data = mock_sender.send.call_args.args[0].data
        assert data["X-Tenant"] == "acme"
        assert data["X-Trace"] == "missing header: X-Trace"

    def test_no_forwarded_headers_by_default(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory([("a", "en")])
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        dispatcher.create_notification(
            request_factory(to=["a"]), headers={"X-Tenant": "acme"}
        )

        assert "X-Tenant" not in mock_sender.send.call_args.args[0].data


@pytest.mark.unit
class TestThrottle:
    """Tests for the delay between consecutive sends."""

    def test_no_delay_before_first_send(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        sleep = MagicMock()
        mock_resolver.sub_to_info.return_value = classification_factory([("a", "en")])
        dispatcher = build_dispatcher(mock_sender, mock_resolver, sleep=sleep)

        dispatcher.create_notification(request_factory(to=["a"]))

        sleep.assert_not_called()

    def test_delay_between_sends_across_groups(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        sleep = MagicMock()
        mock_resolver.sub_to_info.return_value = classification_factory(
            [("a", "en"), ("b", "fr"), ("c", "en")]
        )
        dispatcher = build_dispatcher(
            mock_sender, mock_resolver, sleep=sleep, send_interval=0.0002
        )

        dispatcher.create_notification(request_factory(to=["a", "b", "c"]))

        assert sleep.call_args_list == [call(0.0002), call(0.0002)]

    def test_delay_applies_after_failed_sends(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        sleep = MagicMock()
        mock_sender.send.side_effect = SendError("rejected")
        mock_resolver.sub_to_info.return_value = classification_factory(
            [("a", "en"), ("b", "en")]
        )
        dispatcher = build_dispatcher(mock_sender, mock_resolver, sleep=sleep)

        dispatcher.create_notification(request_factory(to=["a", "b"]))

        assert sleep.call_count == 1

    def test_zero_interval_disables_delay(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        sleep = MagicMock()
        mock_resolver.sub_to_info.return_value = classification_factory(
            [("a", "en"), ("b", "en")]
        )
        dispatcher = build_dispatcher(
            mock_sender, mock_resolver, sleep=sleep, send_interval=0
        )

        dispatcher.create_notification(request_factory(to=["a", "b"]))

        sleep.assert_not_called()


@pytest.mark.unit
class TestAggregation:
    """Tests for accepted / partial / failed outcomes."""

    def test_partial_failure_continues_and_reports(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        def send(notification):
            if notification.recipients[0].sub == "b":
                raise TemplateNotFoundError(notification.template_name)
            return "ok"

        mock_sender.send.side_effect = send
        mock_resolver.sub_to_info.return_value = classification_factory(
            [("a", "en"), ("b", "de"), ("c", "en")]
        )
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        result = dispatcher.create_notification(request_factory(to=["a", "b", "c"]))

        assert result.status == DispatchStatus.PARTIAL
        assert mock_sender.send.call_count == 3
        assert [f.to_dict() for f in result.failures] == [
            {"error": "template does not exist: welcome_de", "email": "b@example.com"}
        ]

    def test_all_failed_surfaces_first_error(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_sender.send.side_effect = [SendError("first"), SendError("second")]
        mock_resolver.sub_to_info.return_value = classification_factory(
            [("a", "en"), ("b", "en")]
        )
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        result = dispatcher.create_notification(request_factory(to=["a", "b"]))

        assert result.status == DispatchStatus.FAILED
        assert result.first_error == "first"

    def test_unexpected_exceptions_are_recorded(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_sender.send.side_effect = [RuntimeError("socket closed"), "ok"]
        mock_resolver.sub_to_info.return_value = classification_factory(
            [("a", "en"), ("b", "en")]
        )
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        result = dispatcher.create_notification(request_factory(to=["a", "b"]))

        assert result.status == DispatchStatus.PARTIAL
        assert result.failures[0].error == "socket closed"

    def test_dropped_recipient_prevents_failed_status(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        # "ghost" is unknown to the identity service and produces no outcome
        mock_sender.send.side_effect = SendError("rejected")
        mock_resolver.sub_to_info.return_value = classification_factory([("a", "en")])
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        result = dispatcher.create_notification(request_factory(to=["a", "ghost"]))

        assert result.requested == 2
        assert len(result.failures) == 1
        assert result.status == DispatchStatus.PARTIAL

    def test_all_recipients_dropped_is_accepted(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory([])
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        result = dispatcher.create_notification(request_factory(to=["ghost"]))

        mock_sender.send.assert_not_called()
        assert result.status == DispatchStatus.ACCEPTED
        assert result.successes == []

    def test_success_outcome_fields(
        self, mock_sender, mock_resolver, request_factory, classification_factory
    ):
        mock_resolver.sub_to_info.return_value = classification_factory([("a", "fr")])
        dispatcher = build_dispatcher(mock_sender, mock_resolver)

        result = dispatcher.create_notification(
            request_factory(to=["a"], event="reset")
        )

        assert result.successes[0].to_dict() == {
            "to": "a@example.com",
            "message_id": "msg-a",
            "lang": "fr",
            "sender": "Sender",
            "event": "reset",
        }
