"""Unit tests for SesSender."""

import json
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from infrastructure.notifications.exceptions import SendError, TemplateNotFoundError
from infrastructure.notifications.senders import SesSender


@pytest.fixture
def client():
    client = MagicMock()
    client.send_email.return_value = {"MessageId": "ses-123"}
    return client


@pytest.fixture
def sender(client, mock_template_store):
    mock_template_store.is_template_exist.return_value = True
    return SesSender(client, mock_template_store, "noreply@example.com")


@pytest.mark.unit
class TestSesSender:
    def test_send(self, sender, client, notification_factory, info_factory):
        notification = notification_factory(
            lang="en",
            recipients=[info_factory("alice")],
            data={"FROM": "Sender", "TO": "Alice", "link": "x"},
        )

        assert sender.send(notification) == "ses-123"

        kwargs = client.send_email.call_args.kwargs
        assert kwargs["FromEmailAddress"] == "noreply@example.com"
        assert kwargs["Destination"] == {"ToAddresses": ["alice@example.com"]}
        template = kwargs["Content"]["Template"]
        assert template["TemplateName"] == "welcome_en"
        assert json.loads(template["TemplateData"]) == {
            "FROM": "Sender",
            "TO": "Alice",
            "link": "x",
        }

    def test_template_checked_on_every_send(
        self, sender, mock_template_store, notification_factory
    ):
        sender.send(notification_factory())
        sender.send(notification_factory())

        assert mock_template_store.is_template_exist.call_count == 2

    def test_missing_template(
        self, sender, client, mock_template_store, notification_factory
    ):
        mock_template_store.is_template_exist.return_value = False

        with pytest.raises(TemplateNotFoundError, match="welcome_zh-TW"):
            sender.send(notification_factory(lang="zh-TW"))

        client.send_email.assert_not_called()

    def test_client_error(self, sender, client, notification_factory):
        client.send_email.side_effect = ClientError(
            {"Error": {"Code": "MessageRejected", "Message": "no"}}, "SendEmail"
        )

        with pytest.raises(SendError, match="failed to send email"):
            sender.send(notification_factory())

    def test_connection_error(self, sender, client, notification_factory):
        client.send_email.side_effect = EndpointConnectionError(
            endpoint_url="https://email.ca-central-1.amazonaws.com"
        )

        with pytest.raises(SendError):
            sender.send(notification_factory())

    def test_missing_message_id(self, sender, client, notification_factory):
        client.send_email.return_value = {}

        with pytest.raises(SendError, match="no message id"):
            sender.send(notification_factory())

    def test_provider_name(self, sender):
        assert sender.provider_name == "aws"
