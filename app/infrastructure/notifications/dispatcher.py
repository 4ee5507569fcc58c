"""Notification dispatch orchestration.

A request fans out to one email per resolved recipient. Recipients are
grouped by language so each group is rendered with its own localized
template; failures of individual recipients are collected and never stop
the remaining sends.
"""

import time
from typing import Callable, Dict, Mapping, Optional, Sequence

from infrastructure.identity.resolver import IdentityResolver
from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import NotificationError
from infrastructure.notifications.models import (
    CreateNotificationRequest,
    DispatchResult,
    Notification,
    SendFailure,
    SendOutcome,
)
from infrastructure.notifications.senders.base import Sender

logger = get_module_logger()

FROM_KEY = "FROM"
TO_KEY = "TO"
DEFAULT_SEND_INTERVAL_SECONDS = 0.0002


def missing_header_value(name: str) -> str:
    return f"missing header: {name}"


class NotificationDispatcher:
    """Validate, resolve and send a notification request.

    Args:
        sender_factory: Returns the Sender of the configured provider.
            Called once per request, after validation.
        resolver_factory: Returns the IdentityResolver. Called once per
            request, after the sender was acquired.
        forward_headers: Inbound header names copied into the template data.
        send_interval: Delay in seconds before every send but the first.
        sleep: Sleep function, replaced in tests.

    Example:
        dispatcher = NotificationDispatcher(get_sender, get_identity_resolver)
        result = dispatcher.create_notification(request, headers=request_headers)
        if result.status == DispatchStatus.PARTIAL:
            ...
    """

    def __init__(
        self,
        sender_factory: Callable[[], Sender],
        resolver_factory: Callable[[], IdentityResolver],
        forward_headers: Sequence[str] = (),
        send_interval: float = DEFAULT_SEND_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.sender_factory = sender_factory
        self.resolver_factory = resolver_factory
        self.forward_headers = list(forward_headers)
        self.send_interval = send_interval
        self._sleep = sleep

    def forwarded_data(
        self, headers: Optional[Mapping[str, str]] = None
    ) -> Dict[str, str]:
        """Return the configured headers keyed by their configured names.

        Header lookup is case-insensitive. Absent headers get a placeholder
        value so templates render a diagnostic.
        """
        lowered = {k.lower(): v for k, v in (headers or {}).items()}
        return {
            name: lowered.get(name.lower(), missing_header_value(name))
            for name in self.forward_headers
        }

    def create_notification(
        self,
        request: CreateNotificationRequest,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DispatchResult:
        """Send one email per resolved recipient and aggregate the outcome.

        Raises:
            ValidationError: If the request is incomplete. Nothing is called.
            ConfigurationError: If the sender or resolver cannot be built.
            ResolutionError: If identities cannot be resolved.
        """
        request.validate_request()

        sender = self.sender_factory()
        resolver = self.resolver_factory()
        classification = resolver.sub_to_info(request.from_, request.to)

        result = DispatchResult(requested=len(request.to))
        if classification is None:
            return result

        data = dict(request.data or {})
        data[FROM_KEY] = classification.sender.name
        data.update(self.forwarded_data(headers))

        log = logger.bind(notification_event=request.event, sender=request.from_)
        sent_count = 0
        for lang in classification.langs:
            for info in classification.infos(lang):
                if sent_count > 0 and self.send_interval > 0:
                    self._sleep(self.send_interval)
                sent_count += 1

                data[TO_KEY] = info.name
                notification = Notification(
                    event=request.event,
                    lang=lang,
                    sender=classification.sender,
                    recipients=[info],
                    data=dict(data),
                )
                try:
                    message_id = sender.send(notification)
                except NotificationError as e:
                    log.warning(
                        "notification_send_failed",
                        recipient=info.sub,
                        lang=lang,
                        error=str(e),
                    )
                    result.failures.append(SendFailure(email=info.email, error=str(e)))
                    continue
                except Exception as e:
                    log.exception(
                        "notification_send_unexpected_error",
                        recipient=info.sub,
                        lang=lang,
                    )
                    result.failures.append(SendFailure(email=info.email, error=str(e)))
                    continue

                result.successes.append(
                    SendOutcome(
                        to=info.email,
                        message_id=message_id,
                        lang=lang,
                        sender=classification.sender.name,
                        event=request.event,
                    )
                )

        log.info(
            "notification_dispatched",
            provider=sender.provider_name,
            requested=result.requested,
            sent=len(result.successes),
            failed=len(result.failures),
            status=result.status.value,
        )
        return result
