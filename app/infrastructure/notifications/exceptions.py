"""Exceptions raised by the notification pipeline.

Request-level errors (validation, configuration, identity resolution) abort
the whole request. Recipient-level errors (template lookup, provider send)
are recorded per recipient and aggregated by the dispatcher.

Every exception carries the HTTP status it is reported with.
"""


class NotificationError(Exception):
    """Base exception for all notification pipeline errors.

    Example:
        try:
            dispatcher.create_notification(request)
        except NotificationError as e:
            logger.error("notification_failed", error=str(e))
    """

    status_code = 500


class ValidationError(NotificationError):
    """Raised when a request or a template fails validation."""

    status_code = 400


class ConfigurationError(NotificationError):
    """Raised when a provider or collaborator is missing or misconfigured."""


class ResolutionError(NotificationError):
    """Raised when identities cannot be resolved through the identity service."""


class SenderNotFoundError(ResolutionError):
    """Raised when the sender id is absent from the identity service response."""

    def __init__(self, sender_id: str):
        self.sender_id = sender_id
        super().__init__(f"from not found: {sender_id}")


class TemplateNotFoundError(NotificationError):
    """Raised when no template exists under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"template does not exist: {name}")


class TemplateStoreError(NotificationError):
    """Raised when the template store backend fails."""


class SendError(NotificationError):
    """Raised when the mail provider rejects or fails to deliver an email."""
