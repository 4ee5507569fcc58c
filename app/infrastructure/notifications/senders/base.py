"""Mail sender interface."""

from abc import ABC, abstractmethod

from infrastructure.notifications.models import Notification


class Sender(ABC):
    """Delivers a Notification through a mail provider.

    Implementations look the notification's template up on every send and
    raise TemplateNotFoundError when it is absent, or SendError when the
    provider fails.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider tag (aws, smtp)."""

    @abstractmethod
    def send(self, notification: Notification) -> str:
        """Send the notification and return the provider message id."""
