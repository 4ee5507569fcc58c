"""Mail provider senders."""

from infrastructure.notifications.senders.base import Sender
from infrastructure.notifications.senders.factory import build_sender
from infrastructure.notifications.senders.ses import SesSender
from infrastructure.notifications.senders.smtp import (
    SmtpConfig,
    SmtpSender,
    render_placeholders,
)

__all__ = [
    "Sender",
    "build_sender",
    "SesSender",
    "SmtpConfig",
    "SmtpSender",
    "render_placeholders",
]
