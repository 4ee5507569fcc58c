"""Sender selection from configuration."""

from typing import Optional

from infrastructure.clients.aws import get_ses_client
from infrastructure.configuration import Settings
from infrastructure.configuration.integrations.mail import SUPPORTED_PROVIDERS
from infrastructure.notifications.exceptions import ConfigurationError
from infrastructure.notifications.senders.base import Sender
from infrastructure.notifications.senders.ses import SesSender
from infrastructure.notifications.senders.smtp import SmtpConfig, SmtpSender
from infrastructure.templates.stores import (
    FileTemplateStore,
    SesTemplateStore,
    TemplateStore,
)


def build_sender(settings: Settings, store: Optional[TemplateStore] = None) -> Sender:
    """Build the Sender for ``MAIL_PROVIDER``.

    Args:
        settings: Application settings
        store: Template store to use; built from settings when omitted

    Raises:
        ConfigurationError: For an unknown provider tag or incomplete
            provider configuration.
    """
    provider = settings.mail.MAIL_PROVIDER
    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigurationError(f"unsupported mail provider: {provider}")

    if provider == "aws":
        client = get_ses_client(settings.aws)
        if not settings.aws.SES_FROM:
            raise ConfigurationError("AWS_SES_FROM is required for aws provider")
        return SesSender(
            client=client,
            store=store or SesTemplateStore(client),
            from_address=settings.aws.SES_FROM,
        )

    if not settings.mail.MAIL_TEMPLATE_DIR and store is None:
        raise ConfigurationError("MAIL_TEMPLATE_DIR is required for smtp provider")
    return SmtpSender(
        config=SmtpConfig.from_url(settings.mail.MAIL_SMTP_URL),
        store=store or FileTemplateStore(settings.mail.MAIL_TEMPLATE_DIR),
        from_address=settings.mail.MAIL_FROM,
    )
