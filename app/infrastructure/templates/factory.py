"""Template store selection from configuration."""

from infrastructure.clients.aws import get_ses_client
from infrastructure.configuration import Settings
from infrastructure.notifications.exceptions import ConfigurationError
from infrastructure.templates.stores import (
    FileTemplateStore,
    SesTemplateStore,
    TemplateStore,
)


def build_template_store(settings: Settings) -> TemplateStore:
    """Return the template store matching the configured mail provider.

    The ``aws`` provider keeps templates in SES; the ``smtp`` provider reads
    YAML files from ``MAIL_TEMPLATE_DIR``.

    Raises:
        ConfigurationError: For unknown providers or a missing template directory.
    """
    provider = settings.mail.MAIL_PROVIDER
    if provider == "aws":
        return SesTemplateStore(get_ses_client(settings.aws))
    if provider == "smtp":
        if not settings.mail.MAIL_TEMPLATE_DIR:
            raise ConfigurationError("MAIL_TEMPLATE_DIR is required for smtp provider")
        return FileTemplateStore(settings.mail.MAIL_TEMPLATE_DIR)
    raise ConfigurationError(f"unsupported mail provider: {provider}")
