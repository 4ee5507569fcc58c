"""External integration settings."""

from infrastructure.configuration.integrations.aws import AwsSettings
from infrastructure.configuration.integrations.identity import IdentitySettings
from infrastructure.configuration.integrations.mail import (
    SUPPORTED_PROVIDERS,
    MailSettings,
)

__all__ = ["AwsSettings", "IdentitySettings", "MailSettings", "SUPPORTED_PROVIDERS"]
