"""AWS integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS SES configuration settings.

    Environment Variables:
        AWS_REGION: AWS region for SES (default: ca-central-1)
        AWS_SES_FROM: From address used for SES sends
        AWS_SHARED_CREDENTIALS_FILE: Optional shared credentials file path
        AWS_PROFILE: Optional credentials profile name
        AWS_ENDPOINT_URL: Optional custom endpoint (LocalStack, tests)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        region = settings.aws.AWS_REGION
        ```
    """

    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
    SES_FROM: str = Field(default="", alias="AWS_SES_FROM")
    CREDENTIALS_FILE: str | None = Field(
        default=None, alias="AWS_SHARED_CREDENTIALS_FILE"
    )
    PROFILE: str | None = Field(default=None, alias="AWS_PROFILE")
    ENDPOINT_URL: str | None = Field(default=None, alias="AWS_ENDPOINT_URL")
