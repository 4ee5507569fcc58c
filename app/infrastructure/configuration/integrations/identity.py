"""Identity service integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class IdentitySettings(IntegrationSettings):
    """Identity service configuration.

    Environment Variables:
        IDENTITY_URL: Base URL of the identity admin API (required to dispatch)
        IDENTITY_TIMEOUT_SECONDS: Client-side timeout for identity calls (default: 5)
        IDENTITY_PAGE_SIZE: page_size sent with batched lookups (default: 100)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        base_url = settings.identity.IDENTITY_URL
        ```
    """

    IDENTITY_URL: str = Field(default="", alias="IDENTITY_URL")
    IDENTITY_TIMEOUT_SECONDS: float = Field(
        default=5.0, gt=0, alias="IDENTITY_TIMEOUT_SECONDS"
    )
    IDENTITY_PAGE_SIZE: int = Field(default=100, ge=1, alias="IDENTITY_PAGE_SIZE")
