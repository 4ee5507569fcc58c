"""Infrastructure configuration module - public API.

Centralized configuration management for the notification service using
Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    provider = settings.mail.MAIL_PROVIDER
    identity_url = settings.identity.IDENTITY_URL
    ```
"""

from infrastructure.configuration.settings import Settings

__all__ = ["Settings"]
