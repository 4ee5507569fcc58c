"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
Providers that build collaborators from configuration raise ConfigurationError
when the configuration is incomplete; failures are not cached.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.health import ReadinessChecker, ReadinessState
from infrastructure.identity import IdentityResolver
from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.notifications.senders import Sender, build_sender
from infrastructure.templates import TemplateService, TemplateStore
from infrastructure.templates.factory import build_template_store


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_identity_resolver() -> IdentityResolver:
    """
    Get application-scoped identity resolver singleton.

    Returns:
        IdentityResolver: Resolver configured from settings.identity.

    Raises:
        ConfigurationError: If IDENTITY_URL is not configured.
    """
    settings = get_settings()
    return IdentityResolver(
        base_url=settings.identity.IDENTITY_URL,
        timeout=settings.identity.IDENTITY_TIMEOUT_SECONDS,
        page_size=settings.identity.IDENTITY_PAGE_SIZE,
    )


@lru_cache
def get_template_store() -> TemplateStore:
    """Template store of the configured mail provider (SES or YAML files)."""
    return build_template_store(get_settings())


@lru_cache
def get_template_service() -> TemplateService:
    settings = get_settings()
    return TemplateService(
        store=get_template_store(),
        allowed_dirs=settings.mail.MAIL_TEMPLATE_ALLOWED_DIRS,
    )


@lru_cache
def get_sender() -> Sender:
    """
    Get the Sender of the configured mail provider.

    Raises:
        ConfigurationError: For an unknown MAIL_PROVIDER or incomplete
            provider configuration.
    """
    return build_sender(get_settings(), store=get_template_store())


@lru_cache
def get_notification_dispatcher() -> NotificationDispatcher:
    """
    Get application-scoped notification dispatcher singleton.

    The sender and resolver are acquired lazily on every request so that
    configuration errors surface as request errors.
    """
    settings = get_settings()
    return NotificationDispatcher(
        sender_factory=get_sender,
        resolver_factory=get_identity_resolver,
        forward_headers=settings.server.FORWARD_HEADERS,
        send_interval=settings.mail.MAIL_SEND_INTERVAL_SECONDS,
    )


@lru_cache
def get_readiness_state() -> ReadinessState:
    return ReadinessState()


def _identity_probe():
    return get_identity_resolver().is_ready()


def _email_probe():
    return get_template_store().health_check()


@lru_cache
def get_readiness_checker() -> ReadinessChecker:
    return ReadinessChecker(
        state=get_readiness_state(),
        identity_probe=_identity_probe,
        email_probe=_email_probe,
    )
