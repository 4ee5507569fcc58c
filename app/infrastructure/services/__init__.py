"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    NotificationDispatcherDep,
    ReadinessCheckerDep,
    SettingsDep,
)
from infrastructure.services.providers import (
    get_identity_resolver,
    get_notification_dispatcher,
    get_readiness_checker,
    get_readiness_state,
    get_sender,
    get_settings,
    get_template_service,
    get_template_store,
)

__all__ = [
    "SettingsDep",
    "NotificationDispatcherDep",
    "ReadinessCheckerDep",
    "get_settings",
    "get_identity_resolver",
    "get_template_store",
    "get_template_service",
    "get_sender",
    "get_notification_dispatcher",
    "get_readiness_state",
    "get_readiness_checker",
]
