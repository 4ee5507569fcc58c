"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.health import ReadinessChecker
from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.services.providers import (
    get_notification_dispatcher,
    get_readiness_checker,
    get_settings,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Notification dispatcher dependency
NotificationDispatcherDep = Annotated[
    NotificationDispatcher, Depends(get_notification_dispatcher)
]

# Readiness checker dependency, holds the process-wide readiness latch
ReadinessCheckerDep = Annotated[ReadinessChecker, Depends(get_readiness_checker)]

__all__ = [
    "SettingsDep",
    "NotificationDispatcherDep",
    "ReadinessCheckerDep",
]
