"""Service readiness tracking."""

from infrastructure.health.readiness import (
    READY_MESSAGE,
    ReadinessChecker,
    ReadinessState,
)

__all__ = ["READY_MESSAGE", "ReadinessChecker", "ReadinessState"]
