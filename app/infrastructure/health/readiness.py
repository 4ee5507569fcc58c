"""Readiness tracking for the identity service and the email backend.

Each collaborator is probed until it answers successfully once; from then on
it is considered ready for the lifetime of the process.
"""

import threading
from dataclasses import dataclass, field
from typing import Callable

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import NotificationError
from infrastructure.operations import OperationResult, OperationStatus

logger = get_module_logger()

READY_MESSAGE = "service notification is ready"

Probe = Callable[[], OperationResult]


@dataclass
class ReadinessState:
    """Monotonic readiness flags. A flag set to True is never reset."""

    identity_ready: bool = False
    email_ready: bool = False
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def mark_identity_ready(self) -> None:
        with self._lock:
            self.identity_ready = True

    def mark_email_ready(self) -> None:
        with self._lock:
            self.email_ready = True

    @property
    def is_ready(self) -> bool:
        return self.identity_ready and self.email_ready


class ReadinessChecker:
    """Probe collaborators that have not yet been seen ready.

    Args:
        state: Shared readiness flags
        identity_probe: Returns the identity service readiness
        email_probe: Returns the template store readiness
    """

    def __init__(self, state: ReadinessState, identity_probe: Probe, email_probe: Probe):
        self.state = state
        self.identity_probe = identity_probe
        self.email_probe = email_probe

    def check(self) -> OperationResult:
        if not self.state.identity_ready:
            result = self._probe("identity", self.identity_probe)
            if not result.is_success:
                return result
            self.state.mark_identity_ready()
            logger.info("identity_service_ready")

        if not self.state.email_ready:
            result = self._probe("email", self.email_probe)
            if not result.is_success:
                return result
            self.state.mark_email_ready()
            logger.info("email_service_ready")

        return OperationResult.success(message=READY_MESSAGE)

    @staticmethod
    def _probe(name: str, probe: Probe) -> OperationResult:
        try:
            result = probe()
        except NotificationError as e:
            result = OperationResult.error(
                OperationStatus.TRANSIENT_ERROR, message=str(e), error_code="NOT_READY"
            )

        if result.is_success:
            return result

        logger.warning("readiness_check_failed", service=name, detail=result.message)
        return result.prefixed(f"{name} service is not ready")
