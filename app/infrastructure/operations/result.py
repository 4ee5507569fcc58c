"""Result type for calls to external collaborators.

Health probes and template store checks return an ``OperationResult``
instead of raising, so callers can turn a failure into a response message.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a collaborator call.

    Attributes:
        status: Outcome category.
        message: Human readable detail, surfaced in readiness errors.
        data: Optional payload (e.g. a template count).
        error_code: Optional machine readable code.
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Network failures, timeouts, throttling and 5xx answers."""
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Bad input or an answer that will not change on a second try."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    def prefixed(self, prefix: str) -> "OperationResult":
        """Return a copy whose message reads ``"<prefix>[: <message>]"``."""
        message = f"{prefix}: {self.message}" if self.message else prefix
        return replace(self, message=message)
