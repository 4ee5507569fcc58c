"""Notification request, notification and dispatch result models."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.identity.models import Info
from infrastructure.notifications.exceptions import ValidationError
from infrastructure.templates.models import get_template_name


class CreateNotificationRequest(BaseModel):
    """Body of ``POST /notification``.

    ``from`` is a Python keyword, so the field is exposed as ``from_`` and
    accepts both spellings as input.

    Example:
        request = CreateNotificationRequest.model_validate(
            {"to": ["u1"], "from": "s1", "event": "welcome", "data": {}}
        )
        request.validate_request()
    """

    model_config = ConfigDict(populate_by_name=True)

    to: List[str] = Field(default_factory=list)
    from_: str = Field(default="", alias="from")
    event: str = ""
    data: Optional[Dict[str, str]] = None

    def validate_request(self) -> None:
        """Check the required fields before any external call.

        Raises:
            ValidationError: On the first missing field, in the order
                to, from, event, data.
        """
        if not self.to:
            raise ValidationError("empty to")
        if not self.from_:
            raise ValidationError("empty from")
        if not self.event:
            raise ValidationError("empty event")
        if self.data is None:
            raise ValidationError("empty data")


class Notification(BaseModel):
    """A single email to send: one template, one sender, its recipients."""

    event: str
    lang: str
    sender: Info
    recipients: List[Info] = Field(min_length=1)
    data: Dict[str, str] = Field(default_factory=dict)

    @property
    def template_name(self) -> str:
        return get_template_name(self.event, self.lang)

    def upper_key_data(self) -> Dict[str, str]:
        """Return the data with upper-cased keys, as referenced by placeholders."""
        return {key.upper(): value for key, value in self.data.items()}


class SendOutcome(BaseModel):
    """A recipient the provider accepted."""

    to: str
    message_id: str
    lang: str
    sender: str
    event: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class SendFailure(BaseModel):
    """A recipient that could not be sent to."""

    email: str
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "email": self.email}


class DispatchStatus(str, Enum):
    ACCEPTED = "accepted"
    PARTIAL = "partial"
    FAILED = "failed"


class DispatchResult(BaseModel):
    """Aggregated outcome of a notification request.

    ``requested`` is the number of recipient ids in the request. Ids the
    identity service did not return count towards it without producing an
    outcome, so a request is only ``failed`` when every requested recipient
    produced a failure.
    """

    requested: int
    successes: List[SendOutcome] = Field(default_factory=list)
    failures: List[SendFailure] = Field(default_factory=list)

    @property
    def status(self) -> DispatchStatus:
        if not self.failures:
            return DispatchStatus.ACCEPTED
        if len(self.failures) == self.requested:
            return DispatchStatus.FAILED
        return DispatchStatus.PARTIAL

    @property
    def first_error(self) -> Optional[str]:
        return self.failures[0].error if self.failures else None
