"""Email template models.

A template is addressed by the composite name ``<event>_<lang>``. The name
is a literal concatenation: underscores inside ``event`` or ``lang`` are not
escaped, so distinct pairs can produce the same name.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from infrastructure.notifications.exceptions import ValidationError


def get_template_name(event: str, lang: str) -> str:
    """Return the template name for an event/language pair.

    Example:
        get_template_name("welcome", "en")  # "welcome_en"
        get_template_name("", "en")         # "_en"
    """
    return f"{event}_{lang}"


def split_template_name(name: str) -> tuple[str, str]:
    """Split a template name at its last underscore into (event, lang).

    Raises:
        ValidationError: If the name contains no underscore.
    """
    event, sep, lang = name.rpartition("_")
    if not sep:
        raise ValidationError(f"invalid template name: {name}")
    return event, lang


class EmailTemplate(BaseModel):
    """Localized email template content.

    Attributes:
        event: Event the template is sent for (e.g. "welcome")
        lang: Language key (e.g. "en", "zh-TW")
        subject: Subject line, may contain {{KEY}} placeholders
        html: HTML body
        text: Plain text body ("plaint" is accepted as an input alias)
    """

    event: str = ""
    lang: str = ""
    subject: str = ""
    html: str = ""
    text: str = Field(default="", validation_alias=AliasChoices("text", "plaint"))

    @property
    def name(self) -> str:
        return get_template_name(self.event, self.lang)

    def validate_content(self) -> None:
        """Check the template can be stored.

        Raises:
            ValidationError: If event, lang or subject is empty, or if both
                bodies are empty.
        """
        if not self.event:
            raise ValidationError("template event is empty")
        if not self.lang:
            raise ValidationError("template lang is empty")
        if not self.subject:
            raise ValidationError("template subject is empty")
        if not self.html and not self.text:
            raise ValidationError("template body is empty: html or text is required")


class TemplateSummary(BaseModel):
    """One entry of a template listing."""

    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TemplatePage(BaseModel):
    """A page of template summaries with the token of the next page, if any."""

    templates: List[TemplateSummary] = Field(default_factory=list)
    next_token: Optional[str] = None
