"""YAML template file loading.

Template files look like::

    event: welcome
    lang: en
    subject: "Welcome {{TO}}"
    body:
      html: "<p>Hello {{TO}}, {{FROM}} invited you.</p>"
      text: "Hello {{TO}}, {{FROM}} invited you."

``body.plaint`` is accepted in place of ``body.text``.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import ValidationError
from infrastructure.templates.models import EmailTemplate

logger = get_module_logger()


def template_from_dict(data: Dict[str, Any]) -> EmailTemplate:
    """Build an EmailTemplate from the YAML document structure."""
    body = data.get("body") or {}
    if not isinstance(body, dict):
        raise ValidationError("template body must be a mapping")
    return EmailTemplate.model_validate(
        {
            "event": str(data.get("event") or ""),
            "lang": str(data.get("lang") or ""),
            "subject": str(data.get("subject") or ""),
            "html": str(body.get("html") or ""),
            "text": str(body.get("text") or body.get("plaint") or ""),
        }
    )


def template_to_dict(template: EmailTemplate) -> Dict[str, Any]:
    """Inverse of template_from_dict."""
    return {
        "event": template.event,
        "lang": template.lang,
        "subject": template.subject,
        "body": {"html": template.html, "text": template.text},
    }


def load_template_file(path: Path) -> EmailTemplate:
    """Read and parse a YAML template file.

    Raises:
        ValidationError: If the file is missing, unreadable or not a YAML mapping.
    """
    if not path.is_file():
        raise ValidationError(f"file {path} does not exist")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.error("template_file_load_failed", path=str(path), error=str(exc))
        raise ValidationError(f"failed to load template file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValidationError(f"template file {path} must contain a YAML mapping")

    return template_from_dict(data)
