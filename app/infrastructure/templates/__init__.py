"""Email templates: models, YAML files, stores and management service."""

from infrastructure.templates.models import (
    EmailTemplate,
    TemplatePage,
    TemplateSummary,
    get_template_name,
    split_template_name,
)
from infrastructure.templates.service import TemplateService
from infrastructure.templates.stores import (
    FileTemplateStore,
    SesTemplateStore,
    TemplateStore,
)

__all__ = [
    "EmailTemplate",
    "TemplatePage",
    "TemplateSummary",
    "get_template_name",
    "split_template_name",
    "TemplateService",
    "TemplateStore",
    "FileTemplateStore",
    "SesTemplateStore",
]
