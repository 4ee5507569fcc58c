"""Template store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from infrastructure.notifications.exceptions import NotificationError
from infrastructure.operations import OperationResult, OperationStatus
from infrastructure.templates.models import EmailTemplate, TemplatePage


class TemplateStore(ABC):
    """Persistent storage of email templates addressed by name.

    Implementations raise TemplateNotFoundError for lookups of absent
    templates and TemplateStoreError when the backend itself fails.
    """

    @abstractmethod
    def is_template_exist(self, name: str) -> bool:
        """Return True when a template is stored under the name."""

    @abstractmethod
    def get_template(self, name: str) -> EmailTemplate:
        """Return the stored template, raising TemplateNotFoundError if absent."""

    @abstractmethod
    def create_template(self, template: EmailTemplate) -> None:
        """Store a new template under template.name."""

    @abstractmethod
    def update_template(self, template: EmailTemplate) -> None:
        """Replace the content of an existing template."""

    @abstractmethod
    def delete_template(self, name: str) -> None:
        """Remove a template."""

    @abstractmethod
    def list_templates(self, next_token: Optional[str] = None) -> TemplatePage:
        """Return one page of template summaries."""

    def health_check(self) -> OperationResult:
        """Probe the backend by listing the first page of templates."""
        try:
            page = self.list_templates()
        except NotificationError as e:
            return OperationResult.error(
                OperationStatus.TRANSIENT_ERROR,
                message=str(e),
                error_code="TEMPLATE_STORE_UNAVAILABLE",
            )
        return OperationResult.success(
            data={"templates": len(page.templates)}, message="template store ready"
        )
