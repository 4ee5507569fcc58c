"""Template management operations used by the CLI."""

from pathlib import Path
from typing import List, Optional, Sequence

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import (
    TemplateNotFoundError,
    ValidationError,
)
from infrastructure.templates.loader import load_template_file
from infrastructure.templates.models import EmailTemplate, TemplatePage
from infrastructure.templates.stores.base import TemplateStore

logger = get_module_logger()


class TemplateService:
    """Apply, delete, list and inspect templates in a TemplateStore.

    Args:
        store: Backend the templates are stored in.
        allowed_dirs: Directories template files may be applied from.
            Defaults to the current user's home directory.
    """

    def __init__(
        self, store: TemplateStore, allowed_dirs: Optional[Sequence[Path]] = None
    ):
        self.store = store
        dirs = list(allowed_dirs) if allowed_dirs else [Path.home()]
        self.allowed_dirs: List[Path] = [Path(d).expanduser().resolve() for d in dirs]

    def is_allowed_path(self, path: Path) -> bool:
        resolved = Path(path).expanduser().resolve()
        return any(resolved.is_relative_to(d) for d in self.allowed_dirs)

    def apply(self, path: Path) -> EmailTemplate:
        """Create or update a template from a YAML file.

        Raises:
            ValidationError: If the file is outside the allowed directories,
                missing, malformed or incomplete.
        """
        path = Path(path).expanduser()
        if not self.is_allowed_path(path):
            raise ValidationError(f"file {path} is not in an allowed directory")

        template = load_template_file(path)
        template.validate_content()

        if self.store.is_template_exist(template.name):
            self.store.update_template(template)
            action = "updated"
        else:
            self.store.create_template(template)
            action = "created"

        logger.info("template_applied", template=template.name, action=action)
        return template

    def delete(self, name: str) -> None:
        if not self.store.is_template_exist(name):
            raise TemplateNotFoundError(name)
        self.store.delete_template(name)
        logger.info("template_deleted", template=name)

    def list(self, next_token: Optional[str] = None) -> TemplatePage:
        return self.store.list_templates(next_token)

    def detail(self, name: str) -> EmailTemplate:
        return self.store.get_template(name)
