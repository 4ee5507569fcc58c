"""YAML file template store.

Each template lives in ``<directory>/<name>.yml`` using the same document
layout as the files accepted by ``mail apply-tpl``.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import yaml

from infrastructure.logging import get_module_logger
from infrastructure.notifications.exceptions import (
    TemplateNotFoundError,
    TemplateStoreError,
    ValidationError,
)
from infrastructure.templates.loader import load_template_file, template_to_dict
from infrastructure.templates.models import (
    EmailTemplate,
    TemplatePage,
    TemplateSummary,
)
from infrastructure.templates.stores.base import TemplateStore

logger = get_module_logger()

SUFFIX = ".yml"


class FileTemplateStore(TemplateStore):
    """Templates stored as YAML files in a single directory.

    Listing pages are addressed by the name of the last template of the
    previous page.
    """

    def __init__(self, directory: Path, page_size: int = 100):
        self.directory = Path(directory)
        self.page_size = page_size

    def _path(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name.startswith("."):
            raise ValidationError(f"invalid template name: {name}")
        return self.directory / f"{name}{SUFFIX}"

    def is_template_exist(self, name: str) -> bool:
        return self._path(name).is_file()

    def get_template(self, name: str) -> EmailTemplate:
        path = self._path(name)
        if not path.is_file():
            raise TemplateNotFoundError(name)
        try:
            return load_template_file(path)
        except ValidationError as e:
            raise TemplateStoreError(str(e)) from e

    def create_template(self, template: EmailTemplate) -> None:
        self._write(template)
        logger.info("file_template_created", template=template.name)

    def update_template(self, template: EmailTemplate) -> None:
        if not self.is_template_exist(template.name):
            raise TemplateNotFoundError(template.name)
        self._write(template)
        logger.info("file_template_updated", template=template.name)

    def delete_template(self, name: str) -> None:
        path = self._path(name)
        if not path.is_file():
            raise TemplateNotFoundError(name)
        try:
            path.unlink()
        except OSError as e:
            logger.error("file_template_delete_failed", template=name, error=str(e))
            raise TemplateStoreError(f"failed to delete template {name}: {e}") from e
        logger.info("file_template_deleted", template=name)

    def list_templates(self, next_token: Optional[str] = None) -> TemplatePage:
        if not self.directory.is_dir():
            raise TemplateStoreError(
                f"template directory does not exist: {self.directory}"
            )

        paths: List[Path] = sorted(self.directory.glob(f"*{SUFFIX}"))
        if next_token:
            paths = [p for p in paths if p.stem > next_token]

        page = paths[: self.page_size]
        summaries = []
        for path in page:
            stat = path.stat()
            summaries.append(
                TemplateSummary(
                    name=path.stem,
                    updated_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                )
            )

        token = page[-1].stem if len(paths) > self.page_size else None
        return TemplatePage(templates=summaries, next_token=token)

    def _write(self, template: EmailTemplate) -> None:
        path = self._path(template.name)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                yaml.safe_dump(
                    template_to_dict(template),
                    f,
                    allow_unicode=True,
                    sort_keys=False,
                )
        except OSError as e:
            logger.error(
                "file_template_write_failed", template=template.name, error=str(e)
            )
            raise TemplateStoreError(
                f"failed to write template {template.name}: {e}"
            ) from e
