"""Template store backends."""

from infrastructure.templates.stores.base import TemplateStore
from infrastructure.templates.stores.file import FileTemplateStore
from infrastructure.templates.stores.ses import SesTemplateStore

__all__ = ["TemplateStore", "FileTemplateStore", "SesTemplateStore"]
