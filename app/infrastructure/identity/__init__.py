"""Identity resolution against the identity service."""

from infrastructure.identity.models import (
    ClassificationLang,
    IdentityRecord,
    IdentityTraits,
    Info,
)
from infrastructure.identity.resolver import IdentityResolver

__all__ = [
    "ClassificationLang",
    "IdentityRecord",
    "IdentityTraits",
    "Info",
    "IdentityResolver",
]
