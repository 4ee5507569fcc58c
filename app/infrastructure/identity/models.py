"""Identity models.

Normalized views of the identity service records and the per-language
classification of a notification's recipients.
"""

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

ACTIVE_STATE = "active"


class IdentityTraits(BaseModel):
    """Traits attached to an identity record."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""
    language: str = ""


class IdentityRecord(BaseModel):
    """One entry of the identity service ``/admin/identities`` response."""

    model_config = ConfigDict(extra="ignore")

    id: str
    state: str = ""
    traits: IdentityTraits = Field(default_factory=IdentityTraits)


class Info(BaseModel):
    """Resolved contact data of a sender or recipient.

    Attributes:
        sub: Subject id in the identity service
        name: Display name
        email: Email address
        enabled: True when the identity is active
    """

    model_config = ConfigDict(frozen=True)

    sub: str
    name: str = ""
    email: str = ""
    enabled: bool = False

    @classmethod
    def from_record(cls, record: IdentityRecord) -> "Info":
        return cls(
            sub=record.id,
            name=record.traits.name,
            email=record.traits.email,
            enabled=record.state == ACTIVE_STATE,
        )


class ClassificationLang:
    """Recipients grouped by language, plus the sender.

    Languages keep the order in which they were first seen while iterating
    the identity response; recipients keep that same order inside their
    bucket. The sender is never placed in a bucket. The empty string is a
    valid language key.
    """

    def __init__(
        self,
        sender: Info,
        sender_lang: str,
        langs: List[str],
        infos: Dict[str, List[Info]],
    ):
        self._sender = sender
        self._sender_lang = sender_lang
        self._langs = list(langs)
        self._infos = {lang: list(bucket) for lang, bucket in infos.items()}

    @classmethod
    def from_records(
        cls, sender_id: str, records: Iterable[IdentityRecord]
    ) -> Optional["ClassificationLang"]:
        """Group records by language, or return None if the sender is absent."""
        sender: Optional[Info] = None
        sender_lang = ""
        langs: List[str] = []
        infos: Dict[str, List[Info]] = {}

        for record in records:
            info = Info.from_record(record)
            lang = record.traits.language
            if record.id == sender_id:
                sender = info
                sender_lang = lang
                continue
            if lang not in infos:
                langs.append(lang)
                infos[lang] = []
            infos[lang].append(info)

        if sender is None:
            return None
        return cls(sender, sender_lang, langs, infos)

    @property
    def sender(self) -> Info:
        return self._sender

    @property
    def sender_lang(self) -> str:
        return self._sender_lang

    @property
    def langs(self) -> List[str]:
        return list(self._langs)

    def infos(self, lang: str) -> List[Info]:
        return list(self._infos.get(lang, []))

    def recipient_count(self) -> int:
        return sum(len(bucket) for bucket in self._infos.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassificationLang):
            return NotImplemented
        return (
            self._sender == other._sender
            and self._sender_lang == other._sender_lang
            and self._langs == other._langs
            and self._infos == other._infos
        )

    def __repr__(self) -> str:
        return (
            f"ClassificationLang(sender={self._sender.sub!r}, "
            f"langs={self._langs!r}, recipients={self.recipient_count()})"
        )
