"""HTTP server infrastructure settings."""

import json
from typing import Annotated, Any, List

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and API surface configuration.

    Environment Variables:
        API_TEST: Enable the /test/header2post echo endpoint (default: false)
        FORWARD_HEADERS: Comma separated (or JSON list) inbound header names
            copied into template data on every notification request

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        headers = settings.server.FORWARD_HEADERS
        ```
    """

    API_TEST: bool = Field(default=False, alias="API_TEST")
    FORWARD_HEADERS: Annotated[List[str], NoDecode] = Field(
        default_factory=list, alias="FORWARD_HEADERS"
    )

    @field_validator("FORWARD_HEADERS", mode="before")
    @classmethod
    def validate_forward_headers(cls, v: Any) -> Any:
        """Split a raw environment string into header names."""
        if v is None:
            return []
        if isinstance(v, str):
            raw = v.strip()
            if raw.startswith("["):
                return [name.strip() for name in json.loads(raw) if name.strip()]
            return [name.strip() for name in raw.split(",") if name.strip()]
        return v
