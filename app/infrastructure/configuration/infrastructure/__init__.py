"""Infrastructure settings (server)."""

from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = ["ServerSettings"]
