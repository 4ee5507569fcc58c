from typing import Optional

from fastapi import FastAPI

from api.router import create_api_router
from infrastructure.configuration import Settings
from infrastructure.services import get_settings
from server.errors import register_exception_handlers
from server.lifespan import build_lifespan
from server.middleware import RequestContextMiddleware


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()

    app = FastAPI(title="notification-service", lifespan=build_lifespan(settings))
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(create_api_router(include_test_routes=settings.server.API_TEST))
    return app


handler = create_app()
