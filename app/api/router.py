from fastapi import APIRouter

from api.routes.health import router as health_router
from api.routes.notification import router as notification_router
from api.routes.test import router as test_router


def create_api_router(include_test_routes: bool = False) -> APIRouter:
    """Assemble the API routes. The echo routes are only mounted when enabled."""
    api_router = APIRouter()
    api_router.include_router(health_router)
    api_router.include_router(notification_router)
    if include_test_routes:
        api_router.include_router(test_router)
    return api_router
