from fastapi import FastAPI

from server.errors import register_exception_handlers


def create_test_app(routers, middlewares=None) -> FastAPI:
    """
    Create a FastAPI test application with the given router and middlewares.

    Exception handlers are registered the same way as in the real server so
    error responses keep the ``{"error": ...}`` shape.

    Args:
        routers: The router, or list of routers, to include in the app.
        middlewares: Optional list of (middleware_class, config_dict) tuples.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app([router1, router2], middlewares=[(MiddlewareClass, config_dict)])
    """
    app = FastAPI()
    register_exception_handlers(app)

    if middlewares:
        for middleware_class, middleware_config in middlewares:
            app.add_middleware(middleware_class, **middleware_config)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    return app
