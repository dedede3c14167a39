"""Application entrypoint."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.routing import APIRoute

from randomuser_proxy.api.error_handlers import register_error_handlers
from randomuser_proxy.api.routers import health, random_user, users
from randomuser_proxy.config import get_settings
from randomuser_proxy.logging import configure_logging, get_logger
from randomuser_proxy.middleware import RequestLoggingMiddleware
from randomuser_proxy.randomuser import randomuser

_logger = get_logger()


def _log_routes(app: FastAPI) -> None:
    settings = get_settings()
    _logger.info("%s started environment=%s", settings.app_name, settings.environment)
    _logger.info("Available routes:")
    for route in app.routes:
        if isinstance(route, APIRoute):
            for method in sorted(route.methods):
                _logger.info("  %-4s %s - %s", method, route.path, route.summary)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle events."""
    # Startup
    await randomuser.connect()
    _log_routes(app)
    yield
    # Shutdown
    await randomuser.disconnect()


def create_application() -> FastAPI:
    """Build and configure a FastAPI instance."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(random_user.router)
    app.include_router(users.router)
    return app


app = create_application()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""

    settings = get_settings()
    _logger.info("Server is running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
