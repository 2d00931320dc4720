"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger

from contact_api.api.http.app_data import ApplicationDependencies
from contact_api.api.http.errors import internal_error_response, register_exception_handlers
from contact_api.api.http.routers.auth import router as auth_router
from contact_api.api.http.routers.contacts import router as contacts_router
from contact_api.api.http.routers.duplicate_contacts import router as duplicate_contacts_router
from contact_api.api.http.routers.users import router as users_router
from contact_api.api.utils.app_startup import configure_logging
from contact_api.runtime.config.config_data import ConfigData
from contact_api.runtime.context import get_config
from contact_api.runtime.init_db import init_db


# --- Lifecycle hooks ---
def startup(app: FastAPI) -> None:
    config: ConfigData = app.state.config
    logger.info("Starting up application in {} environment", config.app.environment)

    # Constructing the token services validates the signing secret
    deps = ApplicationDependencies.from_config(config)
    app.state.app_dependencies = deps

    if config.app.seed_roles_on_startup:
        init_db(config, deps.database_service)


def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is not None:
        deps.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    startup(app)
    try:
        yield
    finally:
        shutdown(app)


async def log_requests(request: Request, call_next):
    """Tag every log line of a request with its id and record its outcome."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    request.state.request_id = request_id
    started = time.perf_counter()

    def finish(status_code: int, **extra):
        elapsed = round((time.perf_counter() - started) * 1000, 1)
        return logger.bind(status_code=status_code, duration_ms=elapsed, **extra)

    with logger.contextualize(
        request_id=request_id, method=request.method, path=request.url.path
    ):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            finish(500, error_type=type(exc).__name__).exception("request failed")
            return internal_error_response(request_id)

        finish(response.status_code).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the application for ``config`` (the process configuration by default)."""
    config = config or get_config()
    configure_logging(config)

    is_production = config.app.environment == "production"
    app = FastAPI(
        title="Contact API",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    app.state.config = config

    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(contacts_router)
    app.include_router(duplicate_contacts_router)
    app.include_router(users_router)

    @app.get("/health")
    def health(request: Request) -> dict[str, str]:
        """Liveness plus a database round trip."""
        deps: ApplicationDependencies = request.app.state.app_dependencies
        database = "up" if deps.database_service.health_check() else "down"
        return {"status": "healthy", "database": database}

    return app


app = create_app()

__all__ = ["app", "create_app", "startup", "shutdown"]
