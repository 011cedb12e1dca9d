"""FastAPI application factory and setup."""

import time
import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from loguru import logger
from starlette.responses import JSONResponse

from user_lookup import __version__
from user_lookup.api.http.app_data import ApplicationDependencies
from user_lookup.api.http.routers import health_router, user_router
from user_lookup.api.utils.app_startup import configure_logging
from user_lookup.core.services import DbManageService, DbSessionService
from user_lookup.runtime.config.config_data import ConfigData
from user_lookup.runtime.context import get_config

__all__ = ["app", "create_app", "startup", "shutdown"]


# --- Request logging middleware ---
async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start {} {}", request.method, request.url.path)
            response = await call_next(request)

            duration_ms = round((time.perf_counter() - start) * 1000, 1)
            logger.bind(status_code=response.status_code, duration_ms=duration_ms).info(
                "request.end {} in {}ms", response.status_code, duration_ms
            )
            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = round((time.perf_counter() - start) * 1000, 1)
            logger.bind(
                status_code=500,
                duration_ms=duration_ms,
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Lifecycle hooks ---
async def startup(app: FastAPI, database_service: DbSessionService | None = None) -> None:
    config: ConfigData = app.state.config
    logger.info("Starting up application in {} environment", config.app.environment)

    owns_database = database_service is None
    if database_service is None:
        database_service = DbSessionService(config=config)
    app.state.owns_database = owns_database

    if config.database.create_tables_on_startup:
        DbManageService(database_service).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    if app.state.owns_database:
        app_dependencies.database_service.dispose()


def create_app(
    database_service: DbSessionService | None = None,
    config: ConfigData | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        database_service: Use this instead of building one from configuration
            at startup. The caller keeps ownership of its engine.
        config: Configuration for this application; defaults to the current
            context's configuration.
    """
    config = config or get_config()
    configure_logging(config)
    is_production = config.app.environment == "production"

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await startup(app, database_service)
        try:
            yield
        finally:
            await shutdown(app)

    application = FastAPI(
        title="User Lookup",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    application.state.config = config
    application.middleware("http")(log_requests)

    application.include_router(health_router)
    application.include_router(user_router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(app, host=config.app.host, port=config.app.port, access_log=False)
