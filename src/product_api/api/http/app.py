"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, PlainTextResponse, Response

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.api.http.routers.health import router as health_router
from src.product_api.api.http.routers.service.product import router as product_router
from src.product_api.api.utils.app_startup import configure_logging
from src.product_api.core.services import DbSessionService
from src.product_api.entities.core.response import ApiResponse
from src.product_api.runtime.context import get_config
from src.product_api.runtime.init_db import init_db

__all__ = ["app", "create_app", "startup", "shutdown"]


# --- Error rendering ---
def render_error(
    request: Request,
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> Response:
    """Render an error either as the JSON envelope or as a plain-text body."""
    app_deps: ApplicationDependencies | None = getattr(
        request.app.state, "app_dependencies", None
    )
    config = app_deps.config if app_deps else get_config()
    headers = dict(headers or {})
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        headers["X-Request-ID"] = request_id

    if config.api.error_format == "plain":
        return PlainTextResponse(message, status_code=status_code, headers=headers)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(ApiResponse.failure(message)),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    return render_error(request, exc.status_code, str(exc.detail), exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    return render_error(request, 400, "Invalid input")


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

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
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return render_error(request, 500, "Internal Server Error")


# --- Lifecycle hooks ---
async def startup(app: FastAPI) -> None:
    """Open the product store and attach the application dependencies."""
    if getattr(app.state, "app_dependencies", None) is not None:
        logger.info("Using injected application dependencies")
        return

    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)
    database_service = init_db(DbSessionService(config.database))
    app.state.app_dependencies = ApplicationDependencies(
        config=config,
        database_service=database_service,
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        dependencies: Pre-built dependencies (tests). When omitted the
            lifespan startup opens the configured store.
    """
    configure_logging()
    config = get_config()

    application = FastAPI(
        title=config.app.name,
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None if config.app.environment == "production" else "/redoc",
    )
    application.state.app_dependencies = dependencies

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.middleware("http")(log_requests)

    # --- Router registration ---
    application.include_router(product_router)
    application.include_router(health_router)

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # Request logging middleware covers access logs
    )
