import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

import sentry_sdk
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.main import api_router
from app.api.routes.utils import router as utils_router
from app.core.config import Settings, settings
from app.core.errors import NotFoundError, StorageError
from app.core.logging import setup_logging
from app.core.migrations import run_migrations
from app.core.pool import PoolManager

_logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    *,
    pool_factory: Callable[[Settings], Any] = PoolManager,
    migrate: Callable[[Settings], None] = run_migrations,
) -> FastAPI:
    """
    Build the application. The pool is opened and migrations applied in the
    lifespan, before the first request is accepted; a failure in either
    aborts startup.
    """
    cfg = app_settings or settings
    setup_logging(cfg.LOG_LEVEL)

    if cfg.SENTRY_DSN and cfg.ENVIRONMENT != "local":
        sentry_sdk.init(dsn=str(cfg.SENTRY_DSN), enable_tracing=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        _logger.info("Starting %s v%s", cfg.APP_NAME, cfg.APP_VERSION)
        pool = pool_factory(cfg)
        pool.open()
        try:
            migrate(cfg)
            app.state.pool = pool
            yield
        finally:
            _logger.info("Shutting down, pool stats: %s", pool.stats())
            pool.close()

    app = FastAPI(
        title=cfg.APP_NAME,
        version=cfg.APP_VERSION,
        openapi_url=f"{cfg.API_V1_STR}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = cfg

    _add_exception_handlers(app, cfg)

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        _logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    app.include_router(utils_router)
    app.include_router(api_router, prefix=cfg.API_V1_STR)
    return app


# ---------------------------------------------------------------------------
# Global exception handlers: the single place errors become HTTP responses
# ---------------------------------------------------------------------------


def _add_exception_handlers(app: FastAPI, cfg: Settings) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed JSON, wrong types, bad path params: 400 with a readable detail."""
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(l) for l in err.get("loc", []) if l != "body")
            msg = err.get("msg", "Invalid value")
            messages.append(f"{loc}: {msg}" if loc else msg)
        return JSONResponse(status_code=400, content={"detail": "; ".join(messages)})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(StorageError)
    async def storage_error_handler(
        request: Request, exc: StorageError
    ) -> JSONResponse:
        detail = "Storage error"
        if cfg.ENVIRONMENT == "local":
            detail = f"Storage error: {exc}"
        return JSONResponse(status_code=500, content={"detail": detail})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unhandled exceptions: log and return 500 with safe message."""
        _logger.exception(
            "Unhandled exception on %s %s", request.method, request.url.path
        )
        detail = "Internal server error"
        if cfg.ENVIRONMENT == "local":
            detail = f"Internal server error: {exc}"
        return JSONResponse(status_code=500, content={"detail": detail})


app = create_app()


def main() -> None:
    _logger.info("Server listening on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
