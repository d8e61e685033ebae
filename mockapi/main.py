"""FastAPI app factory: health endpoint, request logging and the CRUD routes."""
from __future__ import annotations

import os
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from taf.logging_conf import get_logger, setup_logging

from .api import router as api_router
from .service.store import ResourceStore

setup_logging()
logger = get_logger("mockapi")


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("startup", extra={"event": "startup"})
    yield
    logger.info("shutdown", extra={"event": "shutdown"})


def create_app(store: ResourceStore | None = None) -> FastAPI:
    """Build an app with its own store; pass one in to share or pre-seed state."""
    app = FastAPI(
        title="Placeholder API (in-memory)",
        version=os.getenv("APP_VERSION", "0.1.0"),
        lifespan=_lifespan,
    )
    app.state.store = store or ResourceStore()

    @app.middleware("http")
    async def request_logger(request: Request, call_next: Callable[[Request], Response]):
        """JSON request logging with a correlation id.

        - Reuses an incoming X-Request-ID, otherwise mints one
        - Logs start and end events with method/path/status/elapsed_ms
        - Echoes X-Request-ID on the response
        """
        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        request.state.request_id = request_id

        start = time.perf_counter()
        logger.info(
            "request.start",
            extra={
                "event": "request_start",
                "method": request.method,
                "path": request.url.path,
                "request_id": request_id,
            },
        )
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request.error",
                extra={
                    "event": "request_error",
                    "path": request.url.path,
                    "method": request.method,
                    "request_id": request_id,
                },
            )
            raise
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
                "request_id": request_id,
            },
        )
        return response

    @app.get("/health", summary="Liveness/readiness check")
    async def health() -> JSONResponse:
        return JSONResponse(content={"ok": True})

    app.include_router(api_router)

    return app


def serve() -> None:
    """Run the app with uvicorn on PORT (default 8000)."""
    import uvicorn

    uvicorn.run(
        create_app(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_config=None,
    )


# ASGI entrypoint for uvicorn: `uvicorn mockapi.main:app --port 8000`
app = create_app()
