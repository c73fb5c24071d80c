# src/workshop_api/main.py
"""Main entry point for the Workshop API application."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from http import HTTPStatus

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workshop_api.api.v1 import (
    comments_router,
    oauth_router,
    posts_router,
    protected_router,
    system_router,
    users_router,
)
from workshop_api.core.errors import ApiError
from workshop_api.core.settings import settings
from workshop_api.db.store import DocumentStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Users, posts and comments over a JSON document, with an OAuth2 client-credentials flow",
    version=settings.app_version,
)

# The store is opened once at startup, before any request is served.
app.state.store = DocumentStore(settings.data_path)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Public resources at the root, bearer-protected surface under /api/v1
app.include_router(system_router)
app.include_router(users_router)
app.include_router(posts_router)
app.include_router(comments_router)
app.include_router(oauth_router)
app.include_router(protected_router, prefix="/api/v1")


@app.middleware("http")
async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={"error": "Bad Request", "message": "Request body must be a JSON object"},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    phrase = HTTPStatus(exc.status_code).phrase
    if exc.status_code == HTTPStatus.NOT_FOUND:
        message = f"Route {request.method}:{request.url.path} not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": phrase, "message": message},
        headers=getattr(exc, "headers", None),
    )


@app.on_event("startup")
async def on_startup() -> None:
    app.state.store.open()
    logger.info("%s %s ready (data: %s)", settings.app_name, settings.app_version, settings.data_path)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("workshop_api.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
