"""
FastAPI application.

Creates and configures the FastAPI application instance and maps
domain errors to HTTP responses.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from snippetbox.api.router import api_router
from snippetbox.core.config import settings
from snippetbox.core.exceptions import (DuplicateIdentityError, InvalidCredentialsError, NotFoundError,
                                        StorageError, )
from snippetbox.core.logging import configure_logging
from snippetbox.db.session import describe_engine, engine

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("starting server database=%s", describe_engine(engine))
    yield
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Create and share short text snippets.",
    lifespan=lifespan)

app.add_middleware(SessionMiddleware,
                   secret_key=settings.SECRET_KEY,
                   session_cookie="session",
                   max_age=settings.SESSION_LIFETIME_HOURS * 60 * 60,
                   same_site="lax")

# Include API router
app.include_router(api_router)


def server_error(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and answer with a generic 500."""
    logger.error("%s method=%s uri=%s", exc, request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content={"detail": "Internal Server Error"})


@app.exception_handler(NotFoundError)
async def handle_not_found(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not Found"})


@app.exception_handler(InvalidCredentialsError)
async def handle_invalid_credentials(request: Request, exc: InvalidCredentialsError):
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": exc.message})


@app.exception_handler(DuplicateIdentityError)
async def handle_duplicate_identity(request: Request, exc: DuplicateIdentityError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT,
                        content={"detail": exc.message, "field": "email"})


@app.exception_handler(StorageError)
async def handle_storage_error(request: Request, exc: StorageError):
    return server_error(request, exc)


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    return server_error(request, exc)


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "snippetbox",
        "version": settings.VERSION
    }
