"""
Hobby Word Bank API -- Application entry point.

Run with:
    WORDBANK_MASTER_CODE=... WORDBANK_SESSION_SECRET=... wordbank-server

or, through uvicorn directly:
    uvicorn wordbank.main:create_app --factory --reload

Then open http://localhost:3000/docs for the interactive Swagger UI.

This file:
  1. Loads configuration (fails fast if the secrets are missing)
  2. Loads both snapshots and runs the startup sweeps
  3. Creates the FastAPI application and mounts the route modules
  4. Adds CORS middleware for the configured origin allow-list
  5. Maps domain errors to JSON error responses
  6. Starts uvicorn, with TLS when a key/cert pair is configured
"""

import logging
from datetime import datetime
from typing import Callable

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wordbank.codes import CodeRegistry, utc_now
from wordbank.config import Settings, load_settings
from wordbank.errors import WordBankError
from wordbank.models.schemas import HealthResponse
from wordbank.routes import auth, data, hobby
from wordbank.store import WordStore

__version__ = "1.0.0"

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> FastAPI:
    """Build the application and the stores it owns."""
    if settings is None:
        settings = load_settings()

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    app = FastAPI(
        title="Hobby Word Bank API",
        version=__version__,
        description=(
            "Categorized word lists (\"hobby\" word banks) with case- and "
            "whitespace-insensitive deduplication, plus short-lived access codes.\n\n"
            "| Endpoint | Purpose |\n"
            "|----------|--------|\n"
            "| `GET /data` | Whole word bank |\n"
            "| `GET/POST/PUT/DELETE /hobby/{type}` | Read and edit one category |\n"
            "| `POST /reset` | Restore the default bank |\n"
            "| `GET /publish`, `POST /auth/issue` | Issue an access code |\n"
            "| `POST /auth/verify`, `POST /auth/session` | Check a code or session |\n"
            "| `DELETE /auth/revoke` | Revoke an access code |\n"
        ),
    )

    # The stores belong to this app instance; routes reach them via wordbank.deps.
    app.state.settings = settings
    app.state.word_store = WordStore.load(settings.data_file)
    app.state.code_registry = CodeRegistry.load(
        settings.codes_file,
        master_code=settings.master_code,
        session_key=settings.session_key,
        session_secret=settings.session_secret,
        clock=clock,
    )

    # -----------------------------------------------------------------------
    # CORS Middleware
    #
    # Only the origins listed in WORDBANK_ALLOWED_ORIGINS may call the API
    # from a browser. With an empty list, no CORS headers are sent at all.
    # -----------------------------------------------------------------------

    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Content-Type"],
        )

    _register_error_handlers(app)

    app.include_router(data.router)
    app.include_router(hobby.router)
    app.include_router(auth.router)

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health check",
        tags=["System"],
    )
    async def health() -> HealthResponse:
        """Simple health check for load balancers and monitoring."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            categories=app.state.word_store.category_count(),
            codes=len(app.state.code_registry),
            word_store_diverged=app.state.word_store.diverged,
            code_registry_diverged=app.state.code_registry.diverged,
        )

    logger.info("Routes ready: %d", len(app.routes))
    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(WordBankError)
    async def wordbank_error(request: Request, exc: WordBankError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.body())

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request body on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=400, content={"error": "invalid request body"})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "internal server error"})


def run() -> None:
    """Console entry point: load settings, build the app, serve it."""
    settings = load_settings()
    app = create_app(settings)

    scheme = "https" if settings.tls_enabled else "http"
    logger.info("Server running at %s://%s:%d", scheme, settings.host, settings.port)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        ssl_keyfile=settings.ssl_keyfile,
        ssl_certfile=settings.ssl_certfile,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
