"""
SuperApp Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn superapp.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌────────┐ ┌─────────┐ ┌──────────────────┐ ┌──────┐    │
    │  │ Req ID │→│ Logging │→│ View Invalidation│→│ GZip │→…  │
    │  └────────┘ └─────────┘ └──────────────────┘ └──────┘    │
    │                                                          │
    │  Routes:                                                 │
    │  ┌───────────────┐ ┌──────────────┐ ┌─────────────────┐  │
    │  │ GET /api/<pg> │ │ CRUD /api/…  │ │ Saver + search  │  │
    │  └───────────────┘ └──────────────┘ └─────────────────┘  │
    │                                                          │
    │  Exception Handlers:                                     │
    │  ┌────────────────────────────────────────────────────┐  │
    │  │ Auth→401 │ Validation→400 │ Store→500 │ LLM→502/503│  │
    │  └────────────────────────────────────────────────────┘  │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (missing keys are logged, not fatal)
    3. Log startup complete

    Shutdown:
    1. Dispose database engine (close all connections)
    2. Log shutdown complete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from superapp import __version__
from superapp.config import settings
from superapp.database import dispose_engine
from superapp.exceptions import (
    AuthenticationRequiredError,
    CategorizationError,
    LLMServiceError,
    NotFoundError,
    SaveFailedError,
    SearchFailedError,
    StoreError,
    SuperAppError,
    ValidationError,
)
from superapp.middleware.logging import RequestLoggingMiddleware
from superapp.middleware.request_id import RequestIDMiddleware, request_id_var
from superapp.middleware.view_invalidation import (
    INVALIDATED_VIEWS_HEADER,
    ViewInvalidationMiddleware,
)
from superapp.routes import (
    auth,
    contacts,
    demo,
    finance,
    fitness,
    habits,
    health,
    pages,
    preferences,
    saver,
    tasks,
    travel,
    wellness,
)

logger = logging.getLogger(__name__)

# Validation error types whose message is already written for the end user
USER_FACING_ERROR_TYPES = {"required", "number_required", "mood_range"}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    When:   Called once during app startup (before ANY other initialization).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Code before `yield` runs on startup, code after it on shutdown.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("SuperApp Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: pages and CRUD work without Gemini, and guests
        # work without the auth secret
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("SuperApp Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def first_validation_message(exc: RequestValidationError) -> tuple:
    """
    The message and field of the first error in a request validation failure.

    Messages raised by the input models themselves ("First name is required")
    are returned as-is; generic pydantic messages are prefixed with the field.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request", None

    error = errors[0]
    fields = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = fields[-1] if fields else None

    if error.get("type") in USER_FACING_ERROR_TYPES or field is None:
        return error.get("msg", "Invalid request"), field
    return f"{field}: {error.get('msg')}", field


def _error_body(error: str, message: str, rid: str, details=None) -> dict:
    content = {"error": error, "message": message, "request_id": rid}
    if details:
        content["details"] = details
    return content


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        AuthenticationRequiredError → 401 ("Not authenticated")
        ValidationError             → 400 (client can fix the input)
        RequestValidationError      → 400 (first field message)
        NotFoundError               → 404
        StoreError                  → 500 (store message verbatim)
        CategorizationError         → 502 (model reply did not conform)
        LLMServiceError             → 503
        SaveFailedError             → 500 ("try again")
        SearchFailedError           → 500 ({"error": "Search failed"})
        SuperAppError (base)        → 500
        Exception (fallback)        → 500 (logged with traceback)

    Nothing is retried.
    """

    @app.exception_handler(AuthenticationRequiredError)
    async def handle_auth_required(request: Request, exc: AuthenticationRequiredError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=401,
            content=_error_body("not_authenticated", exc.message, rid),
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Client sent invalid input; tell them what is wrong."""
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, rid, exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Body or parameter failed its typed input model. The route never ran."""
        rid = request_id_var.get("")
        message, field = first_validation_message(exc)
        logger.warning("[%s] Request validation error: %s", rid, message)
        return JSONResponse(
            status_code=400,
            content=_error_body(
                "validation_error", message, rid, {"field": field} if field else None
            ),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message, rid),
        )

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        """The store's own message goes back to the caller unchanged."""
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("store_error", exc.message, rid),
        )

    @app.exception_handler(CategorizationError)
    async def handle_categorization_error(request: Request, exc: CategorizationError):
        rid = request_id_var.get("")
        logger.error("[%s] Categorization failed: %s", rid, exc.context)
        return JSONResponse(
            status_code=502,
            content=_error_body("categorization_failed", exc.message, rid),
        )

    @app.exception_handler(LLMServiceError)
    async def handle_llm_error(request: Request, exc: LLMServiceError):
        rid = request_id_var.get("")
        logger.error("[%s] LLM service error: %s", rid, exc.message)
        return JSONResponse(
            status_code=503,
            content=_error_body("llm_service_error", exc.message, rid),
        )

    @app.exception_handler(SaveFailedError)
    async def handle_save_failed(request: Request, exc: SaveFailedError):
        rid = request_id_var.get("")
        logger.error("[%s] Save failed | Context: %s", rid, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("save_failed", exc.message, rid),
        )

    @app.exception_handler(SearchFailedError)
    async def handle_search_failed(request: Request, exc: SearchFailedError):
        rid = request_id_var.get("")
        logger.error("[%s] Search failed | Context: %s", rid, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": exc.message, "request_id": rid},
        )

    @app.exception_handler(SuperAppError)
    async def handle_app_error(request: Request, exc: SuperAppError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message, rid),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        Returns a generic 500 with a request ID for support tickets.
        The stack trace is logged server-side only.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
                rid,
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="SuperApp API",
        description=(
            "Personal productivity backend: contacts and tasks, finance, fitness, "
            "meals, habits, wellness, travel, and an AI-assisted Universal Saver "
            "with semantic search."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → ViewInvalidation → GZip → CORS → routes

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,     # session cookie
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[             # Headers the browser can read from response
            "X-Request-ID",
            INVALIDATED_VIEWS_HEADER,
        ],
    )

    # Don't compress small responses (overhead > savings)
    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(ViewInvalidationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(pages.router)
    app.include_router(contacts.router)
    app.include_router(tasks.router)
    app.include_router(finance.router)
    app.include_router(fitness.router)
    app.include_router(habits.router)
    app.include_router(wellness.router)
    app.include_router(travel.router)
    app.include_router(saver.router)
    app.include_router(demo.router)
    app.include_router(preferences.router)
    app.include_router(auth.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `superapp.main:app` to be importable
app = create_app()
