# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging
import traceback

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import (
    auth_router,
    camera_router,
    incident_router,
    ai_router,
    report_router,
    payout_router,
    manager_router,
    analytics_router,
    realtime_router,
)
from .core.config import get_settings
from .core.logging_config import configure_logging
from .core.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from .di.container import get_container
from .infrastructure.db.mongo_connection import ensure_indexes, close_connection
from .infrastructure.http_client_factory import close_shared_http_client
from .infrastructure.jobs.keep_alive import KeepAliveJob

logger = logging.getLogger(__name__)

# The detection webhook has its own limiter
WEBHOOK_PATH = "/api/ai/detection"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates database indexes and starts the keep-alive job; on shutdown the
    job is stopped and the shared HTTP client and Mongo client are closed.
    """
    try:
        await ensure_indexes()
        logger.info("Database indexes ensured")
    except Exception as e:
        logger.error(f"Failed to ensure database indexes: {e}", exc_info=True)

    keep_alive_job = get_container().get(KeepAliveJob)
    keep_alive_job.start()

    yield

    await keep_alive_job.stop()
    await close_shared_http_client()
    close_connection()
    logger.info("Application shutdown complete")


def _error_body(message: str, errors=None) -> dict:
    body = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        body = _error_body(str(detail.get("message", "")), detail.get("errors"))
    else:
        body = _error_body(str(detail))
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        message = error.get("msg", "Invalid value")
        errors.append(f"{location}: {message}" if location else message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation failed", errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    body = _error_body("Internal server error")
    if get_settings().is_development:
        body["error"] = str(exc)
        body["stack"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS and rate limiting middleware
    - Error envelopes for HTTP, validation and unexpected errors
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    configure_logging()
    settings = get_settings()

    application = FastAPI(
        title="Swachhta Prahari API",
        version="1.0.0",
        description="Industrial cleanliness monitoring backend",
        lifespan=lifespan
    )

    application.add_middleware(
        RateLimitMiddleware,
        limiter=FixedWindowRateLimiter(
            max_requests=settings.rate_limit_max,
            window_seconds=settings.rate_limit_window_minutes * 60,
        ),
        path_prefix="/api",
        exclude_paths=(WEBHOOK_PATH,),
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    application.include_router(auth_router, prefix="/api/auth")
    application.include_router(camera_router, prefix="/api/cameras")
    application.include_router(incident_router, prefix="/api/incidents")
    application.include_router(ai_router, prefix="/api/ai")
    application.include_router(report_router, prefix="/api/reports")
    application.include_router(payout_router, prefix="/api/payouts")
    application.include_router(manager_router, prefix="/api/admin")
    application.include_router(analytics_router, prefix="/api/analytics")
    application.include_router(realtime_router)

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"ok": True, "env": settings.environment}

    if settings.environment == "beta":
        @application.get("/cron/wake", tags=["health"])
        async def cron_wake() -> dict:
            return {"message": "Server is awake"}

    return application


# Create application instance
app = create_application()
