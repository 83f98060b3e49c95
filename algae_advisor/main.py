"""
FastAPI application entry point for the Algae Biofuel Advisor.

This module creates the FastAPI app instance, registers all routers and
translates AdvisorError subclasses into JSON error responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from algae_advisor.config import settings
from algae_advisor.errors import AdvisorError
from algae_advisor.routes.form import router as form_router
from algae_advisor.routes.health import router as health_router
from algae_advisor.routes.pages import router as pages_router
from algae_advisor.routes.recommendations import router as recommendations_router
from algae_advisor.routes.settings import router as settings_router
from algae_advisor.utils.logging import configure_logging, get_logger

# Configure logging
configure_logging(settings.LOG_LEVEL)

logger = get_logger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (none if unset)
    - any other environment: allows all origins for local development

    The page itself is served by this app, so CORS only matters for
    other front-ends calling the JSON API.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No cross-origin web clients allowed."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Algae Biofuel Advisor",
    description="Gemini-powered recommendations for algae biofuel cultivation",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(AdvisorError)
async def advisor_error_handler(request: Request, exc: AdvisorError):
    """
    Return user-facing errors as {"detail": {"error", "title", "details", ...}}.

    The page shows title/details as a toast.
    """
    logger.warning(
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}"
    )
    return JSONResponse(
        status_code=exc.http_status,
        content={"detail": exc.to_detail()}
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """
    Turn unexpected failures into the same JSON shape the page toasts.

    The exception text is logged but not returned.
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": {
                "error": "internal_error",
                "title": "Error Processing Request",
                "details": "Something went wrong. Please try again.",
            }
        }
    )


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log validation errors for debugging.

    The request body is neither logged nor echoed: it may hold the API key.
    """
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    logger.error(f"Validation error on {request.method} {request.url.path}: {errors}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": {
                "error": "validation_error",
                "title": "Validation Error",
                "details": errors,
            }
        }
    )

# Configure CORS with environment-based origins
cors_origins = _get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(pages_router)
app.include_router(health_router)
app.include_router(settings_router)
app.include_router(form_router)
app.include_router(recommendations_router)

logger.info("FastAPI app initialized successfully")
