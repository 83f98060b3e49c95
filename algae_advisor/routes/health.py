"""
Health check route for the Algae Biofuel Advisor.

This endpoint is PUBLIC and provides a simple status check for process
managers and deployment verification. It never calls Gemini.
"""

from fastapi import APIRouter

from algae_advisor.config import settings
from algae_advisor.schemas.health import HealthResponse
from algae_advisor.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. "
        "Returns a simple status indicator and the configured Gemini model."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "model": "gemini-1.5-flash"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok", model=settings.GEMINI_MODEL)
