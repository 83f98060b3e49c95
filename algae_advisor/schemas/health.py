"""
Health check endpoint schemas.

The health endpoint is public and returns a simple status indicator plus
the Gemini model the advisor is configured to call.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Response model for GET /health endpoint.

    Used by uvicorn process managers and deployment checks.
    """

    status: str = Field(
        default="ok",
        description="Health status of the API (always 'ok' if responding)",
        examples=["ok"]
    )
    model: str = Field(
        ...,
        description="Gemini model used for recommendations",
        examples=["gemini-1.5-flash"]
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "example": {
                "status": "ok",
                "model": "gemini-1.5-flash"
            }
        }
