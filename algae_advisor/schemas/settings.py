"""
Schemas for the Settings tab (Gemini API key).

The key itself is never returned by the API, only whether one is set.
"""

from pydantic import BaseModel, Field


class ApiKeyUpdateRequest(BaseModel):
    """Request body for PUT /settings/api-key."""
    api_key: str = Field(
        ...,
        min_length=1,
        max_length=512,
        description="Google Gemini API key (kept in memory only)"
    )


class ApiKeyStatusResponse(BaseModel):
    """Whether a Gemini API key is currently configured."""
    configured: bool = Field(..., description="True once a key has been entered")
