"""
Settings tab endpoints (Gemini API key).

The key is kept in process memory only. It is never returned, logged or
persisted; the only place it leaves the process is the `key` query
parameter of the Gemini request.
"""

import logging

from fastapi import APIRouter, Depends, status

from algae_advisor.schemas.settings import ApiKeyStatusResponse, ApiKeyUpdateRequest
from algae_advisor.services.app_state import AppState, get_app_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get(
    "/api-key",
    response_model=ApiKeyStatusResponse,
    summary="Check whether a Gemini API key is set",
)
async def get_api_key_status(
    state: AppState = Depends(get_app_state)
) -> ApiKeyStatusResponse:
    return ApiKeyStatusResponse(configured=state.has_api_key())


@router.put(
    "/api-key",
    response_model=ApiKeyStatusResponse,
    status_code=status.HTTP_200_OK,
    summary="Store the Gemini API key for this session",
    description="""
    Stores the user's Gemini API key in memory.

    The key is used only as the `key` query parameter of the
    generateContent call and is forgotten when the server stops.
    """
)
async def update_api_key(
    request: ApiKeyUpdateRequest,
    state: AppState = Depends(get_app_state)
) -> ApiKeyStatusResponse:
    state.set_api_key(request.api_key)
    return ApiKeyStatusResponse(configured=state.has_api_key())


@router.delete(
    "/api-key",
    response_model=ApiKeyStatusResponse,
    summary="Forget the Gemini API key",
)
async def delete_api_key(
    state: AppState = Depends(get_app_state)
) -> ApiKeyStatusResponse:
    state.clear_api_key()
    return ApiKeyStatusResponse(configured=False)
