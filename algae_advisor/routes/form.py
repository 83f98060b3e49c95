"""
Cultivation Parameters tab endpoints.

Flow used by the page:
1. PATCH /form        - field values as the user types (numbers or raw text)
2. PUT /form/image    - attach an algae image (optional, max 5MB)
3. POST /form/submit  - validate, call Gemini, return the sections

The form state lives in AppState, so submit takes no body: it reads what
was stored by the calls above.
"""

import logging
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, File, UploadFile, status

from algae_advisor.agents.cultivation import get_gemini_http_client
from algae_advisor.schemas.cultivation import FormStateResponse, FormUpdateRequest
from algae_advisor.schemas.recommendations import RecommendationResponse
from algae_advisor.services.app_state import AppState, get_app_state
from algae_advisor.services.image_service import read_image_upload
from algae_advisor.services.recommendation_service import submit_cultivation_form

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/form", tags=["form"])


@router.get(
    "",
    response_model=FormStateResponse,
    summary="Current form values, errors and image preview",
)
async def get_form(state: AppState = Depends(get_app_state)) -> FormStateResponse:
    return state.form.to_response()


@router.patch(
    "",
    response_model=FormStateResponse,
    summary="Update form fields",
    description="""
    Updates any subset of ph, temperature, volume and harvest_frequency.

    Numeric fields accept numbers or raw input text; empty or non-numeric
    text is stored as 0. Nothing is validated here - range checks run on
    POST /form/submit.

    The attached image is described without its preview_data_url; the
    preview comes from GET /form and PUT /form/image.
    """
)
async def update_form(
    request: FormUpdateRequest,
    state: AppState = Depends(get_app_state)
) -> FormStateResponse:
    form = state.form
    updates = request.model_dump(exclude_unset=True)

    for name in ("ph", "temperature", "volume"):
        if name in updates:
            form.set_numeric_field(name, updates[name])

    if "harvest_frequency" in updates:
        form.set_harvest_frequency(updates["harvest_frequency"])

    return form.to_response(include_preview=False)


@router.put(
    "/image",
    response_model=FormStateResponse,
    summary="Attach an algae image",
    description="""
    Attaches an image to the form (held in memory only).

    - 413 file_too_large: larger than 5MB; the previous image is kept
    - 400 invalid_file_type: not an image; the previous image is kept
    """
)
async def attach_image(
    image: Annotated[UploadFile, File(description="Algae culture image")],
    state: AppState = Depends(get_app_state)
) -> FormStateResponse:
    attachment = await read_image_upload(image)
    state.form.select_image(attachment)
    return state.form.to_response()


@router.delete(
    "/image",
    response_model=FormStateResponse,
    summary="Remove the attached image",
)
async def remove_image(state: AppState = Depends(get_app_state)) -> FormStateResponse:
    state.form.remove_image()
    return state.form.to_response()


@router.post(
    "/submit",
    response_model=RecommendationResponse,
    status_code=status.HTTP_200_OK,
    summary="Submit the form and get recommendations",
    description="""
    Validates the stored form and asks Gemini for recommendations.

    Errors (all leave the previous result unchanged):
    - 422 field_validation_error: field_errors per field, no Gemini call
    - 400 missing_api_key: set one on the Settings tab first
    - 409 request_in_flight: a submission is already running
    - 502 remote_call_error / malformed_response / remote_connection_error
    """
)
async def submit_form(
    state: AppState = Depends(get_app_state),
    http_client: httpx.AsyncClient = Depends(get_gemini_http_client)
) -> RecommendationResponse:
    response = await submit_cultivation_form(state, http_client=http_client)
    logger.info(
        f"Returning recommendations: segmented={response.segmented}, "
        f"sections={len(response.sections)}"
    )
    return response
