"""
Recommendation Service - form submission to displayed result

Glue between the form collector, the Gemini requester and the response
presenter:

1. Form collector validates and emits CultivationParameters
2. API key presence is checked (no network call without one)
3. The in-flight guard is taken and Gemini is called once
4. The answer is split into sections and stored as the latest result

A failure at any step raises an AdvisorError and leaves the previous result
untouched.
"""

import logging
from typing import List, Optional

import httpx

from algae_advisor.agents.cultivation import obtain_recommendations
from algae_advisor.errors import FieldValidationError, MissingApiKeyError
from algae_advisor.schemas.cultivation import CultivationParameters
from algae_advisor.schemas.recommendations import (
    NotificationResponse,
    RecommendationResponse,
)
from algae_advisor.services.app_state import AppState
from algae_advisor.services.response_presenter import present_response

logger = logging.getLogger(__name__)

SUCCESS_NOTIFICATION = NotificationResponse(
    title="Analysis Complete",
    description="Recommendations are ready to view",
)


async def submit_cultivation_form(
    state: AppState,
    http_client: Optional[httpx.AsyncClient] = None
) -> RecommendationResponse:
    """
    Submit the current form and return the presented recommendations.

    Args:
        state: Application state holding the form and API key
        http_client: Client used for the Gemini call

    Returns:
        RecommendationResponse with sections and a success notification

    Raises:
        FieldValidationError: form values out of range (no network call)
        MissingApiKeyError: no key entered yet (no network call)
        RequestInFlightError: another submission is still running
        RemoteCallError, MalformedResponseError, RemoteConnectionError:
            Gemini call failed
    """
    submitted: List[CultivationParameters] = []

    if not state.form.submit(submitted.append):
        raise FieldValidationError(state.form.errors)

    params = submitted[0]

    if not state.has_api_key():
        logger.warning("Submission blocked: Gemini API key not configured")
        raise MissingApiKeyError()

    has_image = params.image is not None
    logger.info(
        f"Form submitted: harvest_frequency={params.harvest_frequency}, "
        f"has_image={has_image}"
    )

    async with state.request_in_flight():
        response_text = await obtain_recommendations(
            params,
            state.api_key,
            http_client=http_client
        )

    presented = present_response(response_text, has_image=has_image)

    state.latest = presented
    # Show the results next to the form once something arrives
    state.active_tab = "form"

    return RecommendationResponse(
        **presented.model_dump(),
        notification=SUCCESS_NOTIFICATION,
    )


def get_latest_recommendation(state: AppState) -> Optional[RecommendationResponse]:
    """Last successful result, without a notification, or None."""
    if state.latest is None:
        return None
    return RecommendationResponse(**state.latest.model_dump())
