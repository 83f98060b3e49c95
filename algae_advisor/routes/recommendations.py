"""
Results panel endpoints.

New results are produced by POST /form/submit; this router only exposes the
latest one so the page can restore the results panel after a reload.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from algae_advisor.schemas.recommendations import RecommendationResponse
from algae_advisor.services.app_state import AppState, get_app_state
from algae_advisor.services.recommendation_service import get_latest_recommendation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.get(
    "/latest",
    response_model=RecommendationResponse,
    summary="Latest recommendations",
    description="Returns the last successful result. 404 until one exists.",
)
async def latest_recommendation(
    state: AppState = Depends(get_app_state)
) -> RecommendationResponse:
    response = get_latest_recommendation(state)

    if response is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": "no_results",
                "title": "No Results Yet",
                "details": "Fill out the form and submit to see algae biofuel recommendations"
            }
        )

    return response
