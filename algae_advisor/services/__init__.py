"""
Service layer for the Algae Biofuel Advisor.

Contains the logic between routes (HTTP layer) and the Gemini requester:
- form_collector: field state, image attachment, validation, submit
- response_presenter: splitting the markdown answer into sections
- app_state: single-user state and the one-request-at-a-time guard
- recommendation_service: submit -> Gemini -> present orchestration
- image_service: reading uploads into memory
"""

from .app_state import AppState, get_app_state
from .form_collector import CultivationForm, normalize_numeric_input
from .image_service import read_image_upload, resolve_mime_type
from .recommendation_service import (
    get_latest_recommendation,
    submit_cultivation_form,
)
from .response_presenter import (
    match_heading,
    present_response,
    split_sections,
)

__all__ = [
    # App state
    "AppState",
    "get_app_state",
    # Form collector
    "CultivationForm",
    "normalize_numeric_input",
    # Images
    "read_image_upload",
    "resolve_mime_type",
    # Recommendations
    "submit_cultivation_form",
    "get_latest_recommendation",
    # Presenter
    "present_response",
    "split_sections",
    "match_heading",
]
