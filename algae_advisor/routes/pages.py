"""
HTML page for the advisor (Info / Cultivation Parameters / Settings tabs).

The page is rendered once with the current state; afterwards its script
talks to the JSON endpoints (/form, /settings, /recommendations) and shows
toasts from the `title` / `details` of error responses.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from algae_advisor.services.app_state import AppState, get_app_state
from algae_advisor.utils.constants import (
    HARVEST_FREQUENCIES,
    MAX_IMAGE_SIZE_BYTES,
    MAX_IMAGE_SIZE_MB,
    TABS,
)

router = APIRouter(tags=["pages"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request, state: AppState = Depends(get_app_state)):
    """Render the three-tab advisor page; `?tab=` overrides the stored tab."""
    active_tab = request.query_params.get("tab", state.active_tab)
    if active_tab not in TABS:
        active_tab = "info"

    context = {
        "active_tab": active_tab,
        "form": state.form.to_response(),
        "harvest_frequencies": HARVEST_FREQUENCIES,
        "api_key_configured": state.has_api_key(),
        "is_loading": state.is_loading,
        "latest": state.latest,
        "max_image_size_bytes": MAX_IMAGE_SIZE_BYTES,
        "max_image_size_mb": MAX_IMAGE_SIZE_MB,
    }
    return templates.TemplateResponse(request, "index.html", context)
