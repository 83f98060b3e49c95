"""
Application state shared by the page and the API.

One AppState per process: the advisor is a single-user tool and nothing is
persisted. Routes receive it through the `get_app_state` dependency so tests
can swap in a fresh instance via app.dependency_overrides.

Each field has a single writer:
- api_key: settings routes
- form: form routes
- is_loading / latest / active_tab: recommendation_service
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from algae_advisor.errors import RequestInFlightError
from algae_advisor.schemas.recommendations import PresentedRecommendation
from algae_advisor.services.form_collector import CultivationForm

logger = logging.getLogger(__name__)


class AppState:
    """Everything the three tabs need to survive between requests."""

    def __init__(self):
        self.api_key: str = ""
        self.form = CultivationForm()
        self.is_loading: bool = False
        self.latest: Optional[PresentedRecommendation] = None
        self.active_tab: str = "info"

    # --- API key ---

    def set_api_key(self, api_key: str) -> None:
        self.api_key = api_key.strip()
        logger.info("Gemini API key updated")

    def clear_api_key(self) -> None:
        self.api_key = ""
        logger.info("Gemini API key cleared")

    def has_api_key(self) -> bool:
        return bool(self.api_key)

    # --- In-flight guard ---

    @asynccontextmanager
    async def request_in_flight(self) -> AsyncIterator[None]:
        """
        Hold the single recommendation slot for the duration of the block.

        Check-and-set happens without awaiting, so two coroutines on the
        same event loop can never both enter.

        Raises:
            RequestInFlightError: another request already holds the slot
        """
        if self.is_loading:
            logger.warning("Rejected submission: a request is already in flight")
            raise RequestInFlightError()

        self.is_loading = True
        try:
            yield
        finally:
            self.is_loading = False


_app_state = AppState()


def get_app_state() -> AppState:
    """FastAPI dependency returning the process-wide state."""
    return _app_state
