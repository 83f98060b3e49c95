"""
Tests for the recommendation orchestration and the app state guard.

obtain_recommendations is patched so these tests only exercise the glue:
validation first, API key second, one Gemini call under the in-flight
guard, and state updates only on success.
"""

import pytest
from unittest.mock import AsyncMock, patch

from algae_advisor.errors import (
    FieldValidationError,
    MissingApiKeyError,
    RemoteCallError,
    RequestInFlightError,
)
from algae_advisor.schemas.cultivation import ImageAttachment
from algae_advisor.schemas.recommendations import PresentedRecommendation
from algae_advisor.services.app_state import AppState, get_app_state
from algae_advisor.services.recommendation_service import (
    get_latest_recommendation,
    submit_cultivation_form,
)

from conftest import SECTIONED_RESPONSE_TEXT, TEST_API_KEY

PATCH_TARGET = "algae_advisor.services.recommendation_service.obtain_recommendations"


@pytest.fixture
def ready_state() -> AppState:
    state = AppState()
    state.set_api_key(TEST_API_KEY)
    return state


@pytest.fixture
def previous_result() -> PresentedRecommendation:
    return PresentedRecommendation(
        response_text="old answer",
        has_image=False,
        segmented=False,
    )


# =============================================================================
# AppState
# =============================================================================

class TestAppState:

    def test_api_key_lifecycle(self):
        state = AppState()
        assert state.has_api_key() is False

        state.set_api_key("  abc  ")
        assert state.api_key == "abc"
        assert state.has_api_key() is True

        state.clear_api_key()
        assert state.has_api_key() is False

    def test_whitespace_key_counts_as_missing(self):
        state = AppState()
        state.set_api_key("   ")
        assert state.has_api_key() is False

    def test_get_app_state_returns_singleton(self):
        assert get_app_state() is get_app_state()

    @pytest.mark.asyncio
    async def test_guard_sets_and_clears_loading(self):
        state = AppState()

        async with state.request_in_flight():
            assert state.is_loading is True

        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_guard_clears_loading_on_error(self):
        state = AppState()

        with pytest.raises(RuntimeError):
            async with state.request_in_flight():
                raise RuntimeError("boom")

        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_guard_rejects_second_entry(self):
        state = AppState()

        async with state.request_in_flight():
            with pytest.raises(RequestInFlightError):
                async with state.request_in_flight():
                    pass
            # The rejected attempt must not release the slot
            assert state.is_loading is True

        assert state.is_loading is False


# =============================================================================
# submit_cultivation_form
# =============================================================================

class TestSubmitCultivationForm:

    @pytest.mark.asyncio
    async def test_success_returns_sections_and_updates_state(self, ready_state):
        with patch(PATCH_TARGET, new_callable=AsyncMock) as mock_obtain:
            mock_obtain.return_value = SECTIONED_RESPONSE_TEXT

            response = await submit_cultivation_form(ready_state)

        mock_obtain.assert_awaited_once()
        params, api_key = mock_obtain.await_args.args
        assert api_key == TEST_API_KEY
        assert params.ph == 7.0
        assert params.harvest_frequency == "Weekly"

        assert response.status == "OK"
        assert response.segmented is True
        assert len(response.sections) == 4
        assert response.notification.title == "Analysis Complete"
        assert ready_state.latest.response_text == SECTIONED_RESPONSE_TEXT
        assert ready_state.is_loading is False
        assert ready_state.active_tab == "form"

    @pytest.mark.asyncio
    async def test_loading_flag_set_while_waiting_on_gemini(self, ready_state):
        seen = {}

        async def fake_obtain(params, api_key, http_client=None):
            seen["loading"] = ready_state.is_loading
            return "plain text"

        with patch(PATCH_TARGET, side_effect=fake_obtain):
            await submit_cultivation_form(ready_state)

        assert seen["loading"] is True
        assert ready_state.is_loading is False

    @pytest.mark.asyncio
    async def test_validation_error_blocks_before_network(self, ready_state):
        ready_state.form.set_numeric_field("ph", 15)

        with patch(PATCH_TARGET, new_callable=AsyncMock) as mock_obtain:
            with pytest.raises(FieldValidationError) as exc_info:
                await submit_cultivation_form(ready_state)

        mock_obtain.assert_not_called()
        assert "ph" in exc_info.value.field_errors
        assert ready_state.is_loading is False

    @pytest.mark.asyncio
    async def test_missing_api_key_blocks_before_network(self):
        state = AppState()

        with patch(PATCH_TARGET, new_callable=AsyncMock) as mock_obtain:
            with pytest.raises(MissingApiKeyError):
                await submit_cultivation_form(state)

        mock_obtain.assert_not_called()
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_field_errors_reported_before_missing_key(self):
        state = AppState()
        state.form.set_numeric_field("volume", 0)

        with pytest.raises(FieldValidationError):
            await submit_cultivation_form(state)

    @pytest.mark.asyncio
    async def test_in_flight_request_rejects_submission(self, ready_state):
        ready_state.is_loading = True

        with patch(PATCH_TARGET, new_callable=AsyncMock) as mock_obtain:
            with pytest.raises(RequestInFlightError):
                await submit_cultivation_form(ready_state)

        mock_obtain.assert_not_called()
        assert ready_state.is_loading is True

    @pytest.mark.asyncio
    async def test_remote_error_keeps_previous_result(self, ready_state, previous_result):
        ready_state.latest = previous_result

        with patch(PATCH_TARGET, new_callable=AsyncMock) as mock_obtain:
            mock_obtain.side_effect = RemoteCallError(429, {"error": {"code": 429}})
            with pytest.raises(RemoteCallError):
                await submit_cultivation_form(ready_state)

        assert ready_state.latest is previous_result
        assert ready_state.is_loading is False

    @pytest.mark.asyncio
    async def test_image_flag_and_notice(self, ready_state, png_bytes):
        ready_state.form.select_image(
            ImageAttachment(filename="a.png", mime_type="image/png", data=png_bytes)
        )

        with patch(PATCH_TARGET, new_callable=AsyncMock) as mock_obtain:
            mock_obtain.return_value = "## Image Analysis\nHealthy green culture"
            response = await submit_cultivation_form(ready_state)

        params = mock_obtain.await_args.args[0]
        assert params.image is not None
        assert response.has_image is True
        assert response.image_notice is not None
        assert [s.title for s in response.sections] == ["Image Analysis"]


class TestGetLatestRecommendation:

    def test_none_before_first_result(self):
        assert get_latest_recommendation(AppState()) is None

    def test_latest_has_no_notification(self, previous_result):
        state = AppState()
        state.latest = previous_result

        response = get_latest_recommendation(state)

        assert response.response_text == "old answer"
        assert response.notification is None
