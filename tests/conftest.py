"""
Pytest configuration for the Algae Biofuel Advisor tests.

Sets up the test environment and shared fixtures. Gemini is never called
for real: tests either patch obtain_recommendations or route requests
through an httpx.MockTransport.
"""
import io
import os
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient
from PIL import Image

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GEMINI_API_BASE_URL", "https://gemini.test")

from algae_advisor.agents.cultivation import get_gemini_http_client  # noqa: E402
from algae_advisor.main import app  # noqa: E402
from algae_advisor.services.app_state import AppState, get_app_state  # noqa: E402

TEST_API_KEY = "test-gemini-api-key"

SECTIONED_RESPONSE_TEXT = """Here is my analysis.

## Algae Strain Recommendations
| Strain | Growth Rate | Lipid % | Ideal pH | Ideal Temp |
|---|---|---|---|---|
| Chlorella vulgaris | High | 20-30% | 7-8 | 25°C |

## Harvesting Schedule
Harvest 30% of the culture every week.

## Lipid Optimization Techniques
- Nitrogen starvation during the last 3 days

## Biofuel Yield Potential
Roughly 0.5 L of biodiesel per 1000 L culture per cycle.
"""


def gemini_success_body(text: str) -> dict:
    """Minimal generateContent success payload."""
    return {
        "candidates": [
            {"content": {"parts": [{"text": text}], "role": "model"}}
        ]
    }


@pytest.fixture
def png_bytes() -> bytes:
    """A small, real PNG image."""
    img = Image.new("RGB", (64, 64), color="green")
    img_bytes = io.BytesIO()
    img.save(img_bytes, format="PNG")
    return img_bytes.getvalue()


@pytest.fixture
def app_state() -> AppState:
    """Fresh application state for each test."""
    return AppState()


@pytest.fixture
def gemini_requests() -> List[httpx.Request]:
    """Requests captured by the mocked Gemini endpoint."""
    return []


@pytest.fixture
def gemini_handler(gemini_requests) -> Callable[[Callable], Callable]:
    """
    Wrap a response factory so every request is recorded first.

    Usage:
        handler = gemini_handler(lambda request: httpx.Response(200, json=...))
    """
    def wrap(respond: Callable[[httpx.Request], httpx.Response]):
        def handler(request: httpx.Request) -> httpx.Response:
            gemini_requests.append(request)
            return respond(request)
        return handler
    return wrap


@pytest.fixture
def client(app_state):
    """Test client bound to a fresh AppState."""
    app.dependency_overrides[get_app_state] = lambda: app_state

    yield TestClient(app)

    # Clean up after test
    app.dependency_overrides.clear()


@pytest.fixture
def mock_gemini(client):
    """
    Route the app's Gemini calls to a handler.

    Usage:
        mock_gemini(handler)
    """
    def install(handler: Callable[[httpx.Request], httpx.Response]) -> None:
        async def override():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
                yield http_client

        app.dependency_overrides[get_gemini_http_client] = override

    return install
