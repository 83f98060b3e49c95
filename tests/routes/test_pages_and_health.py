"""
Tests for the HTML page, the health check and /recommendations/latest.
"""

import httpx

from algae_advisor.config import settings
from algae_advisor.schemas.recommendations import PresentedRecommendation, SectionResponse

from conftest import SECTIONED_RESPONSE_TEXT, TEST_API_KEY, gemini_success_body


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "model": settings.GEMINI_MODEL}


class TestIndexPage:

    def test_renders_three_tabs(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        html = response.text
        assert 'data-tab="info"' in html
        assert 'data-tab="form"' in html
        assert 'data-tab="settings"' in html
        assert "No Results Yet" in html

    def test_info_tab_active_by_default(self, client):
        html = client.get("/").text

        assert 'id="tab-info" class="panel active"' in html

    def test_tab_query_parameter(self, client):
        html = client.get("/?tab=settings").text

        assert 'id="tab-settings" class="panel active"' in html

    def test_unknown_tab_falls_back_to_info(self, client):
        html = client.get("/?tab=admin").text

        assert 'id="tab-info" class="panel active"' in html

    def test_renders_latest_sections(self, client, app_state):
        app_state.latest = PresentedRecommendation(
            response_text="## Harvesting Schedule\nEvery week",
            segmented=True,
            sections=[SectionResponse(title="Harvesting Schedule", body="Every week\n")],
        )
        app_state.active_tab = "form"

        html = client.get("/").text

        assert 'id="tab-form" class="panel active"' in html
        assert "<h3>Harvesting Schedule</h3>" in html
        assert "No Results Yet" not in html

    def test_api_key_is_not_rendered(self, client, app_state):
        app_state.set_api_key(TEST_API_KEY)

        html = client.get("/?tab=settings").text

        assert TEST_API_KEY not in html
        assert "Key configured" in html


class TestLatestRecommendation:

    def test_404_before_first_result(self, client):
        response = client.get("/recommendations/latest")

        assert response.status_code == 404
        detail = response.json()["detail"]
        assert detail["error"] == "no_results"
        assert detail["title"] == "No Results Yet"

    def test_returns_last_successful_result(self, client, app_state, mock_gemini):
        app_state.set_api_key(TEST_API_KEY)
        mock_gemini(lambda request: httpx.Response(200, json=gemini_success_body(SECTIONED_RESPONSE_TEXT)))
        client.post("/form/submit")

        response = client.get("/recommendations/latest")

        assert response.status_code == 200
        data = response.json()
        assert data["response_text"] == SECTIONED_RESPONSE_TEXT
        assert len(data["sections"]) == 4
        assert data["notification"] is None


class TestMarkdownRendering:

    INJECTED_HTML = "<img src=x onerror=alert(document.cookie)>"

    def test_raw_html_from_gemini_is_never_live_markup(self, client, app_state, mock_gemini):
        app_state.set_api_key(TEST_API_KEY)
        answer = f"## Harvesting Schedule\n{self.INJECTED_HTML}\n"
        mock_gemini(lambda request: httpx.Response(200, json=gemini_success_body(answer)))
        client.post("/form/submit")

        html = client.get("/").text

        assert self.INJECTED_HTML not in html
        assert "&lt;img src=x onerror=alert(document.cookie)&gt;" in html
        # Decoded data-markdown is parsed with raw HTML escaped, then sanitized
        assert "DOMPurify.sanitize(marked.parse(el.dataset.markdown))" in html
        assert "return escapeHtml(" in html
        assert "dompurify@" in html

    def test_error_bodies_read_as_text_before_json(self, client):
        html = client.get("/").text

        script = html[html.index("async function callApi"):]
        assert script.index("if (!response.ok)") < script.index("await response.text()")
        assert script.index("await response.text()") < script.index("return response.json()")
