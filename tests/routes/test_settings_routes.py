"""
Tests for the /settings/api-key endpoints.
"""

from conftest import TEST_API_KEY


class TestApiKeySettings:

    def test_not_configured_initially(self, client):
        response = client.get("/settings/api-key")

        assert response.status_code == 200
        assert response.json() == {"configured": False}

    def test_store_key_never_echoes_it(self, client, app_state):
        response = client.put("/settings/api-key", json={"api_key": f"  {TEST_API_KEY}  "})

        assert response.status_code == 200
        assert response.json() == {"configured": True}
        assert TEST_API_KEY not in response.text
        assert app_state.api_key == TEST_API_KEY

        status_response = client.get("/settings/api-key")
        assert status_response.json() == {"configured": True}
        assert TEST_API_KEY not in status_response.text

    def test_whitespace_key_is_not_configured(self, client):
        response = client.put("/settings/api-key", json={"api_key": "   "})

        assert response.status_code == 200
        assert response.json() == {"configured": False}

    def test_empty_key_rejected(self, client):
        response = client.put("/settings/api-key", json={"api_key": ""})

        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "validation_error"

    def test_validation_error_does_not_echo_input(self, client):
        response = client.put("/settings/api-key", json={"api_key": "x" * 600})

        assert response.status_code == 422
        assert "x" * 600 not in response.text

    def test_delete_forgets_key(self, client, app_state):
        client.put("/settings/api-key", json={"api_key": TEST_API_KEY})

        response = client.delete("/settings/api-key")

        assert response.status_code == 200
        assert response.json() == {"configured": False}
        assert app_state.has_api_key() is False
