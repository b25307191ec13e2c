"""Tests for the forwarding endpoint and status routes."""

import pytest

from config import settings
from utils.clients.anthropic import (
    EMPTY_RESPONSE,
    MISSING_CREDENTIAL,
    PROVIDER_ERROR,
    AnthropicGenerator,
    UpstreamError,
)


class TestGenerateEndpoint:
    def test_returns_text_verbatim(self, api_client, fake_generator):
        response = api_client.post("/api/generate", json={"prompt": "hello"})
        assert response.status_code == 200
        assert response.json() == {"text": fake_generator.text}
        assert fake_generator.prompts == ["hello"]

    def test_one_upstream_call_per_request(self, api_client, fake_generator):
        api_client.post("/api/generate", json={"prompt": "one"})
        api_client.post("/api/generate", json={"prompt": "two"})
        assert fake_generator.prompts == ["one", "two"]

    @pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"text": "hello"}])
    def test_missing_prompt_is_rejected(self, api_client, fake_generator, body):
        response = api_client.post("/api/generate", json=body)
        assert response.status_code == 422
        assert fake_generator.prompts == []

    def test_missing_credential_is_503(self, api_client, fake_generator):
        fake_generator.error = UpstreamError(MISSING_CREDENTIAL, "Upstream credential is not configured")
        response = api_client.post("/api/generate", json={"prompt": "hello"})
        assert response.status_code == 503
        assert response.json()["detail"] == "Upstream credential is not configured"

    def test_provider_failure_is_502(self, api_client, fake_generator):
        fake_generator.error = UpstreamError(PROVIDER_ERROR, "overloaded")
        response = api_client.post("/api/generate", json={"prompt": "hello"})
        assert response.status_code == 502
        assert response.json()["detail"] == "Upstream provider request failed: overloaded"

    def test_empty_provider_reply_is_502(self, api_client, fake_generator):
        fake_generator.error = UpstreamError(EMPTY_RESPONSE, "Upstream provider returned no text")
        response = api_client.post("/api/generate", json={"prompt": "hello"})
        assert response.status_code == 502
        assert response.json()["detail"] == "Upstream provider returned no text"

    def test_unexpected_failure_is_500(self, api_client, fake_generator):
        fake_generator.error = RuntimeError("boom")
        response = api_client.post("/api/generate", json={"prompt": "hello"})
        assert response.status_code == 500
        assert response.json()["detail"] == "Generation failed: boom"


class TestMissingCredential:
    @pytest.mark.asyncio
    async def test_generator_without_key_fails_every_call(self):
        generator = AnthropicGenerator(api_key="")
        for _ in range(2):
            with pytest.raises(UpstreamError) as exc_info:
                await generator.generate("hello")
            assert exc_info.value.kind == MISSING_CREDENTIAL

    def test_endpoint_without_key_fails(self):
        from fastapi.testclient import TestClient

        from main import app
        from utils.clients.anthropic import get_text_generator

        app.dependency_overrides[get_text_generator] = lambda: AnthropicGenerator(api_key="")
        try:
            response = TestClient(app).post("/api/generate", json={"prompt": "hello"})
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 503


class TestStatusRoutes:
    def test_root(self, api_client):
        response = api_client.get("/")
        assert response.status_code == 200
        assert response.json()["endpoints"] == {"generate": "/api/generate (POST)"}

    def test_health(self, api_client):
        assert api_client.get("/health").json() == {"status": "healthy"}

    def test_detailed_status_without_credential(self, api_client, monkeypatch):
        monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "")
        data = api_client.get("/status/detailed").json()
        assert data["anthropic_api"] == "missing"
        assert data["overall_status"] == "degraded"

    def test_detailed_status_with_credential(self, api_client, monkeypatch):
        monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "sk-test")
        data = api_client.get("/status/detailed").json()
        assert data["anthropic_api"] == "configured"
        assert data["overall_status"] == "healthy"
        assert "sk-test" not in str(data)


class TestGeneratorConfiguration:
    def test_defaults_come_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "sk-test")
        monkeypatch.setattr(settings, "ANTHROPIC_MODEL", "claude-test-model")
        monkeypatch.setattr(settings, "MAX_TOKENS", 123)

        generator = AnthropicGenerator()

        assert generator.api_key == "sk-test"
        assert generator.model == "claude-test-model"
        assert generator.max_tokens == 123

    def test_explicit_arguments_win(self, monkeypatch):
        monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "sk-test")
        generator = AnthropicGenerator(api_key="", model="other", max_tokens=5)
        assert generator.api_key == ""
        assert generator.model == "other"
        assert generator.max_tokens == 5
