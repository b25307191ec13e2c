"""
Pytest fixtures for Viewlytics tests. No test touches the network: the
upstream provider is replaced through FastAPI dependency overrides and the
client talks to the app through httpx.ASGITransport.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from utils.clients.anthropic import UpstreamError, get_text_generator

FENCED_RESPONSE = (
    "```json\n"
    '{"whyThisProjectExists":"x","summary":"s","score":80,"accessibility":70,"suggestions":["a","b"]}'
    "\n```"
)


class FakeGenerator:
    """TextGenerator returning a canned reply, or raising a canned error."""

    def __init__(self, text: str = FENCED_RESPONSE, error: UpstreamError = None):
        self.text = text
        self.error = error
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_generator():
    generator = FakeGenerator()
    app.dependency_overrides[get_text_generator] = lambda: generator
    yield generator
    app.dependency_overrides.clear()


@pytest.fixture
def api_client(fake_generator):
    return TestClient(app)


@pytest.fixture
def asgi_transport():
    return httpx.ASGITransport(app=app)
