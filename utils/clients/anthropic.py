"""
Upstream provider client for Viewlytics.

The forwarding endpoint only needs "text in, text out". Anything that can
do that implements TextGenerator, so tests can swap in a fake without a
network dependency. Every call is a single attempt; nothing is retried.
"""

import logging
from typing import Optional, Protocol

import anthropic

from config import get_anthropic_api_key, get_anthropic_model, get_max_tokens

logger = logging.getLogger(__name__)

MISSING_CREDENTIAL = "missing_credential"
PROVIDER_ERROR = "provider_error"
EMPTY_RESPONSE = "empty_response"


class UpstreamError(Exception):
    """Raised when the upstream provider cannot produce text"""

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class AnthropicGenerator:
    """
    TextGenerator backed by the Anthropic Messages API.

    The credential is checked on every call so a missing key fails each
    request instead of the whole service at import time.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ):
        self.api_key = get_anthropic_api_key() if api_key is None else api_key
        self.model = model or get_anthropic_model()
        self.max_tokens = max_tokens or get_max_tokens()
        self._client: Optional[anthropic.AsyncAnthropic] = None

    def _get_client(self) -> anthropic.AsyncAnthropic:
        if not self.api_key or not self.api_key.strip():
            raise UpstreamError(MISSING_CREDENTIAL, "Upstream credential is not configured")
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key, max_retries=0)
        return self._client

    async def generate(self, prompt: str) -> str:
        client = self._get_client()

        logger.info(f"📤 Sending prompt to {self.model} ({len(prompt)} chars)")
        try:
            message = await client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            logger.error(f"❌ Anthropic API failure: {str(e)}")
            raise UpstreamError(PROVIDER_ERROR, str(e)) from e

        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        if not text:
            raise UpstreamError(EMPTY_RESPONSE, "Upstream provider returned no text")

        logger.info(f"📥 Received {len(text)} chars from {self.model}")
        return text


# Lazy initialization of the default generator
_generator: Optional[AnthropicGenerator] = None


def get_text_generator() -> TextGenerator:
    """Get or create the default generator instance."""
    global _generator
    if _generator is None:
        _generator = AnthropicGenerator()
    return _generator
