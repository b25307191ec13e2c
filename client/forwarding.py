"""
HTTP access to the forwarding endpoint from the client side.
"""

import logging
from typing import Optional, Protocol

import httpx

from config import settings

logger = logging.getLogger(__name__)


class ForwardingError(Exception):
    """Raised when the forwarding endpoint does not hand back usable text"""

    pass


class Forwarder(Protocol):
    async def forward(self, prompt: str) -> str:
        ...


class ForwardingClient:
    """
    Posts {"prompt": ...} to the forwarding endpoint and returns its "text".

    Args:
        endpoint_url: Full URL of POST /api/generate
        timeout: Seconds to wait, None for no timeout
        transport: Optional httpx transport (tests mount the ASGI app here)
    """

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint_url = endpoint_url or settings.FORWARD_ENDPOINT_URL
        self.timeout = timeout if timeout is not None else settings.CLIENT_TIMEOUT
        self.transport = transport

    async def forward(self, prompt: str) -> str:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(self.endpoint_url, json={"prompt": prompt})
            except httpx.HTTPError as e:
                logger.error(f"❌ Forwarding endpoint unreachable: {str(e)}")
                raise ForwardingError(f"Forwarding endpoint unreachable: {str(e)}") from e

        if not response.is_success:
            logger.error(
                f"❌ Forwarding endpoint answered {response.status_code}: {response.text[:200]}"
            )
            raise ForwardingError(f"Forwarding endpoint answered {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise ForwardingError("Forwarding endpoint returned a non-JSON body") from e

        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise ForwardingError("Forwarding endpoint returned no text")
        return text
