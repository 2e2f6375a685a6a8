"""HTTP client the chat panel uses to reach the completion proxy."""

import logging
import os
from typing import Any

import httpx

from nexus_inquire.models.schemas import COMPLETION_PATH

logger = logging.getLogger(__name__)

CLIENT_FALLBACK_MESSAGE = "Sorry, I encountered an error. Please try again."


def default_api_base_url() -> str:
    """Resolve where the completion proxy lives.

    API_BASE_URL wins when set. Otherwise the proxy is assumed to share this
    process's server, so the URL follows PORT.
    """
    return os.getenv("API_BASE_URL") or f"http://localhost:{os.getenv('PORT', '8000')}"


def _reply_text(response: httpx.Response) -> str | None:
    """Pull the reply out of a proxy response body, if it has one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    text = data.get("response")
    if isinstance(text, str) and text:
        return text
    return None


class CompletionClient:
    """Posts one chat turn to the completion proxy.

    Never raises for transport problems: connection errors, non-2xx
    statuses and malformed bodies all come back as displayable text.
    The proxy's own 500 fallback text is passed through when present.
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url or default_api_base_url()
        self._transport = transport

    async def complete(self, query: str, context: Any) -> str:
        """Request a reply for ``query`` with ``context`` attached.

        No timeout is applied; a hung proxy keeps the turn pending.
        """
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=None,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    COMPLETION_PATH,
                    json={"query": query, "context": context},
                )
            except httpx.RequestError as e:
                logger.warning(f"Connection to completion proxy failed: {e}")
                return CLIENT_FALLBACK_MESSAGE

        text = _reply_text(response)
        if response.is_error:
            logger.warning(f"Completion proxy returned HTTP {response.status_code}")
        if text is None:
            return CLIENT_FALLBACK_MESSAGE
        return text
