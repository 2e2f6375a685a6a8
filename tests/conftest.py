"""Pytest fixtures and shared test configuration.

Fixtures:
    - stub_service: Completion service that never leaves the process
    - async_client: HTTPX client bound to the proxy app with the stub installed
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from nexus_inquire.api import app
from nexus_inquire.proxy.completion import get_completion_service


class StubCompletionService:
    """Records prompts and answers with a canned reply or error."""

    def __init__(self, reply: str = "Step 2 is X.", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def stub_service() -> StubCompletionService:
    """Return a stub that answers every prompt with a fixed reply."""
    return StubCompletionService()


@pytest.fixture
async def async_client(
    stub_service: StubCompletionService,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        AsyncClient talking to the app with the stub service installed.
    """
    app.dependency_overrides[get_completion_service] = lambda: stub_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
