"""Integration tests for the chat panel driving the real proxy app.

The panel's CompletionClient talks to the FastAPI app over ASGITransport;
only the upstream model is stubbed.
"""

from collections.abc import Generator

import pytest
from httpx import ASGITransport

from nexus_inquire.api.app import app
from nexus_inquire.api.routes import FALLBACK_MESSAGE
from nexus_inquire.models.schemas import Role
from nexus_inquire.proxy.completion import get_completion_service
from nexus_inquire.ui.client import CompletionClient
from nexus_inquire.ui.panel import ChatPanel
from tests.conftest import StubCompletionService


@pytest.fixture
def installed_stub(stub_service: StubCompletionService) -> Generator[StubCompletionService]:
    app.dependency_overrides[get_completion_service] = lambda: stub_service
    yield stub_service
    app.dependency_overrides.clear()


@pytest.fixture
def panel(installed_stub: StubCompletionService) -> ChatPanel:
    client = CompletionClient(base_url="http://test", transport=ASGITransport(app=app))
    return ChatPanel(client=client, params={"step": 2, "organizationType": "Government"})


class TestPanelThroughProxy:
    """Chat turns that travel through the completion endpoint."""

    async def test_reply_from_upstream_is_appended(
        self, panel: ChatPanel, installed_stub: StubCompletionService
    ) -> None:
        panel.update_draft("What is step 2?")

        await panel.submit()

        assert panel.messages[-1].role == Role.ASSISTANT
        assert panel.messages[-1].content == "Step 2 is X."
        assert 'User query: "What is step 2?"' in installed_stub.prompts[0]
        assert '"organizationType":"Government"' in installed_stub.prompts[0]

    async def test_upstream_failure_shows_proxy_fallback(
        self, panel: ChatPanel, installed_stub: StubCompletionService
    ) -> None:
        installed_stub.error = RuntimeError("upstream exploded")
        panel.update_draft("hello")

        await panel.submit()

        assert len(panel.messages) == 3
        assert panel.messages[-1].role == Role.ASSISTANT
        assert panel.messages[-1].content == FALLBACK_MESSAGE

    async def test_several_turns_keep_message_count(self, panel: ChatPanel) -> None:
        for question in ("one", "two", "three"):
            panel.update_draft(question)
            panel.submit()
        await panel.wait_idle()

        assert len(panel.messages) == 1 + 2 * 3
        assert [m.role for m in panel.messages[1:4]] == [Role.USER] * 3
