"""Chat panel conversation state.

Kept free of NiceGUI so it can be driven directly from tests. All mutation
happens on the event loop thread; replies are appended by tasks whenever
their request finishes, at whatever position the list has reached by then.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from nexus_inquire.models.schemas import Message, Role
from nexus_inquire.ui.client import CLIENT_FALLBACK_MESSAGE, CompletionClient

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Welcome to Nexus Inquire AI. Ask any question about your report or opportunity."
)


class ChatPanel:
    """Manages chat state for one sidebar session.

    Attributes:
        messages: Append-only conversation, seeded with the welcome message.
        draft: Current input box text.
        params: Opaque host state sent as ``context`` with each submission.
        on_change: Called after every change that needs a re-render.
    """

    def __init__(
        self,
        client: CompletionClient | None = None,
        params: Any = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.messages: list[Message] = [Message(role=Role.SYSTEM, content=WELCOME_MESSAGE)]
        self.draft: str = ""
        self.params = params
        self.on_change = on_change
        self._client = client or CompletionClient()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending_count(self) -> int:
        """Number of submissions still waiting for a reply."""
        return len(self._pending)

    def update_draft(self, text: str) -> None:
        self.draft = text

    def submit(self) -> asyncio.Task[None] | None:
        """Send the current draft.

        Appends the user message and clears the draft immediately, then
        schedules the proxy call. Must be called from a running event loop.

        Returns:
            The task that will append the reply, or None for a blank draft.
        """
        if not self.draft.strip():
            return None

        query = self.draft
        self.messages.append(Message(role=Role.USER, content=query))
        self.draft = ""

        task = asyncio.get_running_loop().create_task(self._answer(query, self.params))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

        self._notify()
        return task

    async def wait_idle(self) -> None:
        """Wait until every in-flight submission has appended its reply."""
        while self._pending:
            await asyncio.gather(*self._pending)

    async def _answer(self, query: str, context: Any) -> None:
        try:
            text = await self._client.complete(query, context)
        except Exception as e:
            logger.error(f"Completion failed for chat turn: {e}")
            text = CLIENT_FALLBACK_MESSAGE

        self.messages.append(Message(role=Role.ASSISTANT, content=text))
        self._pending.discard(asyncio.current_task())
        self._notify()

    def _notify(self) -> None:
        if self.on_change is None:
            return
        try:
            self.on_change()
        except Exception as e:
            logger.error(f"Chat panel re-render failed: {e}")
