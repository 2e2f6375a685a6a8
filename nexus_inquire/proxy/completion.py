"""Prompt construction and upstream completion calls through Agno.

The proxy sends one fixed instruction prompt per chat turn. The prompt is the
whole conversation: no stored sessions, no history, no agent instructions.
Session continuity only exists through the context the chat panel echoes back
on every call.
"""

import json
import logging
from typing import Any

from agno.agent import Agent
from agno.models.openai import OpenAIChat
from agno.run.base import RunStatus

from nexus_inquire.proxy.config import ProxyConfig, get_proxy_config

logger = logging.getLogger(__name__)

PERSONA = (
    "You are the Nexus Enquire Copilot, an expert AI assistant for the "
    "BWGA Nexus AI 5-Step Framework."
)

DIRECTIVES = (
    "Searches for and provides relevant facts when requested",
    "Offers guidance specific to the current step in the 5-step framework",
    "Reviews and validates user inputs when asked",
    "Suggests improvements or next steps",
    "Maintains context from the wizard session",
)

CLOSING = (
    "Keep responses concise but informative, and always be helpful and professional."
)


class CompletionError(Exception):
    """Raised when the upstream provider yields no usable completion."""

    pass


def serialize_context(context: Any) -> str:
    """Serialize session context compactly for embedding in the prompt."""
    return json.dumps(context, separators=(",", ":"), ensure_ascii=False)


def build_prompt(query: str, context: Any) -> str:
    """Build the single instruction prompt sent upstream.

    Args:
        query: The user's question, embedded verbatim.
        context: Opaque session state, embedded as JSON.

    Returns:
        The complete prompt text.
    """
    directives = "\n".join(f"{i}. {d}" for i, d in enumerate(DIRECTIVES, start=1))
    return (
        f"{PERSONA}\n\n"
        f"Context from current wizard session: {serialize_context(context)}\n\n"
        f'User query: "{query}"\n\n'
        f"Please provide a helpful, factual response that:\n"
        f"{directives}\n\n"
        f"{CLOSING}"
    )


class CompletionService:
    """Service for single-shot completions from the upstream provider.

    Wraps Agno's Agent with:
    - Explicit configuration instead of a process-wide client
    - A fresh agent per call, so concurrent requests share no run state
    - Uniform failure reporting through CompletionError
    """

    def __init__(self, config: ProxyConfig | None = None) -> None:
        """Initialize the completion service.

        Args:
            config: Optional proxy configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_proxy_config()

    def _create_agent(self) -> Agent:
        """Create an Agno agent for one completion.

        Returns:
            Agent with an OpenAI model and no storage or instructions.
        """
        model = OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

        return Agent(model=model, telemetry=False)

    async def complete(self, prompt: str) -> str:
        """Send a prompt as a single user message and return the reply text.

        Args:
            prompt: The full prompt text.

        Returns:
            Text content of the first completion.

        Raises:
            CompletionError: If no API key is configured, the run fails,
                or the completion carries no text.
        """
        if not self._config.has_api_key:
            raise CompletionError(
                "API key required. Set LLM_API_KEY or OPENAI_API_KEY in .env"
            )

        agent = self._create_agent()
        response = await agent.arun(prompt)

        if getattr(response, "status", None) == RunStatus.error:
            raise CompletionError(f"Upstream run failed: {response.content}")

        content = response.content
        if not isinstance(content, str) or not content:
            raise CompletionError("Upstream completion contained no text")

        logger.debug(f"Received completion ({len(content)} chars)")
        return content


# Module-level singleton instance
_completion_service: CompletionService | None = None


def get_completion_service() -> CompletionService:
    """Get or create the global completion service.

    Returns:
        The CompletionService instance.
    """
    global _completion_service
    if _completion_service is None:
        _completion_service = CompletionService()
    return _completion_service
