"""Completion proxy logic behind the HTTP handler.

Responsibilities:
    - Configuration of the upstream provider from the environment
    - Construction of the fixed instruction prompt
    - Single-shot completions through an Agno agent

Holds no conversation state. Kept separate from the HTTP layer.
"""

from nexus_inquire.proxy.completion import (
    CompletionError,
    CompletionService,
    build_prompt,
    get_completion_service,
)
from nexus_inquire.proxy.config import ProxyConfig, get_proxy_config

__all__ = [
    "CompletionError",
    "CompletionService",
    "ProxyConfig",
    "build_prompt",
    "get_completion_service",
    "get_proxy_config",
]
