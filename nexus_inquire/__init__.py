"""Nexus Inquire - chat sidebar backed by a hosted LLM completion proxy.

Combines FastAPI for the completion proxy, Agno for the upstream model call,
NiceGUI for the chat sidebar, and Pydantic for data validation.

Components:
    - api: Completion proxy HTTP endpoint
    - proxy: Prompt construction and upstream model calls
    - ui: Chat panel state and sidebar interface
    - models: Message and wire schemas
"""

__version__ = "0.1.0"
