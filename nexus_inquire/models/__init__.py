"""Pydantic models for chat messages and the completion wire contract.

Models:
    - Role: Message speaker enumeration
    - Message: Entry in the chat panel conversation
    - CompletionRequest: Incoming proxy request payload
    - CompletionResponse: Outgoing proxy response payload
"""

from nexus_inquire.models.schemas import (
    COMPLETION_PATH,
    CompletionRequest,
    CompletionResponse,
    Message,
    Role,
)

__all__ = ["COMPLETION_PATH", "CompletionRequest", "CompletionResponse", "Message", "Role"]
