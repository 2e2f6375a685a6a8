from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

COMPLETION_PATH = "/api/completion"


class Role(str, Enum):
    """Speaker of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single message in the chat panel conversation.

    Attributes:
        role: The speaker (system, user, or assistant).
        content: The message text.
    """

    model_config = {"frozen": True}

    role: Role
    content: str


class CompletionRequest(BaseModel):
    """Request payload for the completion proxy.

    Both fields are optional on the wire; missing values pass through
    as an empty query and a null context.

    Attributes:
        query: The user's latest question.
        context: Opaque session state forwarded from the chat panel.
    """

    query: str = ""
    context: Any = None


class CompletionResponse(BaseModel):
    """Response from the completion proxy.

    Attributes:
        response: Reply text, or the fallback message on failure.
    """

    response: str = Field(..., description="The assistant's reply")
