"""Conversation message models.

The shapes follow the OpenAI chat message format. The engine also accepts
plain dicts of the same shape, so these models are a convenience for callers
that want validation up front.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ContentPart(BaseModel):
    """One part of a multi-part message content (text, image, ...)."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(..., description="Part type, e.g. 'text' or 'image_url'")
    text: str | None = Field(default=None, description="Text for 'text' parts")


class Message(BaseModel):
    """A single conversation message.

    Attributes:
        role: Author of the message.
        content: Flat text or a list of typed parts.
        tool_calls: Tool invocations requested by an assistant message.
    """

    model_config = ConfigDict(extra="allow")

    role: Literal["system", "developer", "user", "assistant", "tool"] = Field(
        ..., description="Message author role"
    )
    content: str | list[ContentPart] | None = Field(
        default=None, description="Message content"
    )
    tool_calls: list[Any] | None = Field(
        default=None, description="Tool invocations made by the assistant"
    )
