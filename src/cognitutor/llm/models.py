from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """One message of a request sent to a remote model.

    Distinct from ``cognitutor.tutor.ChatMessage``: this one may carry a
    system role and image attachments, and has no timestamp.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str
    images: list[str] = Field(
        default_factory=list,
        description="Base64-encoded JPEG images attached to the message"
    )


class LLMResponse(BaseModel):
    """Text returned by a remote model."""

    model_config = ConfigDict(frozen=True)

    content: str
    model: str = Field(description="Model id that produced the text")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token counts (prompt_tokens, completion_tokens, total_tokens)"
    )
