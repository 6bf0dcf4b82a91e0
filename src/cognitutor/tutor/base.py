"""Interfaces for tutor responders and the remote completion backend.

The orchestrator only sees these two abstractions. It never knows which
vendor SDK sits behind a backend, nor how a responder builds its answer.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .models import ChatContext, ChatMessage, TutorReply


@runtime_checkable
class CompletionBackend(Protocol):
    """Minimal remote generative-text capability.

    ``cognitutor.llm.LLMProvider`` implements this for every supported vendor.
    """

    async def probe(self, model_id: str) -> bool:
        """Return True if ``model_id`` answers a trivial request."""
        ...

    async def complete(
        self,
        prompt: str,
        model_id: str | None = None,
        images: list[str] | None = None,
    ) -> str:
        """Return the generated text, or raise on failure."""
        ...


class TutorResponder(ABC):
    """Something that can answer a student's chat message or image."""

    @abstractmethod
    async def respond(
        self,
        message: str,
        context: ChatContext,
        history: Sequence[ChatMessage],
    ) -> TutorReply:
        """Answer a chat message.

        Args:
            message: The student's message
            context: Normalized study context
            history: Normalized chat history, most recent last
        """

    @abstractmethod
    async def describe_image(self, image_b64: str, context: str | None) -> str:
        """Describe an image for the student.

        Args:
            image_b64: Base64-encoded image data
            context: Optional text the student sent with the image
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in logs."""
