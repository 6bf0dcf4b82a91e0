import logging
from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse

logger = logging.getLogger(__name__)

PROBE_PROMPT = "Hello"
PROBE_MAX_TOKENS = 16
COMPLETION_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7


class LLMProvider(ABC):
    """Remote model vendor used as the tutor's completion backend.

    Subclasses only translate a list of ``ChatMessage`` into one SDK request.
    ``probe`` and ``complete`` are shared, so every vendor satisfies
    ``cognitutor.tutor.CompletionBackend`` the same way.

    Hidden design decisions:
    - SDK client setup and authentication
    - Vendor message format, including how images are attached
    - Extraction of text and token usage from the vendor response

    Usable as an async context manager; the client is closed on exit.
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Model id used when a request names none."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Send one request and return the generated text.

        Raises:
            Exception: Whatever the vendor SDK raises (auth, quota, network)
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the SDK client."""

    async def probe(self, model_id: str) -> bool:
        """Check that ``model_id`` answers a trivial request with some text."""
        try:
            response = await self.chat_completion(
                [ChatMessage(role="user", content=PROBE_PROMPT)],
                model=model_id,
                max_tokens=PROBE_MAX_TOKENS,
            )
        except Exception as e:
            logger.debug("Probe of %s failed: %s", model_id, e)
            return False
        return bool(response.content.strip())

    async def complete(
        self,
        prompt: str,
        model_id: str | None = None,
        images: list[str] | None = None,
    ) -> str:
        """Send a single-turn prompt, optionally with base64 images.

        The whole tutor prompt (persona, context, history) is already in
        ``prompt``, so it goes out as one user message.
        """
        response = await self.chat_completion(
            [ChatMessage(role="user", content=prompt, images=images or [])],
            model=model_id,
            max_tokens=COMPLETION_MAX_TOKENS,
        )
        logger.debug("Completion from %s: %s", response.model, response.usage)
        return response.content

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        try:
            await self.close()
        except RuntimeError as e:
            # httpx can complain about a closed loop during interpreter shutdown
            if "Event loop is closed" not in str(e):
                raise
