"""Responder backed by a remote generative-text provider."""

from collections.abc import Sequence

from .base import CompletionBackend, TutorResponder
from .composer import MAX_HISTORY_MESSAGES, build_chat_prompt, build_image_prompt
from .exceptions import EmptyCompletionError
from .models import ChatContext, ChatMessage, ReplySource, TutorReply


class RemoteResponder(TutorResponder):
    """Sends a context-augmented prompt to one model of a completion backend.

    Errors from the backend propagate; deciding what to do about them is the
    orchestrator's job.
    """

    def __init__(
        self,
        backend: CompletionBackend,
        model_id: str | None,
        history_limit: int = MAX_HISTORY_MESSAGES,
    ):
        self._backend = backend
        self._model_id = model_id
        self._history_limit = history_limit

    @property
    def name(self) -> str:
        return f"remote:{self._model_id}"

    async def _complete(self, prompt: str, images: list[str] | None = None) -> str:
        text = await self._backend.complete(prompt, self._model_id, images=images)
        if not text or not text.strip():
            raise EmptyCompletionError(self._model_id)
        return text

    async def respond(
        self,
        message: str,
        context: ChatContext,
        history: Sequence[ChatMessage],
    ) -> TutorReply:
        prompt = build_chat_prompt(message, context, history, self._history_limit)
        text = await self._complete(prompt)
        return TutorReply(text=text, source=ReplySource.REMOTE, model=self._model_id)

    async def describe_image(self, image_b64: str, context: str | None) -> str:
        return await self._complete(build_image_prompt(context), images=[image_b64])
