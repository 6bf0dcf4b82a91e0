"""Provider chain orchestration for the AI tutor.

``TutorService`` tries the remote provider first and falls back to the
deterministic responder whenever the provider is unavailable or fails.
Callers always get text back; provider errors are logged, never raised.
"""

import asyncio
import base64
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from .base import CompletionBackend, TutorResponder
from .composer import MAX_HISTORY_MESSAGES
from .deterministic import DeterministicResponder
from .exceptions import ProviderUnavailableError
from .models import ChatContext, ChatMessage, ProviderState, ProviderStatus, TutorReply
from .remote import RemoteResponder

logger = logging.getLogger(__name__)


def normalize_message(message: Any) -> str:
    return message if isinstance(message, str) else ""


def normalize_context(context: ChatContext | Mapping[str, Any] | None) -> ChatContext:
    if isinstance(context, ChatContext):
        return context
    if isinstance(context, Mapping):
        try:
            return ChatContext.model_validate(dict(context))
        except ValidationError as e:
            logger.debug("Ignoring invalid chat context: %s", e)
    return ChatContext()


def normalize_history(history: Iterable[ChatMessage | Mapping[str, Any]] | None) -> list[ChatMessage]:
    if not history:
        return []
    if isinstance(history, (str, bytes, Mapping)) or not isinstance(history, Iterable):
        logger.debug("Ignoring chat history of type %s", type(history).__name__)
        return []
    messages = []
    for entry in history:
        if isinstance(entry, ChatMessage):
            messages.append(entry)
            continue
        try:
            messages.append(ChatMessage.model_validate(entry))
        except ValidationError as e:
            logger.debug("Skipping invalid history entry: %s", e)
    return messages


def encode_image(image_data: Any) -> str:
    """Return base64 text for raw bytes, a base64 string or a data URL.

    Anything else (None included) becomes an empty string.
    """
    if isinstance(image_data, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(image_data)).decode("ascii")
    if not isinstance(image_data, str):
        if image_data is not None:
            logger.debug("Ignoring image data of type %s", type(image_data).__name__)
        return ""
    if image_data.startswith("data:") and "," in image_data:
        return image_data.split(",", 1)[1]
    return image_data


class TutorService:
    """AI tutor with a remote-first, deterministic-fallback provider chain.

    State machine (held in ``ProviderState``):
        uninitialized -> probing -> available | unavailable
        available -> unavailable on the first failed remote call

    Only ``initialize``/``reprobe`` can make the provider available.

    Args:
        backend: Remote completion backend, or None for a deterministic-only tutor
        model_candidates: Model ids to probe, in order
        fallback: Responder used when the remote path can't answer
        state: Provider state to share; a fresh one is created when omitted
        request_timeout: Seconds allowed for each remote call (probe or reply)
        history_limit: Messages of history included in remote prompts (max 10)
    """

    def __init__(
        self,
        backend: CompletionBackend | None = None,
        model_candidates: Sequence[str] = (),
        fallback: TutorResponder | None = None,
        state: ProviderState | None = None,
        request_timeout: float | None = 30.0,
        history_limit: int = MAX_HISTORY_MESSAGES,
    ):
        self._backend = backend
        self._candidates = list(model_candidates)
        self._fallback = fallback or DeterministicResponder()
        self._state = state or ProviderState()
        self._timeout = request_timeout
        self._history_limit = min(history_limit, MAX_HISTORY_MESSAGES)
        self._probe_lock = asyncio.Lock()

    @property
    def state(self) -> ProviderState:
        return self._state

    @property
    def fallback(self) -> TutorResponder:
        return self._fallback

    async def initialize(self) -> ProviderState:
        """Probe the candidates once; later calls return the recorded state."""
        async with self._probe_lock:
            if self._state.status in (ProviderStatus.UNINITIALIZED, ProviderStatus.PROBING):
                await self._probe()
        return self._state

    async def reprobe(self) -> ProviderState:
        """Probe the candidates again, even after a downgrade."""
        async with self._probe_lock:
            await self._probe()
        return self._state

    async def _probe(self) -> None:
        self._state.begin_probe()
        try:
            if self._backend is None:
                logger.info("No remote provider configured, using the deterministic tutor")
                self._state.finish_probe(None)
                return

            for model_id in self._candidates:
                if await self._probe_one(model_id):
                    logger.info("Remote provider available with model %s", model_id)
                    self._state.finish_probe(model_id)
                    return
                logger.info("Model %s did not answer the probe", model_id)

            logger.warning(
                "No candidate model answered (%d tried), using the deterministic tutor",
                len(self._candidates),
            )
            self._state.finish_probe(None)
        finally:
            # Interrupted probe: leave the state re-probeable instead of stuck
            if self._state.status is ProviderStatus.PROBING:
                self._state.status = ProviderStatus.UNINITIALIZED

    async def _probe_one(self, model_id: str) -> bool:
        try:
            return bool(await asyncio.wait_for(self._backend.probe(model_id), self._timeout))
        except Exception as e:
            logger.debug("Probe of %s raised %s: %s", model_id, type(e).__name__, e)
            return False

    def _remote(self) -> RemoteResponder:
        if self._backend is None or not self._state.is_available:
            raise ProviderUnavailableError()
        return RemoteResponder(self._backend, self._state.active_model, self._history_limit)

    def _downgrade(self, error: Exception) -> None:
        model_id = self._state.active_model
        if self._state.mark_unavailable():
            logger.warning(
                "Remote provider %s failed (%s: %s), falling back to the deterministic tutor",
                model_id, type(error).__name__, error,
            )
        else:
            logger.debug("Remote call failed after downgrade: %s", error)

    async def generate_reply(
        self,
        message: Any,
        context: ChatContext | Mapping[str, Any] | None = None,
        chat_history: Iterable[ChatMessage | Mapping[str, Any]] | None = None,
    ) -> TutorReply:
        """Answer a chat message, reporting which path produced the reply."""
        text = normalize_message(message)
        ctx = normalize_context(context)
        history = normalize_history(chat_history)

        if self._state.is_available:
            try:
                remote = self._remote()
                return await asyncio.wait_for(remote.respond(text, ctx, history), self._timeout)
            except Exception as e:
                self._downgrade(e)

        return await self._fallback.respond(text, ctx, history)

    async def generate_response(
        self,
        message: Any,
        context: ChatContext | Mapping[str, Any] | None = None,
        chat_history: Iterable[ChatMessage | Mapping[str, Any]] | None = None,
    ) -> str:
        """Answer a chat message. Never raises for provider failures."""
        reply = await self.generate_reply(message, context, chat_history)
        return reply.text

    async def analyze_image(
        self,
        image_data: bytes | memoryview | str | None,
        context: str | None = None,
    ) -> str:
        """Describe an image. Never raises for provider failures.

        Args:
            image_data: Raw bytes (or a buffer), base64 text or a data URL
            context: Optional text the student sent with the image
        """
        image_b64 = encode_image(image_data)
        context = context if isinstance(context, str) and context else None

        if self._state.is_available:
            try:
                remote = self._remote()
                return await asyncio.wait_for(remote.describe_image(image_b64, context), self._timeout)
            except Exception as e:
                self._downgrade(e)

        return await self._fallback.describe_image(image_b64, context)

    async def close(self) -> None:
        close = getattr(self._backend, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "TutorService":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
