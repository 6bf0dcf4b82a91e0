from typing import Any

from openai import AsyncOpenAI

from ..base import DEFAULT_TEMPERATURE, LLMProvider
from ..models import ChatMessage, LLMResponse


def _to_openai_message(msg: ChatMessage) -> dict[str, Any]:
    """Chat Completions message; images become ``image_url`` data URL parts."""
    if not msg.images:
        return {"role": msg.role, "content": msg.content}

    parts: list[dict[str, Any]] = [{"type": "text", "text": msg.content}]
    parts.extend(
        {"type": "image_url", "image_url": {"url": f"data:image/jpeg;base64,{image}"}}
        for image in msg.images
    )
    return {"role": msg.role, "content": parts}


class OpenAIProvider(LLMProvider):
    """OpenAI Chat Completions backend (gpt-4o family, vision capable).

    Args:
        api_key: OpenAI API key
        model: Default model id
        base_url: Optional custom API base URL (OpenAI-compatible servers)
        **client_kwargs: Passed to ``AsyncOpenAI``
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        base_url: str | None = None,
        **client_kwargs: Any
    ):
        self._model = model
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url, **client_kwargs)

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        params: dict[str, Any] = {
            "model": model or self._model,
            "messages": [_to_openai_message(msg) for msg in messages],
            "temperature": temperature,
        }
        if max_tokens is not None:
            params["max_tokens"] = max_tokens

        completion = await self._client.chat.completions.create(**params)

        usage = None
        if completion.usage:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens,
            }
        text = completion.choices[0].message.content if completion.choices else None
        return LLMResponse(content=text or "", model=completion.model, usage=usage)

    async def close(self) -> None:
        await self._client.close()
