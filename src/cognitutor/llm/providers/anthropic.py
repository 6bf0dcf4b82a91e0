from typing import Any

from anthropic import AsyncAnthropic

from ..base import DEFAULT_TEMPERATURE, LLMProvider
from ..models import ChatMessage, LLMResponse

# Messages API rejects requests without max_tokens
_DEFAULT_MAX_TOKENS = 4096


def _content_blocks(msg: ChatMessage) -> str | list[dict[str, Any]]:
    """Plain text, or base64 image blocks followed by the text block."""
    if not msg.images:
        return msg.content
    blocks: list[dict[str, Any]] = [
        {"type": "image", "source": {"type": "base64", "media_type": "image/jpeg", "data": image}}
        for image in msg.images
    ]
    blocks.append({"type": "text", "text": msg.content})
    return blocks


class AnthropicProvider(LLMProvider):
    """Anthropic Messages API backend.

    System messages are lifted into the top-level ``system`` parameter.

    Args:
        api_key: Anthropic API key
        model: Default model id
        base_url: Optional custom API base URL
        **client_kwargs: Passed to ``AsyncAnthropic``
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        base_url: str | None = None,
        **client_kwargs: Any
    ):
        self._model = model
        self._client = AsyncAnthropic(api_key=api_key, base_url=base_url, **client_kwargs)

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
        system = "\n\n".join(m.content for m in messages if m.role == "system")
        params: dict[str, Any] = {
            "model": model or self._model,
            "messages": [
                {"role": m.role, "content": _content_blocks(m)}
                for m in messages if m.role != "system"
            ],
            "temperature": temperature,
            "max_tokens": max_tokens or _DEFAULT_MAX_TOKENS,
        }
        if system:
            params["system"] = system

        response = await self._client.messages.create(**params)

        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.input_tokens,
                "completion_tokens": response.usage.output_tokens,
                "total_tokens": response.usage.input_tokens + response.usage.output_tokens,
            }
        text = "".join(block.text for block in response.content if getattr(block, "text", None))
        return LLMResponse(content=text, model=response.model, usage=usage)

    async def close(self) -> None:
        await self._client.close()
