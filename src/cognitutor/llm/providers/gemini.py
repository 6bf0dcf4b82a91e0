"""Google Gemini backend built on the google-genai SDK.

Gemini sometimes answers with no text (safety blocks, truncated candidates).
That comes back as an empty ``LLMResponse``; the tutor counts it as a failed
call and falls back, so nothing is retried here.
"""

import base64
from typing import Any

from google import genai
from google.genai import types

from ..base import DEFAULT_TEMPERATURE, LLMProvider
from ..models import ChatMessage, LLMResponse

# Student questions are benign; only block high-probability harms
SAFETY_SETTINGS = [
    types.SafetySetting(category=category, threshold="BLOCK_ONLY_HIGH")
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]


def _response_text(response: types.GenerateContentResponse) -> str:
    if not response.candidates:
        return ""
    content = response.candidates[0].content
    if content is None or not content.parts:
        return ""
    return "".join(part.text for part in content.parts if part.text)


class GeminiProvider(LLMProvider):
    """Google Gemini backend (gemini-2.5-flash by default).

    Args:
        api_key: Google AI Studio API key
        model: Default model id
        **client_kwargs: Passed to ``genai.Client``
    """

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", **client_kwargs: Any):
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        return self._model

    def _to_contents(self, messages: list[ChatMessage]) -> tuple[str | None, list[types.Content]]:
        """Split out the system instruction and build the content turns."""
        system = "\n\n".join(m.content for m in messages if m.role == "system") or None
        contents = []
        for msg in messages:
            if msg.role == "system":
                continue
            parts = [types.Part(text=msg.content)]
            parts.extend(
                types.Part.from_bytes(data=base64.b64decode(image), mime_type="image/jpeg")
                for image in msg.images
            )
            contents.append(types.Content(role="model" if msg.role == "assistant" else "user", parts=parts))
        return system, contents

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        model_id = model or self._model
        system, contents = self._to_contents(messages)
        config = types.GenerateContentConfig(
            temperature=temperature,
            system_instruction=system,
            safety_settings=SAFETY_SETTINGS,
            max_output_tokens=max_tokens,
        )

        response = await self._client.aio.models.generate_content(
            model=model_id,
            contents=contents,
            config=config,
        )

        usage = None
        if response.usage_metadata:
            meta = response.usage_metadata
            usage = {
                "prompt_tokens": meta.prompt_token_count or 0,
                "completion_tokens": meta.candidates_token_count or 0,
                "total_tokens": meta.total_token_count or 0,
            }
        return LLMResponse(content=_response_text(response), model=model_id, usage=usage)

    async def close(self) -> None:
        # genai.Client holds no connection that needs closing
        pass
