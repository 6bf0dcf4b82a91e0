from .base import LLMProvider
from .factory import DEFAULT_MODEL_CANDIDATES, create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import AnthropicProvider, GeminiProvider, OpenAIProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "DEFAULT_MODEL_CANDIDATES",
    "ChatMessage",
    "LLMResponse",
    "AnthropicProvider",
    "GeminiProvider",
    "OpenAIProvider",
]
