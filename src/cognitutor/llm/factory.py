from typing import Any

from .base import LLMProvider
from .providers import AnthropicProvider, GeminiProvider, OpenAIProvider

PROVIDERS: dict[str, type[LLMProvider]] = {
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
    "claude": AnthropicProvider,
    "gemini": GeminiProvider,
}

# Probed in order at startup; the first model that answers is used
DEFAULT_MODEL_CANDIDATES: dict[str, list[str]] = {
    "gemini": ["gemini-2.5-flash", "gemini-2.0-flash", "gemini-1.5-flash"],
    "openai": ["gpt-4o", "gpt-4o-mini"],
    "anthropic": ["claude-sonnet-4-20250514", "claude-3-5-haiku-latest"],
}


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create a remote model backend by vendor name.

    Args:
        provider: 'openai', 'anthropic' (alias 'claude') or 'gemini'
        **config: Constructor arguments; ``api_key`` is required for all
            vendors, ``model`` and ``base_url`` are optional

    Raises:
        ValueError: If provider type is not supported
        TypeError: If ``api_key`` is missing

    Examples:
        >>> provider = create_llm_provider("gemini", api_key="...")
    """
    provider_cls = PROVIDERS.get(provider.lower())
    if provider_cls is None:
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: 'openai', 'anthropic', 'gemini'"
        )
    if "api_key" not in config:
        raise TypeError(f"{provider_cls.__name__} requires 'api_key' in config")
    return provider_cls(**config)
