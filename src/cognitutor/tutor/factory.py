import random
from collections.abc import Sequence
from typing import Any

from ..llm import DEFAULT_MODEL_CANDIDATES, create_llm_provider
from .composer import MAX_HISTORY_MESSAGES
from .deterministic import DeterministicResponder
from .service import TutorService


def create_tutor_service(
    provider: str | None = None,
    model_candidates: Sequence[str] | None = None,
    rng: random.Random | None = None,
    thinking_delay: tuple[float, float] = (1.0, 3.0),
    image_delay: tuple[float, float] = (2.0, 5.0),
    request_timeout: float | None = 30.0,
    history_limit: int = MAX_HISTORY_MESSAGES,
    **provider_config: Any
) -> TutorService:
    """Create a tutor service, optionally backed by a remote LLM provider.

    Args:
        provider: LLM provider name ('openai', 'anthropic', 'gemini'), or None / 'none'
            for a deterministic-only tutor
        model_candidates: Model ids to probe in order (defaults per provider)
        rng: Random source for the deterministic responder
        thinking_delay: (min, max) seconds of simulated thinking per chat reply
        image_delay: (min, max) seconds of simulated thinking per image reply
        request_timeout: Seconds allowed for each remote call
        history_limit: Messages of history included in remote prompts
        **provider_config: Passed to ``create_llm_provider`` (api_key, base_url, ...)

    Returns:
        An uninitialized TutorService; call ``initialize()`` before use

    Raises:
        ValueError: If provider type is not supported
        TypeError: If the provider's required configuration is missing

    Examples:
        >>> tutor = create_tutor_service("gemini", api_key="...")
        >>> offline = create_tutor_service(None, thinking_delay=(0, 0))
    """
    fallback = DeterministicResponder(rng=rng, thinking_delay=thinking_delay, image_delay=image_delay)

    backend = None
    candidates: list[str] = []
    if provider and provider.lower() != "none":
        backend = create_llm_provider(provider, **provider_config)
        key = "anthropic" if provider.lower() == "claude" else provider.lower()
        candidates = list(model_candidates or DEFAULT_MODEL_CANDIDATES.get(key, [backend.model]))

    return TutorService(
        backend=backend,
        model_candidates=candidates,
        fallback=fallback,
        request_timeout=request_timeout,
        history_limit=history_limit,
    )
