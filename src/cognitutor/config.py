"""Tutor configuration loaded from environment variables.

Environment variables:
    LLM_PROVIDER: Provider type (gemini, openai, anthropic, none; default: gemini)
    GEMINI_API_KEY / OPENAI_API_KEY / ANTHROPIC_API_KEY: Key for the chosen provider
    TUTOR_MODEL_CANDIDATES: Comma-separated model ids to probe, in order
    TUTOR_REQUEST_TIMEOUT: Seconds allowed per remote call (default: 30)
    TUTOR_THINKING_DELAY: "min,max" seconds of simulated thinking (default: 1.0,3.0)
    TUTOR_IMAGE_DELAY: "min,max" seconds for image replies (default: 2.0,5.0)
    TUTOR_HISTORY_LIMIT: Messages of history sent to the provider (1-10, default: 10)
    TUTOR_LOG_LEVEL: Logging level name (default: WARNING)
"""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator

from .tutor import TutorService, create_tutor_service

logger = logging.getLogger(__name__)

API_KEY_VARIABLES = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
}


def _split(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class TutorSettings(BaseModel):
    """Validated tutor settings."""

    provider: str = Field(default="gemini", description="LLM provider name or 'none'")
    api_key: str | None = Field(default=None, description="API key for the provider")
    model_candidates: list[str] = Field(default_factory=list)
    request_timeout: float = Field(default=30.0, gt=0)
    thinking_delay: tuple[float, float] = (1.0, 3.0)
    image_delay: tuple[float, float] = (2.0, 5.0)
    history_limit: int = Field(default=10, ge=1, le=10)
    log_level: str = "WARNING"

    @field_validator("provider")
    @classmethod
    def _lower_provider(cls, value: str) -> str:
        return value.strip().lower() or "none"

    @field_validator("thinking_delay", "image_delay", mode="before")
    @classmethod
    def _parse_delay(cls, value: object) -> object:
        if isinstance(value, str):
            parts = _split(value)
            if len(parts) == 1:
                parts = parts * 2
            return tuple(parts)
        return value

    @field_validator("thinking_delay", "image_delay")
    @classmethod
    def _check_delay(cls, value: tuple[float, float]) -> tuple[float, float]:
        low, high = value
        if low < 0 or high < low:
            raise ValueError("delay must be 'min,max' with 0 <= min <= max")
        return value

    @property
    def remote_enabled(self) -> bool:
        return self.provider != "none" and bool(self.api_key)


def load_settings(environ: Mapping[str, str] | None = None) -> TutorSettings:
    """Read settings from ``environ`` (defaults to ``os.environ``).

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    env = os.environ if environ is None else environ
    provider = env.get("LLM_PROVIDER", "gemini")
    key_var = API_KEY_VARIABLES.get(provider.strip().lower())

    data: dict[str, object] = {
        "provider": provider,
        "api_key": env.get(key_var) if key_var else None,
        "model_candidates": _split(env.get("TUTOR_MODEL_CANDIDATES")),
    }
    optional = {
        "request_timeout": "TUTOR_REQUEST_TIMEOUT",
        "thinking_delay": "TUTOR_THINKING_DELAY",
        "image_delay": "TUTOR_IMAGE_DELAY",
        "history_limit": "TUTOR_HISTORY_LIMIT",
        "log_level": "TUTOR_LOG_LEVEL",
    }
    for field, variable in optional.items():
        if env.get(variable):
            data[field] = env[variable]

    return TutorSettings.model_validate(data)


def build_tutor_service(settings: TutorSettings, offline: bool = False) -> TutorService:
    """Create a TutorService from settings.

    A missing API key (or ``offline=True``) gives a deterministic-only tutor.
    """
    provider = settings.provider
    config: dict[str, object] = {}
    if offline or not settings.remote_enabled:
        if not offline and provider != "none":
            logger.warning("%s is not set, remote tutor disabled", API_KEY_VARIABLES.get(provider, "API key"))
        provider = "none"
    else:
        config["api_key"] = settings.api_key

    return create_tutor_service(
        provider,
        model_candidates=settings.model_candidates or None,
        thinking_delay=settings.thinking_delay,
        image_delay=settings.image_delay,
        request_timeout=settings.request_timeout,
        history_limit=settings.history_limit,
        **config,
    )
