"""Unit tests for environment configuration."""
import logging

import pytest
from pydantic import ValidationError

from cognitutor.config import TutorSettings, build_tutor_service, load_settings
from cognitutor.llm import GeminiProvider
from cognitutor.tutor import DeterministicResponder, ProviderStatus


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self):
        """Test settings from an empty environment."""
        settings = load_settings({})

        assert settings.provider == "gemini"
        assert settings.api_key is None
        assert settings.thinking_delay == (1.0, 3.0)
        assert settings.image_delay == (2.0, 5.0)
        assert settings.history_limit == 10
        assert settings.remote_enabled is False

    def test_reads_provider_key(self):
        """Test that the key variable follows the provider."""
        env = {
            "LLM_PROVIDER": "Anthropic",
            "ANTHROPIC_API_KEY": "sk-ant",
            "OPENAI_API_KEY": "sk-openai",
        }

        settings = load_settings(env)

        assert settings.provider == "anthropic"
        assert settings.api_key == "sk-ant"
        assert settings.remote_enabled is True

    def test_parses_candidates_and_numbers(self):
        """Test list and numeric variables."""
        env = {
            "TUTOR_MODEL_CANDIDATES": "gemini-2.0-flash, gemini-1.5-flash,,",
            "TUTOR_REQUEST_TIMEOUT": "5",
            "TUTOR_HISTORY_LIMIT": "4",
            "TUTOR_LOG_LEVEL": "DEBUG",
        }

        settings = load_settings(env)

        assert settings.model_candidates == ["gemini-2.0-flash", "gemini-1.5-flash"]
        assert settings.request_timeout == 5.0
        assert settings.history_limit == 4
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("raw,expected", [
        ("0,0", (0.0, 0.0)),
        ("0.5, 1.5", (0.5, 1.5)),
        ("2", (2.0, 2.0)),
    ])
    def test_delay_parsing(self, raw, expected):
        """Test 'min,max' and single-value delays."""
        assert load_settings({"TUTOR_THINKING_DELAY": raw}).thinking_delay == expected

    @pytest.mark.parametrize("env", [
        {"TUTOR_THINKING_DELAY": "3,1"},
        {"TUTOR_IMAGE_DELAY": "-1,2"},
        {"TUTOR_IMAGE_DELAY": "slow,fast"},
        {"TUTOR_HISTORY_LIMIT": "11"},
        {"TUTOR_REQUEST_TIMEOUT": "0"},
    ])
    def test_invalid_values(self, env):
        """Test that invalid variables raise ValidationError."""
        with pytest.raises(ValidationError):
            load_settings(env)

    def test_empty_provider_means_none(self):
        """Test that a blank provider disables the remote path."""
        assert TutorSettings(provider="  ").provider == "none"


class TestBuildTutorService:
    """Tests for build_tutor_service."""

    @pytest.mark.asyncio
    async def test_offline_flag(self):
        """Test that offline ignores a configured key."""
        settings = load_settings({"GEMINI_API_KEY": "key", "TUTOR_THINKING_DELAY": "0,0"})

        service = build_tutor_service(settings, offline=True)
        state = await service.initialize()

        assert state.status == ProviderStatus.UNAVAILABLE
        assert isinstance(service.fallback, DeterministicResponder)

    def test_missing_key_warns(self, caplog):
        """Test that a provider without key logs a warning and stays offline."""
        settings = load_settings({"LLM_PROVIDER": "openai"})

        # the CLI may have turned off propagation on the package logger
        config_logger = logging.getLogger("cognitutor.config")
        config_logger.addHandler(caplog.handler)
        try:
            service = build_tutor_service(settings)
        finally:
            config_logger.removeHandler(caplog.handler)

        assert "OPENAI_API_KEY is not set" in caplog.text
        assert service._backend is None

    def test_with_key_builds_provider(self):
        """Test that a key creates the remote backend and candidates."""
        settings = load_settings({
            "GEMINI_API_KEY": "fake-key",
            "TUTOR_MODEL_CANDIDATES": "gemini-2.0-flash",
        })

        service = build_tutor_service(settings)

        assert isinstance(service._backend, GeminiProvider)
        assert service._candidates == ["gemini-2.0-flash"]
