"""Pytest configuration and shared fixtures."""
import os
import random

import pytest

from cognitutor.tutor import DeterministicResponder


class FakeBackend:
    """Completion backend double that records calls.

    Args:
        working_models: Model ids whose probe succeeds
        reply: Text returned by ``complete``, or an exception instance to raise
    """

    def __init__(self, working_models=(), reply="Remote answer"):
        self.working_models = set(working_models)
        self.reply = reply
        self.probed: list[str] = []
        self.prompts: list[str] = []
        self.images: list[list[str] | None] = []
        self.closed = False

    async def probe(self, model_id: str) -> bool:
        self.probed.append(model_id)
        return model_id in self.working_models

    async def complete(self, prompt, model_id=None, images=None):
        self.prompts.append(prompt)
        self.images.append(images)
        if isinstance(self.reply, BaseException):
            raise self.reply
        return self.reply

    async def close(self):
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
        "openai": os.getenv("OPENAI_API_KEY"),
        "anthropic": os.getenv("ANTHROPIC_API_KEY"),
    }


@pytest.fixture
def rng():
    """Seeded random source for reproducible template choices."""
    return random.Random(1234)


@pytest.fixture
def responder(rng):
    """Deterministic responder without the simulated thinking delay."""
    return DeterministicResponder(rng=rng, thinking_delay=(0.0, 0.0), image_delay=(0.0, 0.0))


@pytest.fixture
def fake_backend():
    """Backend where only 'good-model' answers probes."""
    return FakeBackend(working_models={"good-model"})
