"""Unit tests for the LLM provider layer."""
import pytest

from cognitutor.llm import (
    AnthropicProvider,
    ChatMessage,
    GeminiProvider,
    LLMProvider,
    LLMResponse,
    OpenAIProvider,
    create_llm_provider,
)
from cognitutor.llm.providers.anthropic import _content_blocks
from cognitutor.llm.providers.openai import _to_openai_message
from cognitutor.tutor import CompletionBackend


class ScriptedProvider(LLMProvider):
    """Provider double returning scripted content per model."""

    def __init__(self, replies=None, error=None):
        self.replies = replies or {}
        self.error = error
        self.calls: list[tuple[list[ChatMessage], str | None, int | None]] = []

    @property
    def model(self) -> str:
        return "scripted"

    async def chat_completion(self, messages, model=None, temperature=0.7, max_tokens=None, **kwargs):
        self.calls.append((messages, model, max_tokens))
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.replies.get(model, ""), model=model or self.model)

    async def close(self) -> None:
        pass


class TestLLMProviderInterface:
    """Tests for the abstract LLMProvider interface."""

    def test_provider_is_abstract(self):
        """Test that LLMProvider cannot be instantiated directly."""
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore

    def test_providers_satisfy_completion_backend(self):
        """Test that every provider can back the tutor service."""
        assert isinstance(ScriptedProvider(), CompletionBackend)
        assert isinstance(OpenAIProvider(api_key="fake-key"), CompletionBackend)


class TestProbeAndComplete:
    """Tests for the concrete probe/complete helpers."""

    @pytest.mark.asyncio
    async def test_probe_succeeds_with_text(self):
        """Test that a non-empty answer passes the probe."""
        provider = ScriptedProvider(replies={"m1": "Hi there"})

        assert await provider.probe("m1") is True
        messages, model, max_tokens = provider.calls[0]
        assert messages[0].content == "Hello"
        assert model == "m1"
        assert max_tokens == 16

    @pytest.mark.asyncio
    async def test_probe_fails_on_empty_text(self):
        """Test that blank answers fail the probe."""
        provider = ScriptedProvider(replies={"m1": "  "})

        assert await provider.probe("m1") is False

    @pytest.mark.asyncio
    async def test_probe_fails_on_error(self):
        """Test that SDK errors become a failed probe."""
        provider = ScriptedProvider(error=RuntimeError("model not found"))

        assert await provider.probe("missing") is False

    @pytest.mark.asyncio
    async def test_complete_passes_images(self):
        """Test that complete wraps prompt and images in one user message."""
        provider = ScriptedProvider(replies={"m1": "A triangle"})

        text = await provider.complete("Describe this", "m1", images=["AAAA"])

        assert text == "A triangle"
        messages, _, max_tokens = provider.calls[0]
        assert messages[0].role == "user"
        assert messages[0].images == ["AAAA"]
        assert max_tokens == 1000

    @pytest.mark.asyncio
    async def test_complete_propagates_errors(self):
        """Test that complete lets SDK errors reach the caller."""
        provider = ScriptedProvider(error=ConnectionError("reset"))

        with pytest.raises(ConnectionError):
            await provider.complete("hi", "m1")


class TestMessageConversion:
    """Tests for provider-specific message formats."""

    def test_openai_text_only(self):
        """Test that text messages keep the plain string form."""
        msg = ChatMessage(role="user", content="Hello")

        assert _to_openai_message(msg) == {"role": "user", "content": "Hello"}

    def test_openai_with_image(self):
        """Test that images become data URL parts."""
        msg = ChatMessage(role="user", content="What is this?", images=["AAAA"])

        converted = _to_openai_message(msg)

        assert converted["content"][0] == {"type": "text", "text": "What is this?"}
        assert converted["content"][1]["image_url"]["url"] == "data:image/jpeg;base64,AAAA"

    def test_anthropic_with_image(self):
        """Test that images become base64 blocks ahead of the text."""
        msg = ChatMessage(role="user", content="What is this?", images=["AAAA"])

        blocks = _content_blocks(msg)

        assert blocks[0]["source"] == {"type": "base64", "media_type": "image/jpeg", "data": "AAAA"}
        assert blocks[-1] == {"type": "text", "text": "What is this?"}

    def test_gemini_roles_and_parts(self):
        """Test system extraction, role mapping and image parts."""
        provider = GeminiProvider(api_key="fake-key")
        messages = [
            ChatMessage(role="system", content="Be kind"),
            ChatMessage(role="user", content="Look", images=["AAAA"]),
            ChatMessage(role="assistant", content="Sure"),
        ]

        system, contents = provider._to_contents(messages)

        assert system == "Be kind"
        assert [c.role for c in contents] == ["user", "model"]
        assert len(contents[0].parts) == 2


class TestFactory:
    """Tests for create_llm_provider."""

    @pytest.mark.parametrize("name,cls", [
        ("openai", OpenAIProvider),
        ("anthropic", AnthropicProvider),
        ("claude", AnthropicProvider),
        ("gemini", GeminiProvider),
    ])
    def test_creates_provider(self, name, cls):
        """Test that each supported name builds its provider."""
        assert isinstance(create_llm_provider(name, api_key="fake-key"), cls)

    def test_unknown_provider(self):
        """Test that an unknown provider raises ValueError."""
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("deepthought", api_key="fake-key")

    @pytest.mark.parametrize("name", ["openai", "anthropic", "gemini"])
    def test_missing_api_key(self, name):
        """Test that a missing api_key raises TypeError."""
        with pytest.raises(TypeError, match="api_key"):
            create_llm_provider(name)


class TestRealProviders:
    """Integration tests against live APIs."""

    @pytest.mark.asyncio
    @pytest.mark.integration
    @pytest.mark.parametrize("name", ["gemini", "openai", "anthropic"])
    async def test_probe_default_model(self, api_keys, name):
        """Integration test: The provider's default model answers a probe."""
        if not api_keys[name]:
            pytest.skip(f"{name.upper()}_API_KEY not set")

        provider = create_llm_provider(name, api_key=api_keys[name])

        async with provider:
            assert await provider.probe(provider.model) is True
