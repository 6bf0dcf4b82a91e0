"""Unit tests for chat session memory."""
from datetime import timedelta

import pytest

from cognitutor.memory import ChatSession, InMemorySessionStore, SessionStore, create_session_store
from cognitutor.tutor import ChatMessage


class TestSessionStoreInterface:
    """Tests for the abstract SessionStore interface."""

    def test_store_is_abstract(self):
        """Test that SessionStore cannot be instantiated directly."""
        with pytest.raises(TypeError):
            SessionStore()  # type: ignore


class TestChatSession:
    """Tests for ChatSession."""

    def test_append_keeps_order(self):
        """Test that messages stay in arrival order."""
        session = ChatSession()
        for i in range(3):
            session.append(ChatMessage(role="user", content=f"m{i}"))

        assert [m.content for m in session.messages] == ["m0", "m1", "m2"]
        assert session.updated_at >= session.created_at

    def test_timestamps_are_timezone_aware(self):
        """Test that session and message timestamps carry UTC."""
        session = ChatSession()
        message = ChatMessage(role="user", content="hi")
        session.append(message)

        assert session.created_at.utcoffset() == timedelta(0)
        assert session.updated_at.utcoffset() == timedelta(0)
        assert message.timestamp.utcoffset() == timedelta(0)

    def test_recent(self):
        """Test that recent returns the tail, oldest first."""
        session = ChatSession()
        for i in range(12):
            session.append(ChatMessage(role="user", content=f"m{i}"))

        recent = session.recent(10)

        assert len(recent) == 10
        assert recent[0].content == "m2"
        assert recent[-1].content == "m11"
        assert session.recent(0) == []


class TestInMemorySessionStore:
    """Tests for InMemorySessionStore."""

    @pytest.mark.asyncio
    async def test_record_exchange(self):
        """Test that an exchange adds a user and an assistant message."""
        store = InMemorySessionStore()

        await store.record_exchange("What is 2+2?", "4")
        history = await store.get_history()

        assert [(m.role, m.content) for m in history] == [("user", "What is 2+2?"), ("assistant", "4")]

    @pytest.mark.asyncio
    async def test_sessions_are_isolated(self):
        """Test that session ids keep separate logs."""
        store = InMemorySessionStore(default_session_id="default")

        await store.record_exchange("hi", "hello", session_id="a")

        assert await store.get_history(session_id="default") == []
        assert len(await store.get_history(session_id="a")) == 2

    @pytest.mark.asyncio
    async def test_clear(self):
        """Test that clear empties the log but keeps the session id."""
        store = InMemorySessionStore(default_session_id="s1")
        await store.record_exchange("hi", "hello")

        await store.clear()

        session = await store.get_session()
        assert session.session_id == "s1"
        assert session.messages == []

    @pytest.mark.asyncio
    async def test_history_limit(self):
        """Test that get_history honors the limit."""
        store = InMemorySessionStore()
        for i in range(4):
            await store.record_exchange(f"q{i}", f"a{i}")

        history = await store.get_history(limit=3)

        assert [m.content for m in history] == ["a2", "q3", "a3"]


class TestFactory:
    """Tests for create_session_store."""

    def test_memory_backend(self):
        """Test creating the in-memory store."""
        store = create_session_store("memory")

        assert isinstance(store, InMemorySessionStore)
        assert store.backend_type == "memory"

    def test_unknown_backend(self):
        """Test that an unknown backend raises ValueError."""
        with pytest.raises(ValueError, match="Unsupported session backend"):
            create_session_store("postgres")
