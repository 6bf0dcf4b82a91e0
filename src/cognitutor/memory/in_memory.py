"""In-memory chat session store.

Simple dict-based storage for session-only memory.
Data is lost when the application exits.
"""

from uuid import uuid4

from ..tutor.models import ChatMessage
from .base import SessionStore
from .models import ChatSession


class InMemorySessionStore(SessionStore):
    """In-memory session store (process lifetime only).

    Suitable for the interactive CLI and for testing.
    """

    def __init__(self, default_session_id: str | None = None):
        self._default_session_id = default_session_id or str(uuid4())
        self._sessions: dict[str, ChatSession] = {}

    async def get_session(self, session_id: str | None = None) -> ChatSession:
        """Get or create a session."""
        sid = session_id or self._default_session_id
        if sid not in self._sessions:
            self._sessions[sid] = ChatSession(session_id=sid)
        return self._sessions[sid]

    async def record_exchange(
        self,
        user_message: str,
        assistant_message: str,
        session_id: str | None = None
    ) -> list[ChatMessage]:
        """Append the user/assistant pair."""
        session = await self.get_session(session_id)
        pair = [
            ChatMessage(role="user", content=user_message),
            ChatMessage(role="assistant", content=assistant_message),
        ]
        for message in pair:
            session.append(message)
        return pair

    async def get_history(self, limit: int = 10, session_id: str | None = None) -> list[ChatMessage]:
        """Get recent messages."""
        session = await self.get_session(session_id)
        return session.recent(limit)

    async def clear(self, session_id: str | None = None) -> None:
        """Clear a session."""
        sid = session_id or self._default_session_id
        if sid in self._sessions:
            self._sessions[sid] = ChatSession(session_id=sid)

    @property
    def backend_type(self) -> str:
        return "memory"
