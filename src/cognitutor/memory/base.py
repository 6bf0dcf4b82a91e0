"""Abstract base class for chat session stores.

This module defines the interface for chat session storage.
The abstraction hides:
- Storage format
- Persistence mechanism (in-memory here; databases live with the web layer)
"""

from abc import ABC, abstractmethod

from ..tutor.models import ChatMessage
from .models import ChatSession


class SessionStore(ABC):
    """Abstract chat session store."""

    @abstractmethod
    async def get_session(self, session_id: str | None = None) -> ChatSession:
        """Retrieve a session, creating it if needed."""

    @abstractmethod
    async def record_exchange(
        self,
        user_message: str,
        assistant_message: str,
        session_id: str | None = None
    ) -> list[ChatMessage]:
        """Append a user message and the tutor's reply to a session."""

    @abstractmethod
    async def get_history(self, limit: int = 10, session_id: str | None = None) -> list[ChatMessage]:
        """Get the most recent messages of a session, oldest first."""

    @abstractmethod
    async def clear(self, session_id: str | None = None) -> None:
        """Clear the message log of a session."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
