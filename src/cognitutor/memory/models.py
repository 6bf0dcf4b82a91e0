"""Data models for chat session memory.

These models define the structure of a chat session,
independent of the storage backend used.
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field

from ..tutor.models import ChatMessage


class ChatSession(BaseModel):
    """Ordered, append-only message log for one student conversation."""

    session_id: str = Field(default_factory=lambda: str(uuid4()))
    messages: list[ChatMessage] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def append(self, message: ChatMessage) -> None:
        """Append a message to the end of the log.

        Args:
            message: The message to add
        """
        self.messages.append(message)
        self.updated_at = datetime.now(timezone.utc)

    def recent(self, limit: int = 10) -> list[ChatMessage]:
        """Get the last ``limit`` messages, oldest first.

        Args:
            limit: Maximum number of messages to return

        Returns:
            List of recent messages in conversation order
        """
        if limit <= 0:
            return []
        return list(self.messages[-limit:])
