"""Chat session memory for cognitutor.

Keeps the ordered message log the tutor reads its recent history from.
"""

from .base import SessionStore
from .factory import create_session_store
from .in_memory import InMemorySessionStore
from .models import ChatSession

__all__ = [
    "ChatSession",
    "InMemorySessionStore",
    "SessionStore",
    "create_session_store",
]
