"""Factory for creating chat session stores."""

from typing import Any

from .base import SessionStore


def create_session_store(
    backend: str = "memory",
    **kwargs: Any
) -> SessionStore:
    """Create a chat session store.

    Args:
        backend: Backend type (only "memory" is bundled)
        **kwargs: Backend-specific configuration

    Returns:
        SessionStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "memory":
        from .in_memory import InMemorySessionStore
        return InMemorySessionStore(**kwargs)

    raise ValueError(
        f"Unsupported session backend: {backend}. "
        f"Supported backends: memory"
    )
