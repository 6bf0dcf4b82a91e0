"""
Cognitutor: the AI tutor response engine of the CogniLearn platform.

Replies come from a remote LLM provider when one is reachable, and from a
deterministic engine (arithmetic solving, keyword classification, canned
explanations) otherwise. Each module hides one design decision.
"""

__version__ = "0.1.0"

from .config import TutorSettings, build_tutor_service, load_settings
from .tutor import (
    ChatContext,
    ChatMessage,
    ProviderState,
    TutorReply,
    TutorService,
    create_tutor_service,
)

__all__ = [
    "ChatContext",
    "ChatMessage",
    "ProviderState",
    "TutorReply",
    "TutorService",
    "TutorSettings",
    "build_tutor_service",
    "create_tutor_service",
    "load_settings",
]
