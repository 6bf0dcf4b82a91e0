"""AI tutor engine.

Remote-first replies with a deterministic fallback: arithmetic solving,
keyword classification and canned explanation pools.
"""

from .arithmetic import extract_expression, solve_expression, solve_message
from .base import CompletionBackend, TutorResponder
from .classifier import SUBJECT_KEYWORDS, classify_topic
from .composer import build_chat_prompt, compose_reply, describe_image
from .deterministic import DeterministicResponder
from .exceptions import (
    EmptyCompletionError,
    ProviderUnavailableError,
    TutorError,
    UnsupportedOperationError,
)
from .factory import create_tutor_service
from .models import (
    ChatContext,
    ChatMessage,
    MathExpression,
    MathSolution,
    ProviderState,
    ProviderStatus,
    ReplySource,
    Subject,
    TutorReply,
)
from .remote import RemoteResponder
from .responses import RESPONSE_POOLS, ResponsePool, select_response
from .service import TutorService

__all__ = [
    "ChatContext",
    "ChatMessage",
    "CompletionBackend",
    "DeterministicResponder",
    "EmptyCompletionError",
    "MathExpression",
    "MathSolution",
    "ProviderState",
    "ProviderStatus",
    "ProviderUnavailableError",
    "RESPONSE_POOLS",
    "RemoteResponder",
    "ReplySource",
    "ResponsePool",
    "SUBJECT_KEYWORDS",
    "Subject",
    "TutorError",
    "TutorReply",
    "TutorResponder",
    "TutorService",
    "UnsupportedOperationError",
    "build_chat_prompt",
    "classify_topic",
    "compose_reply",
    "create_tutor_service",
    "describe_image",
    "extract_expression",
    "select_response",
    "solve_expression",
    "solve_message",
]
