"""Data models for the tutor engine.

These models describe what flows in and out of the engine,
independent of which responder produced the reply.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Subject(str, Enum):
    """Response pools the deterministic engine can draw from."""

    PHYSICS = "physics"
    CHEMISTRY = "chemistry"
    BIOLOGY = "biology"
    MATH = "math"
    GENERAL = "general"


class ReplySource(str, Enum):
    """Which path produced a reply."""

    REMOTE = "remote"
    ARITHMETIC = "arithmetic"
    CANNED = "canned"


class ProviderStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    PROBING = "probing"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class ChatMessage(BaseModel):
    """One entry of a chat session log."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"] = Field(description="Who sent the message")
    content: str = Field(description="Message text")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatContext(BaseModel):
    """Caller-supplied hint about what the student is working on.

    Accepts both snake_case names and the camelCase keys used by the web client.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    current_subject: str | None = Field(default=None, alias="currentSubject")
    current_topic: str | None = Field(default=None, alias="currentTopic")
    recent_test: str | None = Field(default=None, alias="recentTest")


class MathExpression(BaseModel):
    """A two-operand integer expression extracted from a message."""

    model_config = ConfigDict(frozen=True)

    first_operand: int
    second_operand: int
    operator: Literal["+", "-", "*", "/"]


class MathSolution(BaseModel):
    """Result of solving a MathExpression, with an explanation for the student."""

    model_config = ConfigDict(frozen=True)

    expression: MathExpression
    result: int
    explanation: str


class TutorReply(BaseModel):
    """Final reply plus the path and pool that produced it."""

    model_config = ConfigDict(frozen=True)

    text: str
    source: ReplySource
    subject: Subject | None = Field(
        default=None,
        description="Pool used on the canned path (math for arithmetic answers)"
    )
    model: str | None = Field(default=None, description="Remote model id, if any")


@dataclass
class ProviderState:
    """Availability of the remote provider, shared by all requests of one service.

    Only probing can make the provider available. A failed call downgrades it,
    and the downgrade is idempotent.
    """

    status: ProviderStatus = ProviderStatus.UNINITIALIZED
    active_model: str | None = None

    @property
    def is_available(self) -> bool:
        return self.status is ProviderStatus.AVAILABLE

    def begin_probe(self) -> None:
        self.status = ProviderStatus.PROBING
        self.active_model = None

    def finish_probe(self, model_id: str | None) -> None:
        """Record the probe outcome; None means every candidate failed."""
        if model_id is None:
            self.status = ProviderStatus.UNAVAILABLE
            self.active_model = None
        else:
            self.status = ProviderStatus.AVAILABLE
            self.active_model = model_id

    def mark_unavailable(self) -> bool:
        """Downgrade after a failed call.

        Returns:
            True if this call performed the transition
        """
        if self.status is not ProviderStatus.AVAILABLE:
            return False
        self.status = ProviderStatus.UNAVAILABLE
        self.active_model = None
        return True
