"""Errors raised inside the tutor engine.

None of these reach callers of ``TutorService``; the service recovers from
provider errors by answering with the deterministic engine.
"""


class TutorError(Exception):
    """Base class for tutor engine errors."""


class ProviderUnavailableError(TutorError):
    """The remote provider cannot be used for this request."""

    def __init__(self, message: str = "remote provider is not available"):
        super().__init__(f"Provider unavailable: {message}")


class EmptyCompletionError(TutorError):
    """The remote provider answered with no text."""

    def __init__(self, model_id: str | None):
        super().__init__(f"Empty completion from model: {model_id}")
        self.model_id = model_id


class UnsupportedOperationError(TutorError):
    """The arithmetic solver was asked for an operator it does not explain."""

    def __init__(self, operator: str):
        super().__init__(f"Unsupported operator: {operator}")
        self.operator = operator
