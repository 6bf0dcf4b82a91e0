"""Reply and prompt assembly.

Deterministic replies get a context annotation and a closing study tip;
remote replies are passed through untouched, since the prompt already
carries the student's context.
"""

from collections.abc import Sequence

from ..prompts import get_image_prompt, get_system_prompt
from .models import ChatContext, ChatMessage
from .responses import GENERAL_STUDY_TIP

MAX_HISTORY_MESSAGES = 10

STUDY_TIP_MARKER = "💡 **Study Tip**:"


def context_annotation(context: ChatContext) -> str | None:
    """Sentence tying the reply to the student's current subject, if known."""
    if not context.current_subject:
        return None
    text = f"Since you're studying {context.current_subject}, I'll focus on that subject area."
    if context.current_topic:
        text += f" We'll tie this back to {context.current_topic}."
    return text + " This will help you connect this concept to your current studies."


def compose_reply(body: str, context: ChatContext, tip: str = GENERAL_STUDY_TIP) -> str:
    """Assemble body, optional context annotation and the closing study tip."""
    sections = [body.rstrip()]
    annotation = context_annotation(context)
    if annotation:
        sections.append(annotation)
    sections.append(f"{STUDY_TIP_MARKER} {tip}")
    return "\n\n".join(sections)


def describe_image(context: str | None = None) -> str:
    """Placeholder description used when no vision-capable provider is reachable."""
    response = "I can see this image contains educational content. "
    if context:
        response += f"Given the context of {context}, "
    response += "I can help you understand the concepts shown. "
    response += (
        "The image appears to contain mathematical or scientific content "
        "that I can help you work through step by step. "
    )
    response += "Would you like me to explain any specific part of what you see?"
    return response


def build_chat_prompt(
    message: str,
    context: ChatContext,
    history: Sequence[ChatMessage] = (),
    history_limit: int = MAX_HISTORY_MESSAGES,
) -> str:
    """Build the single-string prompt sent to the remote provider.

    Only the last ``history_limit`` messages (at most 10) are included.
    """
    prompt = get_system_prompt()

    if context.current_subject:
        prompt += f"\n\nCurrent Study Context: The student is currently studying {context.current_subject}"
        if context.current_topic:
            prompt += f", specifically focusing on {context.current_topic}"
        prompt += "."
    if context.recent_test:
        prompt += f"\nThey recently took a test: {context.recent_test}."

    limit = max(0, min(history_limit, MAX_HISTORY_MESSAGES))
    recent = list(history)[-limit:] if limit else []
    if recent:
        prompt += "\n\nPrevious conversation:\n"
        for msg in recent:
            speaker = "Student" if msg.role == "user" else "AI Tutor"
            prompt += f"{speaker}: {msg.content}\n"

    return f"{prompt}\n\nStudent: {message}\n\nAI Tutor:"


def build_image_prompt(context: str | None = None) -> str:
    prompt = get_image_prompt()
    if context:
        prompt += f"\n\nContext: {context}"
    return prompt
