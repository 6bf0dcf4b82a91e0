"""Rule-based responder used whenever no remote provider can answer."""

import asyncio
import logging
import random
from collections.abc import Sequence

from .arithmetic import solve_message
from .base import TutorResponder
from .classifier import classify_topic
from .composer import compose_reply, describe_image
from .models import ChatContext, ChatMessage, ReplySource, Subject, TutorReply
from .responses import get_pool, select_response

logger = logging.getLogger(__name__)


class DeterministicResponder(TutorResponder):
    """Answers with arithmetic solving, keyword classification and canned pools.

    Hidden design decisions:
    - Which keywords map to which pool
    - Template wording
    - The simulated "thinking" delay that makes replies feel less instant

    Args:
        rng: Random source for template choice and delays (unseeded by default)
        thinking_delay: (min, max) seconds slept before a chat reply
        image_delay: (min, max) seconds slept before an image reply
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        thinking_delay: tuple[float, float] = (1.0, 3.0),
        image_delay: tuple[float, float] = (2.0, 5.0),
    ):
        self._rng = rng or random.Random()
        self._thinking_delay = thinking_delay
        self._image_delay = image_delay

    @property
    def name(self) -> str:
        return "deterministic"

    async def _pause(self, bounds: tuple[float, float]) -> None:
        low, high = bounds
        if high <= 0:
            return
        await asyncio.sleep(self._rng.uniform(max(low, 0.0), high))

    def reply_for(self, message: str, context: ChatContext) -> TutorReply:
        """Build the reply without the simulated delay."""
        solution = solve_message(message)
        if solution is not None:
            logger.debug("Solved %s arithmetically", solution.expression)
            text = compose_reply(solution.explanation, context, get_pool(Subject.MATH).study_tip)
            return TutorReply(text=text, source=ReplySource.ARITHMETIC, subject=Subject.MATH)

        subject = classify_topic(message) or Subject.GENERAL
        body = select_response(subject, self._rng)
        text = compose_reply(body, context, get_pool(subject).study_tip)
        return TutorReply(text=text, source=ReplySource.CANNED, subject=subject)

    async def respond(
        self,
        message: str,
        context: ChatContext,
        history: Sequence[ChatMessage],
    ) -> TutorReply:
        await self._pause(self._thinking_delay)
        return self.reply_for(message, context)

    async def describe_image(self, image_b64: str, context: str | None) -> str:
        await self._pause(self._image_delay)
        return describe_image(context)
