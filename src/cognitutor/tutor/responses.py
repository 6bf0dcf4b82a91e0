"""Canned explanation pools for the deterministic engine."""

import random
from dataclasses import dataclass

from .models import Subject


@dataclass(frozen=True)
class ResponsePool:
    """Templates and framing for one subject."""

    heading: str
    templates: tuple[str, ...]
    advice_lead: str
    advice: tuple[str, ...]
    study_tip: str


GENERAL_STUDY_TIP = (
    "The key to mastering any subject is understanding the underlying principles. "
    "Don't just memorize facts - try to understand the \"why\" behind everything you learn. "
    "This will help you apply your knowledge to new situations and solve problems more effectively."
)

RESPONSE_POOLS: dict[Subject, ResponsePool] = {
    Subject.PHYSICS: ResponsePool(
        heading="**Physics Explanation:**",
        templates=(
            "Newton's first law states that an object at rest stays at rest, and an object in "
            "motion stays in motion, unless acted upon by an external force.",
            "Force equals mass times acceleration (F = ma). This is Newton's second law of motion.",
            "Energy cannot be created or destroyed, only transferred or converted from one form "
            "to another.",
            "Gravity is a fundamental force that attracts objects with mass toward each other.",
        ),
        advice_lead="Let me break this down further:",
        advice=(
            "This is a fundamental concept in physics",
            "Understanding this will help you with more advanced topics",
            "Try to visualize the concept with examples",
        ),
        study_tip=(
            "Physics is about understanding the \"why\" behind natural phenomena. "
            "Always try to connect concepts to real-world examples."
        ),
    ),
    Subject.CHEMISTRY: ResponsePool(
        heading="**Chemistry Explanation:**",
        templates=(
            "Photosynthesis is the process by which plants convert light energy into chemical "
            "energy, producing glucose and oxygen.",
            "A molecule is the smallest unit of a compound that retains the chemical properties "
            "of that compound.",
            "An atom is the basic unit of matter, consisting of a nucleus (protons and neutrons) "
            "and electrons.",
            "A chemical reaction occurs when atoms are rearranged to form new substances.",
        ),
        advice_lead="Here's how to understand this concept:",
        advice=(
            "Think about the molecular level",
            "Consider how atoms interact",
            "Look for patterns in chemical behavior",
        ),
        study_tip=(
            "Chemistry is about understanding matter and its transformations. "
            "Always think about what's happening at the atomic level."
        ),
    ),
    Subject.BIOLOGY: ResponsePool(
        heading="**Biology Explanation:**",
        templates=(
            "A cell is the basic structural and functional unit of all living organisms.",
            "DNA (Deoxyribonucleic acid) contains the genetic instructions for the development "
            "and function of living things.",
            "Evolution is the process by which species change over time through natural selection.",
            "An ecosystem is a community of living organisms interacting with their physical "
            "environment.",
        ),
        advice_lead="Key points to remember:",
        advice=(
            "This is essential for understanding life processes",
            "Look for connections between different biological systems",
            "Consider how this relates to evolution and adaptation",
        ),
        study_tip=(
            "Biology is about understanding life at all levels. "
            "Always think about how different systems work together."
        ),
    ),
    Subject.MATH: ResponsePool(
        heading="**Math Help:**",
        templates=(
            "I can help you with that math problem! Let me break it down step by step.",
            "Let's solve this together. First, identify what operation we need to perform.",
            "Good math question! Tell me the specific numbers and the operation, "
            "for example 12 + 7 =, and I'll work through it with you.",
        ),
        advice_lead="How to approach it:",
        advice=(
            "Write down the information you are given",
            "Decide which operation connects the numbers",
            "Show your work one step at a time and check the result",
        ),
        study_tip=(
            "For mathematics, practice is everything. "
            "Work through a few similar problems yourself and check each step."
        ),
    ),
    Subject.GENERAL: ResponsePool(
        heading="",
        templates=(
            "That's an excellent question! Let me help you understand this concept clearly.",
            "I'm here to help you learn! This is an important topic to master.",
            "Great question! Let me break this down into manageable parts.",
            "I can definitely help you with this! Let me explain it step by step.",
            "That's a thoughtful question! This concept is fundamental to your studies.",
        ),
        advice_lead="Here's how I'll help you understand this:",
        advice=(
            "**Clear Explanation**: I'll explain the concept in simple terms",
            "**Examples**: I'll provide relevant examples",
            "**Step-by-Step**: I'll break it down into manageable parts",
            "**Practice**: I'll suggest ways to practice and apply what you learn",
        ),
        study_tip=GENERAL_STUDY_TIP,
    ),
}


def get_pool(subject: Subject | None) -> ResponsePool:
    """Pool for ``subject``; None selects the general pool."""
    return RESPONSE_POOLS[subject or Subject.GENERAL]


def select_response(subject: Subject | None, rng: random.Random | None = None) -> str:
    """Pick one template from the subject's pool and wrap it with its framing.

    Args:
        subject: Matched subject, or None for the general pool
        rng: Random source; an unseeded one is used when omitted

    Returns:
        Heading, template and advice bullets as one text block
    """
    pool = get_pool(subject)
    template = (rng or random.Random()).choice(pool.templates)

    if subject in (None, Subject.GENERAL):
        # General replies number their advice and bold the opener
        body = [f"**{template}**", "", pool.advice_lead]
        body += [f"{i}. {line}" for i, line in enumerate(pool.advice, 1)]
    else:
        body = [pool.heading, "", template, "", pool.advice_lead]
        body += [f"- {line}" for line in pool.advice]

    return "\n".join(body)
