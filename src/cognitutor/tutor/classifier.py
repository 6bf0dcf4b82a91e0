"""Keyword-based subject classification."""

from collections.abc import Mapping

from .models import Subject

# Iteration order is the tie-break: the first subject with a hit wins
SUBJECT_KEYWORDS: Mapping[Subject, tuple[str, ...]] = {
    Subject.PHYSICS: (
        "physics", "newton", "motion", "force", "energy", "velocity", "acceleration", "gravity",
    ),
    Subject.CHEMISTRY: (
        "chemistry", "molecule", "atom", "reaction", "compound", "element", "photosynthesis",
    ),
    Subject.BIOLOGY: (
        "biology", "cell", "organism", "dna", "evolution", "ecosystem", "photosynthesis", "life",
    ),
    Subject.MATH: (
        "math", "calculate", "equation", "algebra", "arithmetic", "fraction", "divide", "multiply",
    ),
}


def classify_topic(
    text: str,
    table: Mapping[Subject, tuple[str, ...]] = SUBJECT_KEYWORDS,
) -> Subject | None:
    """Return the first subject whose keywords occur in ``text``.

    Matching is plain substring containment on the lower-cased text, so
    "cell" also matches "excellent".
    """
    lowered = text.lower()
    for subject, keywords in table.items():
        if any(keyword in lowered for keyword in keywords):
            return subject
    return None
