"""Dynamic component weights derived from a professor's profile.

Research-focused titles shift emphasis toward research and experience,
large labs toward availability, and hands-on mentors toward skills and
availability. Adjustments are additive and independent; afterwards every
weight is clamped at zero and the vector is renormalized to sum to 1.0.
"""

from labyrinth.matching.components import (
    ACADEMIC_LEVEL,
    AVAILABILITY_FIT,
    CAREER_ALIGNMENT,
    COMPONENT_NAMES,
    EXPERIENCE_RELEVANCE,
    GPA_CONSIDERATION,
    RESEARCH_ALIGNMENT,
    SKILLS_MATCH,
)
from labyrinth.matching.similarity import normalize_label
from labyrinth.models.professor import Professor

BASE_WEIGHTS: dict[str, float] = {
    RESEARCH_ALIGNMENT: 0.30,
    SKILLS_MATCH: 0.20,
    ACADEMIC_LEVEL: 0.15,
    GPA_CONSIDERATION: 0.10,
    AVAILABILITY_FIT: 0.10,
    EXPERIENCE_RELEVANCE: 0.10,
    CAREER_ALIGNMENT: 0.05,
}

LARGE_LAB_SIZE = 10

RESEARCH_TITLE_KEYWORDS = ("research", "principal investigator")

RESEARCH_TITLE_ADJUSTMENTS = {
    RESEARCH_ALIGNMENT: 0.05,
    EXPERIENCE_RELEVANCE: 0.05,
    SKILLS_MATCH: -0.05,
    GPA_CONSIDERATION: -0.05,
}

LARGE_LAB_ADJUSTMENTS = {
    AVAILABILITY_FIT: 0.05,
    ACADEMIC_LEVEL: -0.05,
}

HANDS_ON_ADJUSTMENTS = {
    SKILLS_MATCH: 0.05,
    AVAILABILITY_FIT: 0.05,
    RESEARCH_ALIGNMENT: -0.10,
}


def is_research_title(title: object) -> bool:
    normalized = normalize_label(title)
    return any(keyword in normalized for keyword in RESEARCH_TITLE_KEYWORDS)


def _lab_size(professor: Professor) -> int:
    size = professor.lab_size
    if isinstance(size, bool) or not isinstance(size, int):
        return 0
    return max(size, 0)


def _apply(weights: dict[str, float], adjustments: dict[str, float]) -> None:
    for name, delta in adjustments.items():
        weights[name] += delta


def calculate_weights(professor: Professor) -> dict[str, float]:
    """Normalized, non-negative weight per component for this professor.

    Args:
        professor: Professor whose title, lab size and mentorship style drive
            the adjustments

    Returns:
        Mapping of component name to weight, summing to 1.0
    """
    weights = dict(BASE_WEIGHTS)

    if is_research_title(professor.title):
        _apply(weights, RESEARCH_TITLE_ADJUSTMENTS)

    if _lab_size(professor) > LARGE_LAB_SIZE:
        _apply(weights, LARGE_LAB_ADJUSTMENTS)

    if "hands-on" in normalize_label(professor.mentorship_style):
        _apply(weights, HANDS_ON_ADJUSTMENTS)

    clamped = {name: max(weights[name], 0.0) for name in COMPONENT_NAMES}
    total = sum(clamped.values())

    if total <= 0.0:
        return dict(BASE_WEIGHTS)

    return {name: value / total for name, value in clamped.items()}
