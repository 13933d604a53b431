"""Weighted aggregation of component scores into a 0-100 match score.

Also provides explain_score(), the diagnostic breakdown used when tuning
weights or investigating a surprising ranking.
"""

from typing import Callable, Optional

from labyrinth.matching import components
from labyrinth.matching.weights import calculate_weights
from labyrinth.models.config import ThresholdConfig
from labyrinth.models.match import ScoreBreakdown
from labyrinth.models.professor import Professor
from labyrinth.models.student import Student
from labyrinth.utils.logger import get_logger

ComponentScorer = Callable[[Student, Professor], float]


def _component_scorers(thresholds: ThresholdConfig) -> dict[str, ComponentScorer]:
    return {
        components.RESEARCH_ALIGNMENT: lambda s, p: components.research_alignment(
            s, p, thresholds.research_similarity
        ),
        components.SKILLS_MATCH: lambda s, p: components.skills_match(
            s, p, thresholds.skills_similarity
        ),
        components.ACADEMIC_LEVEL: components.academic_level_compatibility,
        components.GPA_CONSIDERATION: components.gpa_consideration,
        components.AVAILABILITY_FIT: components.availability_fit,
        components.EXPERIENCE_RELEVANCE: lambda s, p: components.experience_relevance(
            s, p, thresholds.experience_similarity
        ),
        components.CAREER_ALIGNMENT: lambda s, p: components.career_alignment(
            s, p, thresholds.career_similarity
        ),
    }


def _clamp(value: float, low: float = 0.0, high: float = components.MAX_SCORE) -> float:
    return min(max(value, low), high)


def score_components(
    student: Student,
    professor: Professor,
    thresholds: Optional[ThresholdConfig] = None,
    correlation_id: Optional[str] = None,
) -> dict[str, float]:
    """Run every component scorer for a pair.

    A scorer that fails on malformed data degrades to 0 for that component
    and the failure is logged; the remaining components are unaffected.

    Args:
        student: Student profile
        professor: Professor profile
        thresholds: Similarity thresholds (defaults to ThresholdConfig())
        correlation_id: Correlation ID for logging

    Returns:
        Mapping of component name to score in [0, 100]
    """
    thresholds = thresholds or ThresholdConfig()
    scores: dict[str, float] = {}

    for name, scorer in _component_scorers(thresholds).items():
        try:
            scores[name] = _clamp(float(scorer(student, professor)))
        except (TypeError, ValueError, AttributeError) as e:
            logger = get_logger(
                correlation_id=correlation_id,
                phase="scoring",
                component="score_aggregator",
            )
            logger.warning(
                "Component scorer failed, degrading to 0",
                component_name=name,
                student_id=student.id,
                professor_id=professor.id,
                error=str(e),
            )
            scores[name] = 0.0

    return scores


def aggregate(component_scores: dict[str, float], weights: dict[str, float]) -> float:
    """Weighted sum of component scores, clamped to [0, 100]."""
    total = sum(
        component_scores.get(name, 0.0) * weights.get(name, 0.0)
        for name in components.COMPONENT_NAMES
    )
    return _clamp(total)


def calculate_match_score(
    student: Student,
    professor: Professor,
    thresholds: Optional[ThresholdConfig] = None,
    correlation_id: Optional[str] = None,
) -> float:
    """Base compatibility score for a pair, before any interest boost."""
    component_scores = score_components(student, professor, thresholds, correlation_id)
    return aggregate(component_scores, calculate_weights(professor))


def explain_score(
    student: Student,
    professor: Professor,
    thresholds: Optional[ThresholdConfig] = None,
) -> ScoreBreakdown:
    """Diagnostic breakdown of a pair's base score. No side effects.

    Example:
        >>> breakdown = explain_score(student, professor)
        >>> breakdown.to_dict()
        {"components": {...}, "weights": {...}, "finalScore": 88.0}
    """
    component_scores = score_components(student, professor, thresholds)
    weights = calculate_weights(professor)

    return ScoreBreakdown(
        components=component_scores,
        weights=weights,
        final_score=aggregate(component_scores, weights),
    )
