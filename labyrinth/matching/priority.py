"""Interest priority boost.

When a student has marked interest in a professor, the pair's score is raised
before ranking. Strong matches get a small boost (they are already near the
top); marginal matches get a larger one so interested-but-overlooked
candidates surface. Professors viewing students see larger boosts than
students viewing professors.
"""

from typing import Optional

from labyrinth.models.config import BoostConfig
from labyrinth.models.match import MatchDirection

MAX_SCORE = 100.0


def interest_boost(
    base_score: float,
    direction: MatchDirection,
    boosts: Optional[BoostConfig] = None,
) -> float:
    """Boost amount for a base score in the given viewing direction."""
    boosts = boosts or BoostConfig()
    tier = (
        boosts.student_view
        if direction == MatchDirection.STUDENT_TO_PROFESSORS
        else boosts.professor_view
    )
    return tier.boost_for(base_score)


def apply_interest_boost(
    base_score: float,
    direction: MatchDirection,
    has_interest: bool,
    boosts: Optional[BoostConfig] = None,
) -> float:
    """Score after the interest boost, capped at 100.

    Args:
        base_score: Aggregated score before boosting
        direction: Which party is viewing the ranked list
        has_interest: Whether the student has an active interest signal
        boosts: Boost tiers (defaults to BoostConfig())

    Returns:
        Boosted score, or base_score unchanged when there is no interest
    """
    if not has_interest:
        return base_score
    return min(base_score + interest_boost(base_score, direction, boosts), MAX_SCORE)
