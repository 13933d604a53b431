"""Match result models produced by the ranking engine."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MatchDirection(str, Enum):
    """Which party is viewing the ranked list."""

    STUDENT_TO_PROFESSORS = "student_to_professors"
    PROFESSOR_TO_STUDENTS = "professor_to_students"


class MatchResult(BaseModel):
    """A ranked (student, professor) pairing.

    Constructed fresh for every scoring pass and never mutated; a new pass
    supersedes it whenever profiles or interest signals change.

    Attributes:
        id: "{student_id}-{professor_id}"
        score: Final ranked score in (min_score, 100], including any interest boost
        base_score: Aggregated score before the interest boost
        interest_boosted: True when an interest signal raised the score
        common_interests: Student research interests similar to a professor area
        matched_skills: Student skills similar to a required skill
    """

    model_config = ConfigDict(frozen=True)

    id: str
    student_id: str
    professor_id: str
    score: float
    base_score: float
    interest_boosted: bool = False
    common_interests: list[str] = Field(default_factory=list)
    matched_skills: list[str] = Field(default_factory=list)
    created_at: datetime


class ScoreBreakdown(BaseModel):
    """Diagnostic breakdown of a single pair's score."""

    model_config = ConfigDict(frozen=True)

    components: dict[str, float]
    weights: dict[str, float]
    final_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "components": {name: round(value, 3) for name, value in self.components.items()},
            "weights": {name: round(value, 4) for name, value in self.weights.items()},
            "finalScore": round(self.final_score, 3),
        }
