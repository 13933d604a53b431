"""Student data model with research interests, skills and availability."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class YearLevel(str, Enum):
    """Ordered academic year levels (Freshman=1 ... PhD Student=6)."""

    FRESHMAN = "Freshman"
    SOPHOMORE = "Sophomore"
    JUNIOR = "Junior"
    SENIOR = "Senior"
    GRADUATE_STUDENT = "Graduate Student"
    PHD_STUDENT = "PhD Student"

    @property
    def ordinal(self) -> int:
        return list(YearLevel).index(self) + 1

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["YearLevel"]:
        """Resolve a free-text year label, returning None when unrecognized."""
        if not isinstance(label, str):
            return None
        normalized = label.strip().lower()
        for level in cls:
            if level.value.lower() == normalized:
                return level
        return None


class Availability(str, Enum):
    """Weekly workload bands a student can commit to."""

    PART_TIME_LIGHT = "Part-time (10-15 hours/week)"
    PART_TIME_HEAVY = "Part-time (15-20 hours/week)"
    FULL_TIME_SUMMER = "Full-time (Summer only)"
    FULL_TIME_YEAR_ROUND = "Full-time (Year-round)"

    @property
    def weekly_hours(self) -> float:
        return _WEEKLY_HOURS[self]

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["Availability"]:
        """Resolve a free-text availability label, returning None when unrecognized."""
        if not isinstance(label, str):
            return None
        normalized = label.strip().lower()
        for band in cls:
            if band.value.lower() == normalized:
                return band
        return None


_WEEKLY_HOURS = {
    Availability.PART_TIME_LIGHT: 12.5,
    Availability.PART_TIME_HEAVY: 17.5,
    Availability.FULL_TIME_SUMMER: 40.0,
    Availability.FULL_TIME_YEAR_ROUND: 40.0,
}

# Hours assumed for availability labels outside the known bands
DEFAULT_WEEKLY_HOURS = 15.0


class Student(BaseModel):
    """Represents a student seeking a research position.

    Attributes:
        id: Collaborator-assigned identifier (optional for ad-hoc scoring)
        year: Year-level label, expected to be one of YearLevel
        gpa: GPA on a 4.0 scale; values outside [0, 4] are scored as malformed
        research_interests: Free-text research topic labels
        skills: Free-text skill labels
        experience: Free-text description of work/lab experience
        previous_research: Free-text description of prior research
        career_goals: Free-text career goals
        availability: Workload band label, expected to be one of Availability
        preferred_mentorship_style: Free-text mentorship preference
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    pronouns: str = ""
    ethnicity: str = ""
    university: str = ""
    major: str = ""
    year: str = ""
    gpa: Optional[float] = None
    research_interests: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    experience: str = ""
    previous_research: str = ""
    career_goals: str = ""
    availability: str = ""
    preferred_mentorship_style: str = ""
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
