"""Component scorers for student-professor compatibility.

Each scorer looks at one aspect of a pairing and returns a value in
[0, 100]. Scorers never raise on malformed profile values; each one documents
the fallback it uses instead.
"""

import math
from typing import Any, NamedTuple, Optional

from labyrinth.matching.similarity import best_similarity, normalize_label, similarity
from labyrinth.models.professor import Professor
from labyrinth.models.student import DEFAULT_WEEKLY_HOURS, Availability, Student, YearLevel

RESEARCH_ALIGNMENT = "research_alignment"
SKILLS_MATCH = "skills_match"
ACADEMIC_LEVEL = "academic_level"
GPA_CONSIDERATION = "gpa_consideration"
AVAILABILITY_FIT = "availability_fit"
EXPERIENCE_RELEVANCE = "experience_relevance"
CAREER_ALIGNMENT = "career_alignment"

COMPONENT_NAMES = (
    RESEARCH_ALIGNMENT,
    SKILLS_MATCH,
    ACADEMIC_LEVEL,
    GPA_CONSIDERATION,
    AVAILABILITY_FIT,
    EXPERIENCE_RELEVANCE,
    CAREER_ALIGNMENT,
)

MAX_SCORE = 100.0


class GpaExpectation(NamedTuple):
    minimum: float
    good: float
    excellent: float


DEPARTMENT_GPA_EXPECTATIONS: dict[str, GpaExpectation] = {
    "computer science": GpaExpectation(3.2, 3.5, 3.8),
    "electrical engineering": GpaExpectation(3.1, 3.4, 3.7),
    "mechanical engineering": GpaExpectation(3.0, 3.3, 3.6),
    "biomedical engineering": GpaExpectation(3.2, 3.5, 3.8),
    "engineering": GpaExpectation(3.0, 3.3, 3.6),
    "mathematics": GpaExpectation(3.2, 3.5, 3.8),
    "physics": GpaExpectation(3.2, 3.5, 3.8),
    "chemistry": GpaExpectation(3.1, 3.4, 3.7),
    "biology": GpaExpectation(3.1, 3.4, 3.7),
    "neuroscience": GpaExpectation(3.2, 3.5, 3.8),
    "psychology": GpaExpectation(3.0, 3.3, 3.6),
    "economics": GpaExpectation(3.1, 3.4, 3.7),
    "political science": GpaExpectation(3.0, 3.3, 3.6),
    "environmental science": GpaExpectation(3.0, 3.3, 3.6),
}

# Used for departments missing from the table above
DEFAULT_GPA_EXPECTATION = GpaExpectation(3.0, 3.3, 3.6)

# GPA slack below the department minimum that still earns partial credit
GPA_GRACE = 0.3


class MentorshipDemand(NamedTuple):
    required_hours: float
    flexibility: float


# First keyword group found in the mentorship style wins
MENTORSHIP_DEMANDS: list[tuple[tuple[str, ...], MentorshipDemand]] = [
    (("hands-on", "intensive"), MentorshipDemand(25.0, 0.7)),
    (("collaborative",), MentorshipDemand(20.0, 0.8)),
    (("independent",), MentorshipDemand(12.0, 0.9)),
    (("structured",), MentorshipDemand(18.0, 0.75)),
]

DEFAULT_MENTORSHIP_DEMAND = MentorshipDemand(15.0, 0.8)

# Score when a student lists no experience or previous research at all
NO_EXPERIENCE_SCORE = 30.0

EXPERIENCE_POINTS_PER_AREA = 20.0
CAREER_POINTS_PER_AREA = 25.0


def _labels(values: Any) -> list[str]:
    """Non-empty string labels from a list field."""
    if not isinstance(values, (list, tuple, set)):
        return []
    return [value for value in values if isinstance(value, str) and value.strip()]


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def common_interests(
    student: Student, professor: Professor, threshold: float = 0.6
) -> list[str]:
    """Student research interests similar to at least one professor research area."""
    areas = _labels(professor.research_areas)
    return [
        interest
        for interest in _labels(student.research_interests)
        if best_similarity(interest, areas) > threshold
    ]


def matched_skills(
    student: Student, professor: Professor, threshold: float = 0.7
) -> list[str]:
    """Student skills similar to at least one required skill."""
    required = _labels(professor.required_skills)
    return [
        skill
        for skill in _labels(student.skills)
        if best_similarity(skill, required) > threshold
    ]


def research_alignment(
    student: Student, professor: Professor, threshold: float = 0.6
) -> float:
    """Two-sided research overlap: 60% student coverage, 40% professor coverage.

    Returns 0 when either side lists no research topics.
    """
    interests = _labels(student.research_interests)
    areas = _labels(professor.research_areas)

    if not interests or not areas:
        return 0.0

    student_hits = sum(
        1 for interest in interests if best_similarity(interest, areas) > threshold
    ) / len(interests)
    professor_hits = sum(
        1 for area in areas if best_similarity(area, interests) > threshold
    ) / len(areas)

    return 0.6 * student_hits * MAX_SCORE + 0.4 * professor_hits * MAX_SCORE


def skills_match(
    student: Student, professor: Professor, threshold: float = 0.7
) -> float:
    """Required-skill coverage, capped by a 10-point penalty per missing skill."""
    skills = _labels(student.skills)
    required = _labels(professor.required_skills)

    matched = len(matched_skills(student, professor, threshold))
    missing = sum(1 for req in required if best_similarity(req, skills) <= threshold)

    match_score = min(matched / max(len(required), 1) * MAX_SCORE, MAX_SCORE)
    penalty = max(0.0, MAX_SCORE - missing * 10)

    return min(match_score, penalty)


def academic_level_compatibility(student: Student, professor: Professor) -> float:
    """Distance between the student's year and the professor's preferred levels.

    Unrecognized student year -> 0. No recognizable preferred level on
    the professor side -> 0.
    """
    student_level = YearLevel.from_label(student.year)
    if student_level is None:
        return 0.0

    preferred = [
        level
        for level in (YearLevel.from_label(label) for label in _labels(professor.preferred_student_level))
        if level is not None
    ]
    if not preferred:
        return 0.0

    distance = min(abs(student_level.ordinal - level.ordinal) for level in preferred)

    if distance == 0:
        return MAX_SCORE
    if distance == 1:
        return 85.0
    if distance == 2:
        return 70.0
    if distance == 3:
        return 50.0
    return 30.0


def gpa_expectation_for(department: Any) -> GpaExpectation:
    """Department GPA expectations with the documented fallback."""
    return DEPARTMENT_GPA_EXPECTATIONS.get(
        normalize_label(department), DEFAULT_GPA_EXPECTATION
    )


def _valid_gpa(gpa: Any) -> Optional[float]:
    if isinstance(gpa, bool) or not isinstance(gpa, (int, float)):
        return None
    if math.isnan(gpa) or gpa < 0.0 or gpa > 4.0:
        return None
    return float(gpa)


def gpa_consideration(student: Student, professor: Professor) -> float:
    """GPA against department expectations. Missing or out-of-range GPA -> 0."""
    gpa = _valid_gpa(student.gpa)
    if gpa is None:
        return 0.0

    expectation = gpa_expectation_for(professor.department)

    if gpa >= expectation.excellent:
        return MAX_SCORE
    if gpa >= expectation.good:
        return 85.0
    if gpa >= expectation.minimum:
        return 70.0
    if gpa >= round(expectation.minimum - GPA_GRACE, 2):
        return 50.0
    return 30.0


def weekly_hours_for(availability: Any) -> float:
    band = Availability.from_label(availability)
    return band.weekly_hours if band is not None else DEFAULT_WEEKLY_HOURS


def mentorship_demand_for(mentorship_style: Any) -> MentorshipDemand:
    style = normalize_label(mentorship_style)
    for keywords, demand in MENTORSHIP_DEMANDS:
        if any(keyword in style for keyword in keywords):
            return demand
    return DEFAULT_MENTORSHIP_DEMAND


def availability_fit(student: Student, professor: Professor) -> float:
    """Student weekly hours against the hours the mentorship style demands."""
    hours = weekly_hours_for(student.availability)
    demand = mentorship_demand_for(professor.mentorship_style)

    ratio = hours / demand.required_hours

    if ratio >= 1.0:
        return MAX_SCORE
    if ratio >= demand.flexibility:
        return 85.0
    if ratio >= 0.7:
        return 70.0
    if ratio >= 0.5:
        return 50.0
    return 30.0


def _area_points(
    text: str, areas: list[str], threshold: float, points_per_area: float
) -> float:
    lowered = text.lower()
    total = 0.0
    for area in areas:
        if normalize_label(area) in lowered or similarity(text, area) > threshold:
            total += points_per_area
    return min(total, MAX_SCORE)


def experience_relevance(
    student: Student, professor: Professor, threshold: float = 0.5
) -> float:
    """Professor research areas mentioned in the student's experience.

    A student with neither experience nor previous research scores 30.
    """
    previous = _text(student.previous_research)
    experience = _text(student.experience)

    if not previous and not experience:
        return NO_EXPERIENCE_SCORE

    combined = f"{previous} {experience}".strip()
    return _area_points(
        combined, _labels(professor.research_areas), threshold, EXPERIENCE_POINTS_PER_AREA
    )


def career_alignment(
    student: Student, professor: Professor, threshold: float = 0.6
) -> float:
    """Professor research areas reflected in the student's career goals."""
    goals = _text(student.career_goals)
    if not goals:
        return 0.0

    return _area_points(
        goals, _labels(professor.research_areas), threshold, CAREER_POINTS_PER_AREA
    )
