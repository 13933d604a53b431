"""Interest signal queries and score presentation helpers."""

from typing import Sequence

from pydantic import BaseModel

from labyrinth.models.interest import InterestSignal, InterestStatus
from labyrinth.models.student import Student

SCORE_BANDS = [
    (85.0, "excellent"),
    (70.0, "strong"),
    (55.0, "good"),
    (40.0, "fair"),
]


class InterestSummary(BaseModel):
    """Counts of records and interest signals by status."""

    total_students: int = 0
    total_professors: int = 0
    total_interests: int = 0
    interested: int = 0
    contacted: int = 0
    matched: int = 0
    declined: int = 0


def interested_students(
    professor_id: str,
    students: Sequence[Student],
    signals: Sequence[InterestSignal],
) -> list[tuple[Student, InterestSignal]]:
    """Students with an active interest in a professor, in signal order.

    Signals pointing at unknown student ids are skipped.
    """
    students_by_id = {student.id: student for student in students if student.id}

    results = []
    for signal in signals:
        if signal.professor_id != professor_id or not signal.is_active_interest():
            continue
        student = students_by_id.get(signal.student_id)
        if student is not None:
            results.append((student, signal))

    return results


def summarize_interests(
    signals: Sequence[InterestSignal],
    total_students: int = 0,
    total_professors: int = 0,
) -> InterestSummary:
    """Aggregate interest signal counts for dashboards."""
    counts = {status: 0 for status in InterestStatus}
    for signal in signals:
        counts[signal.status] += 1

    return InterestSummary(
        total_students=total_students,
        total_professors=total_professors,
        total_interests=len(signals),
        interested=counts[InterestStatus.INTERESTED],
        contacted=counts[InterestStatus.CONTACTED],
        matched=counts[InterestStatus.MATCHED],
        declined=counts[InterestStatus.DECLINED],
    )


def format_score(score: float) -> str:
    """Render a score as a whole percentage, e.g. "87%"."""
    return f"{round(score)}%"


def score_band(score: float) -> str:
    """Qualitative band for a score: excellent, strong, good, fair or weak."""
    for threshold, band in SCORE_BANDS:
        if score >= threshold:
            return band
    return "weak"
