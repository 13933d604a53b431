"""Match ranking: score candidates, boost for interest, filter, and order.

Both directions share one pipeline:
- a student viewing professors (only professors looking for students)
- a professor viewing students (all students)

Ordering: descending score, except that candidates whose scores are within
the tie margin (2 points by default) are ordered by the number of common
research interests. Remaining ties keep candidate input order.
"""

from datetime import datetime, timezone
from functools import cmp_to_key
from typing import Optional, Sequence, Union

from labyrinth.matching.components import common_interests, matched_skills
from labyrinth.matching.priority import apply_interest_boost
from labyrinth.matching.scorer import calculate_match_score
from labyrinth.models.config import MatchingParams
from labyrinth.models.interest import InterestSignal, has_interest
from labyrinth.models.match import MatchDirection, MatchResult
from labyrinth.models.professor import Professor
from labyrinth.models.student import Student
from labyrinth.utils.logger import get_logger

Profile = Union[Student, Professor]


def direction_for(subject: Profile) -> MatchDirection:
    """Viewing direction implied by the subject profile type.

    Raises:
        TypeError: If subject is neither a Student nor a Professor
    """
    if isinstance(subject, Student):
        return MatchDirection.STUDENT_TO_PROFESSORS
    if isinstance(subject, Professor):
        return MatchDirection.PROFESSOR_TO_STUDENTS
    raise TypeError(f"Cannot rank matches for subject of type {type(subject).__name__}")


def build_match(
    student: Student,
    professor: Professor,
    direction: MatchDirection,
    interest_signals: Sequence[InterestSignal] = (),
    params: Optional[MatchingParams] = None,
    created_at: Optional[datetime] = None,
    correlation_id: Optional[str] = None,
) -> Optional[MatchResult]:
    """Score one pair and build its MatchResult.

    Args:
        student: Student profile
        professor: Professor profile
        direction: Viewing direction, selects the boost tier
        interest_signals: Interest signals to check for this pair
        params: Matching parameters (defaults to MatchingParams())
        created_at: Timestamp for the result (defaults to now, UTC)
        correlation_id: Correlation ID for logging

    Returns:
        MatchResult, or None when the professor is not taking students or the
        score does not clear params.thresholds.min_score
    """
    params = params or MatchingParams()
    thresholds = params.thresholds

    if not professor.looking_for_students:
        return None

    base_score = calculate_match_score(student, professor, thresholds, correlation_id)
    interested = has_interest(list(interest_signals), student.id, professor.id)
    score = apply_interest_boost(base_score, direction, interested, params.boosts)

    if score <= thresholds.min_score:
        return None

    student_id = student.id or ""
    professor_id = professor.id or ""

    return MatchResult(
        id=f"{student_id}-{professor_id}",
        student_id=student_id,
        professor_id=professor_id,
        score=score,
        base_score=base_score,
        interest_boosted=interested,
        common_interests=common_interests(
            student, professor, thresholds.research_similarity
        ),
        matched_skills=matched_skills(student, professor, thresholds.skills_similarity),
        created_at=created_at or datetime.now(timezone.utc),
    )


def rank_matches(
    matches: Sequence[MatchResult], tie_margin: float = 2.0
) -> list[MatchResult]:
    """Order matches best-first.

    Args:
        matches: Unordered match results
        tie_margin: Scores closer than this are ordered by common interest count

    Returns:
        New list, best match first
    """
    # The tie-break comparison is not transitive: start from a canonical
    # order. Matches equal on score and interest count keep input order.
    canonical = sorted(
        matches, key=lambda m: (-m.score, -len(m.common_interests))
    )

    def compare(a: MatchResult, b: MatchResult) -> int:
        if abs(a.score - b.score) < tie_margin:
            interest_diff = len(b.common_interests) - len(a.common_interests)
            if interest_diff:
                return interest_diff
        if a.score > b.score:
            return -1
        if a.score < b.score:
            return 1
        return 0

    return sorted(canonical, key=cmp_to_key(compare))


def score_candidates(
    subject: Profile,
    candidates: Sequence[Profile],
    interest_signals: Sequence[InterestSignal] = (),
    params: Optional[MatchingParams] = None,
    created_at: Optional[datetime] = None,
    correlation_id: Optional[str] = None,
) -> list[MatchResult]:
    """Score candidates against a subject, keeping matches that clear the threshold.

    Results are unranked and in candidate order, so callers can score
    candidates in batches and rank once with finalize_ranking().

    Raises:
        TypeError: If subject is neither a Student nor a Professor
    """
    params = params or MatchingParams()
    direction = direction_for(subject)
    created_at = created_at or datetime.now(timezone.utc)
    signals = list(interest_signals)

    logger = get_logger(
        correlation_id=correlation_id,
        phase="ranking",
        component="match_ranker",
    )

    matches: list[MatchResult] = []
    for candidate in candidates:
        if direction == MatchDirection.STUDENT_TO_PROFESSORS:
            student, professor = subject, candidate
        else:
            student, professor = candidate, subject

        match = build_match(
            student,
            professor,
            direction,
            signals,
            params,
            created_at,
            correlation_id,
        )
        if match is None:
            logger.debug(
                "Candidate filtered",
                student_id=student.id,
                professor_id=professor.id,
                looking_for_students=professor.looking_for_students,
            )
            continue

        matches.append(match)

    return matches


def finalize_ranking(
    matches: Sequence[MatchResult], params: Optional[MatchingParams] = None
) -> list[MatchResult]:
    """Rank scored matches and apply the max_results cap."""
    params = params or MatchingParams()
    ranked = rank_matches(matches, params.thresholds.tie_margin)
    if params.max_results is not None:
        ranked = ranked[: params.max_results]
    return ranked


def score_matches(
    subject: Profile,
    candidates: Sequence[Profile],
    interest_signals: Sequence[InterestSignal] = (),
    params: Optional[MatchingParams] = None,
    created_at: Optional[datetime] = None,
    correlation_id: Optional[str] = None,
) -> list[MatchResult]:
    """Rank candidates for a student or a professor.

    Args:
        subject: Student (find professors) or Professor (find students)
        candidates: Professors or students to rank against the subject
        interest_signals: Interest signals; only "interested" entries boost
        params: Matching parameters (defaults to MatchingParams())
        created_at: Timestamp shared by every result (defaults to now, UTC)
        correlation_id: Correlation ID for logging

    Returns:
        Ranked list of MatchResult, every score above the minimum threshold

    Example:
        >>> matches = score_matches(student, professors, signals)
        >>> [m.professor_id for m in matches]
        ['prof-7', 'prof-2']
    """
    params = params or MatchingParams()
    matches = score_candidates(
        subject, candidates, interest_signals, params, created_at, correlation_id
    )
    ranked = finalize_ranking(matches, params)

    logger = get_logger(
        correlation_id=correlation_id,
        phase="ranking",
        component="match_ranker",
    )
    logger.info(
        "Ranking complete",
        direction=direction_for(subject).value,
        subject_id=subject.id,
        candidates=len(candidates),
        matches=len(ranked),
        boosted=sum(1 for m in ranked if m.interest_boosted),
    )

    return ranked
