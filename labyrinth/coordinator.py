"""
Match Coordinator Module

Runs a full matching pass over the record store: loads parameters and
records, scores candidates in batches with progress display, ranks once,
persists the ranking and renders it as a table.
"""

import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence, TypeVar, Union

from rich.console import Console
from rich.table import Table

from labyrinth.matching.interests import format_score, score_band
from labyrinth.matching.ranker import direction_for, finalize_ranking, score_candidates
from labyrinth.models.config import MatchingParams
from labyrinth.models.interest import InterestSignal
from labyrinth.models.match import MatchDirection, MatchResult
from labyrinth.models.professor import Professor
from labyrinth.models.student import Student
from labyrinth.utils.logger import configure_logging, get_logger
from labyrinth.utils.progress_tracker import ProgressTracker
from labyrinth.utils.record_store import RecordStore

T = TypeVar("T")


def divide_into_batches(items: Sequence[T], batch_size: int) -> list[list[T]]:
    """
    Divide a list of items into batches of specified size.

    Args:
        items: List of items to batch
        batch_size: Number of items per batch

    Returns:
        List of batches, where each batch is a list of items

    Raises:
        ValueError: If batch_size <= 0

    Example:
        >>> divide_into_batches([1, 2, 3, 4, 5, 6, 7], 3)
        [[1, 2, 3], [4, 5, 6], [7]]
    """
    if batch_size <= 0:
        raise ValueError("batch_size must be greater than 0")

    return [list(items[i : i + batch_size]) for i in range(0, len(items), batch_size)]


class MatchCoordinator:
    """
    Coordinates matching passes for a student or a professor.

    Scoring is pure and per-pair, so candidates are scored batch by batch and
    ranked once at the end.
    """

    def __init__(
        self,
        config_path: Optional[str] = "config/matching_params.json",
        data_dir: str = "data",
        correlation_id: Optional[str] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize MatchCoordinator.

        Args:
            config_path: Path to matching parameters JSON (None = built-in defaults)
            data_dir: Directory holding the JSONL record files
            correlation_id: Correlation ID for logging (auto-generated if None)
            console: Rich console for tables and progress (default: stdout console)
        """
        self.params = (
            MatchingParams.load(config_path) if config_path else MatchingParams()
        )
        configure_logging(log_level=self.params.log_level)

        if correlation_id is None:
            correlation_id = str(uuid.uuid4())

        self.correlation_id = correlation_id
        self.console = console or Console()
        self.store = RecordStore(data_dir=data_dir, correlation_id=correlation_id)
        self.progress_tracker = ProgressTracker(console=self.console)
        self.logger = get_logger(
            correlation_id=correlation_id,
            phase="coordinator",
            component="match_coordinator",
        )

        self.logger.info(
            "Match coordinator initialized",
            config_path=str(config_path) if config_path else None,
            data_dir=data_dir,
            thresholds=self.params.thresholds.model_dump(),
        )

    def match_student(self, student_id: str) -> list[MatchResult]:
        """
        Rank professors for a student and save the ranking.

        Raises:
            ValueError: If no student with this id exists in the store
        """
        students = {s.id: s for s in self.store.load_students() if s.id}
        student = students.get(student_id)
        if student is None:
            raise ValueError(f"Unknown student id: {student_id}")

        return self._run_pass(
            student,
            self.store.load_professors(),
            self.store.load_interest_signals(),
        )

    def match_professor(self, professor_id: str) -> list[MatchResult]:
        """
        Rank students for a professor and save the ranking.

        Raises:
            ValueError: If no professor with this id exists in the store
        """
        professors = {p.id: p for p in self.store.load_professors() if p.id}
        professor = professors.get(professor_id)
        if professor is None:
            raise ValueError(f"Unknown professor id: {professor_id}")

        return self._run_pass(
            professor,
            self.store.load_students(),
            self.store.load_interest_signals(),
        )

    def _run_pass(
        self,
        subject: Union[Student, Professor],
        candidates: Sequence[Union[Student, Professor]],
        signals: list[InterestSignal],
    ) -> list[MatchResult]:
        direction = direction_for(subject)
        created_at = datetime.now(timezone.utc)
        batches = divide_into_batches(
            candidates, self.params.batch_config.match_batch_size
        )

        self.logger.info(
            "Starting matching pass",
            direction=direction.value,
            subject_id=subject.id,
            candidates=len(candidates),
            total_batches=len(batches),
        )

        self.progress_tracker.start_pass(
            f"Matching {subject.id}", total_candidates=len(candidates)
        )

        matches: list[MatchResult] = []
        for batch_num, batch in enumerate(batches, 1):
            self.progress_tracker.update_batch(batch_num, len(batches))
            matches.extend(
                score_candidates(
                    subject,
                    batch,
                    signals,
                    self.params,
                    created_at,
                    self.correlation_id,
                )
            )
            self.progress_tracker.advance(len(batch))

        ranked = finalize_ranking(matches, self.params)

        self.progress_tracker.complete_pass(matches_found=len(ranked))
        self.store.save_matches(subject.id or "anonymous", ranked)

        self.logger.info(
            "Matching pass complete",
            subject_id=subject.id,
            matches=len(ranked),
            boosted=sum(1 for m in ranked if m.interest_boosted),
        )

        return ranked

    def render_matches(
        self,
        matches: Sequence[MatchResult],
        direction: MatchDirection,
        names: Optional[dict[str, str]] = None,
    ) -> Table:
        """
        Build and print a table of ranked matches.

        Args:
            matches: Ranked matches
            direction: Which party the table is shown to
            names: Optional id -> display name mapping for the candidate column

        Returns:
            The rendered rich Table
        """
        names = names or {}
        candidate_label = (
            "Professor"
            if direction == MatchDirection.STUDENT_TO_PROFESSORS
            else "Student"
        )

        table = Table(title=f"Ranked matches ({len(matches)})")
        table.add_column("#", justify="right")
        table.add_column(candidate_label)
        table.add_column("Score", justify="right")
        table.add_column("Band")
        table.add_column("Common interests")
        table.add_column("Interest", justify="center")

        for rank, match in enumerate(matches, 1):
            candidate_id = (
                match.professor_id
                if direction == MatchDirection.STUDENT_TO_PROFESSORS
                else match.student_id
            )
            table.add_row(
                str(rank),
                names.get(candidate_id, candidate_id),
                format_score(match.score),
                score_band(match.score),
                ", ".join(match.common_interests) or "-",
                "*" if match.interest_boosted else "",
            )

        self.console.print(table)
        return table

    def candidate_names(self, direction: MatchDirection) -> dict[str, str]:
        """Display names for the candidate side of a ranking."""
        if direction == MatchDirection.STUDENT_TO_PROFESSORS:
            return {p.id: p.full_name or p.id for p in self.store.load_professors() if p.id}
        return {s.id: s.full_name or s.id for s in self.store.load_students() if s.id}


def default_config_path() -> Optional[str]:
    """config/matching_params.json when present, otherwise None (built-in defaults)."""
    path = Path("config/matching_params.json")
    return str(path) if path.exists() else None
