"""
Progress Tracker Module

Wraps rich library progress bars for batch scoring passes.

Example Usage:
    from labyrinth.utils.progress_tracker import ProgressTracker

    tracker = ProgressTracker()
    tracker.start_pass("Scoring professors for stu-1", total_candidates=120)
    tracker.update_batch(batch_num=2, total_batches=5)
    tracker.advance(25)
    tracker.complete_pass(matches_found=14)
"""

from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressTracker:
    """Progress bar for one scoring pass at a time."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)
        self.progress: Optional[Progress] = None
        self.task_id: Optional[TaskID] = None
        self.description: str = ""
        self.total_candidates: int = 0
        self.scored: int = 0

    def start_pass(self, description: str, total_candidates: int) -> None:
        """
        Start a progress bar for a scoring pass.

        Args:
            description: Label shown next to the bar
            total_candidates: Number of candidates to score
        """
        self.description = description
        self.total_candidates = total_candidates
        self.scored = 0

        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TextColumn("({task.completed}/{task.total})"),
            TimeElapsedColumn(),
            console=self.console,
        )
        self.progress.start()
        self.task_id = self.progress.add_task(description, total=total_candidates)

    def update_batch(self, batch_num: int, total_batches: int) -> None:
        """Show which batch (1-indexed) is being scored."""
        if self.progress is None or self.task_id is None:
            return

        self.progress.update(
            self.task_id,
            description=f"{self.description} - Batch {batch_num}/{total_batches}",
        )

    def advance(self, amount: int = 1) -> None:
        """Record that `amount` more candidates were scored."""
        if self.progress is None or self.task_id is None:
            return

        self.scored += amount
        self.progress.update(self.task_id, advance=amount)

    def complete_pass(self, matches_found: int) -> None:
        """Stop the bar and print a one-line summary."""
        if self.progress is None or self.task_id is None:
            return

        self.progress.stop()
        self.console.print(
            f"[bold green]{self.description} complete:[/bold green] "
            f"{self.scored} candidates scored, {matches_found} matches"
        )

        self.progress = None
        self.task_id = None
        self.description = ""
        self.total_candidates = 0
        self.scored = 0

    def is_active(self) -> bool:
        return self.progress is not None and self.task_id is not None
