"""
Unit tests for progress_tracker module.
"""

from unittest.mock import MagicMock, patch

from labyrinth.utils.progress_tracker import ProgressTracker


class TestProgressTracker:
    """Test cases for ProgressTracker class."""

    def test_initialization(self):
        tracker = ProgressTracker()

        assert tracker.progress is None
        assert tracker.task_id is None
        assert tracker.description == ""
        assert tracker.total_candidates == 0
        assert tracker.scored == 0
        assert not tracker.is_active()

    @patch("labyrinth.utils.progress_tracker.Progress")
    def test_start_pass_creates_progress_bar(self, mock_progress_class):
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress
        mock_progress.add_task.return_value = 7

        tracker = ProgressTracker()
        tracker.start_pass("Matching stu-1", total_candidates=40)

        assert tracker.description == "Matching stu-1"
        assert tracker.total_candidates == 40
        assert tracker.is_active()
        mock_progress.start.assert_called_once()
        mock_progress.add_task.assert_called_once_with("Matching stu-1", total=40)

    @patch("labyrinth.utils.progress_tracker.Progress")
    def test_update_batch_updates_description(self, mock_progress_class):
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress
        mock_progress.add_task.return_value = 7

        tracker = ProgressTracker()
        tracker.start_pass("Matching stu-1", total_candidates=40)
        tracker.update_batch(batch_num=2, total_batches=3)

        mock_progress.update.assert_called_with(
            7, description="Matching stu-1 - Batch 2/3"
        )

    @patch("labyrinth.utils.progress_tracker.Progress")
    def test_advance_counts_scored_candidates(self, mock_progress_class):
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress
        mock_progress.add_task.return_value = 7

        tracker = ProgressTracker()
        tracker.start_pass("Matching stu-1", total_candidates=40)
        tracker.advance(25)
        tracker.advance(15)

        assert tracker.scored == 40
        mock_progress.update.assert_called_with(7, advance=15)

    @patch("labyrinth.utils.progress_tracker.Progress")
    def test_complete_pass_stops_and_resets(self, mock_progress_class):
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress
        mock_progress.add_task.return_value = 7
        console = MagicMock()

        tracker = ProgressTracker(console=console)
        tracker.start_pass("Matching stu-1", total_candidates=40)
        tracker.advance(40)
        tracker.complete_pass(matches_found=12)

        mock_progress.stop.assert_called_once()
        console.print.assert_called_once()
        assert "40 candidates scored, 12 matches" in console.print.call_args[0][0]
        assert not tracker.is_active()
        assert tracker.scored == 0

    def test_calls_without_active_pass_are_ignored(self):
        console = MagicMock()
        tracker = ProgressTracker(console=console)

        tracker.update_batch(1, 1)
        tracker.advance(3)
        tracker.complete_pass(matches_found=0)

        assert tracker.scored == 0
        console.print.assert_not_called()
