"""
Record Store Module

Reads student, professor and interest records from JSONL files and writes
ranked matches back out. This is the file-based stand-in for the web
application's record table; the matching engine itself never touches disk.

Layout:
    data/
        students.jsonl
        professors.jsonl
        interests.jsonl
        matches/<subject-id>.jsonl

Example Usage:
    from labyrinth.utils.record_store import RecordStore

    store = RecordStore(data_dir="data")
    students = store.load_students()
    professors = store.load_professors()
    signals = store.load_interest_signals()

    store.save_matches(subject_id="stu-1", matches=matches)
"""

import json
from pathlib import Path
from typing import Optional, Sequence, TypeVar

import jsonlines
from pydantic import BaseModel, ValidationError

from labyrinth.models.interest import InterestSignal
from labyrinth.models.match import MatchResult
from labyrinth.models.professor import Professor
from labyrinth.models.student import Student
from labyrinth.utils.logger import get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)

STUDENTS_FILE = "students.jsonl"
PROFESSORS_FILE = "professors.jsonl"
INTERESTS_FILE = "interests.jsonl"
MATCHES_DIR = "matches"


class RecordStoreError(IOError):
    """Raised when a record file cannot be read or written."""

    pass


class RecordStore:
    """Loads profile and interest records, and persists ranked matches."""

    def __init__(self, data_dir: str = "data", correlation_id: Optional[str] = None):
        """
        Initialize RecordStore.

        Args:
            data_dir: Directory holding the JSONL record files (default: "data")
            correlation_id: Correlation ID for logging
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.logger = get_logger(
            correlation_id=correlation_id,
            phase="record_store",
            component="record_store",
        )

    def _read_records(self, filename: str) -> list[dict]:
        """
        Read raw records from a JSONL file.

        Returns:
            List of records. Later records override earlier ones when their
            'id' fields collide. A missing file yields an empty list.

        Raises:
            RecordStoreError: If the file is corrupted or unreadable
        """
        path = self.data_dir / filename
        if not path.exists():
            self.logger.debug("Record file not found, treating as empty", path=str(path))
            return []

        records: dict[str, dict] = {}
        try:
            with jsonlines.open(path) as reader:
                for record in reader:
                    record_id = record.get("id") or str(len(records))
                    records[record_id] = record
        except (json.JSONDecodeError, jsonlines.InvalidLineError) as e:
            raise RecordStoreError(f"Corrupted record file {path}: {e}") from e
        except Exception as e:
            raise RecordStoreError(f"Failed to read record file {path}: {e}") from e

        return list(records.values())

    def _load_models(self, filename: str, model: type[ModelT]) -> list[ModelT]:
        """Validate raw records into models, skipping invalid ones."""
        loaded: list[ModelT] = []
        skipped = 0

        for record in self._read_records(filename):
            try:
                loaded.append(model.model_validate(record))
            except ValidationError as e:
                skipped += 1
                self.logger.warning(
                    "Invalid record skipped",
                    file=filename,
                    record_id=record.get("id"),
                    errors=e.error_count(),
                )

        self.logger.info(
            "Records loaded",
            file=filename,
            loaded=len(loaded),
            skipped=skipped,
        )
        return loaded

    def load_students(self) -> list[Student]:
        return self._load_models(STUDENTS_FILE, Student)

    def load_professors(self) -> list[Professor]:
        return self._load_models(PROFESSORS_FILE, Professor)

    def load_interest_signals(self) -> list[InterestSignal]:
        return self._load_models(INTERESTS_FILE, InterestSignal)

    def save_matches(self, subject_id: str, matches: Sequence[MatchResult]) -> Path:
        """
        Write ranked matches for a subject, replacing any earlier ranking.

        Args:
            subject_id: Student or professor id the ranking belongs to
            matches: Ranked match results

        Returns:
            Path of the written file

        Raises:
            RecordStoreError: If the file cannot be written
        """
        matches_dir = self.data_dir / MATCHES_DIR
        matches_dir.mkdir(exist_ok=True)
        path = matches_dir / f"{subject_id}.jsonl"

        try:
            with jsonlines.open(path, mode="w") as writer:
                for rank, match in enumerate(matches, 1):
                    writer.write({"rank": rank, **match.model_dump(mode="json")})
        except Exception as e:
            raise RecordStoreError(
                f"Failed to save matches for {subject_id}: {e}"
            ) from e

        self.logger.info("Matches saved", subject_id=subject_id, count=len(matches), path=str(path))
        return path

    def load_matches(self, subject_id: str) -> list[dict]:
        """Read a previously saved ranking (empty when none exists)."""
        return self._read_records(f"{MATCHES_DIR}/{subject_id}.jsonl")
