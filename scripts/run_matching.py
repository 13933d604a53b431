#!/usr/bin/env python3
"""
Run a matching pass from the command line.

Usage:
    python scripts/run_matching.py --student stu-1
    python scripts/run_matching.py --professor prof-3 --data-dir data
"""

import argparse
import sys

from labyrinth.coordinator import MatchCoordinator, default_config_path
from labyrinth.models.match import MatchDirection


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank research matches")
    subject = parser.add_mutually_exclusive_group(required=True)
    subject.add_argument("--student", help="Student id to find professors for")
    subject.add_argument("--professor", help="Professor id to find students for")
    parser.add_argument("--data-dir", default="data", help="Directory of JSONL records")
    parser.add_argument(
        "--config",
        default=None,
        help="Matching parameters JSON (default: config/matching_params.json if present)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    coordinator = MatchCoordinator(
        config_path=args.config or default_config_path(),
        data_dir=args.data_dir,
    )

    try:
        if args.student:
            direction = MatchDirection.STUDENT_TO_PROFESSORS
            matches = coordinator.match_student(args.student)
        else:
            direction = MatchDirection.PROFESSOR_TO_STUDENTS
            matches = coordinator.match_professor(args.professor)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    coordinator.render_matches(matches, direction, coordinator.candidate_names(direction))
    return 0


if __name__ == "__main__":
    sys.exit(main())
