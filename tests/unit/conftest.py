"""
Shared fixtures for matching unit tests.

Provides the reference Machine Learning / Artificial Intelligence pairing
used across scorer, weight and ranker tests.
"""

import pytest

from labyrinth.models.professor import Professor
from labyrinth.models.student import Student


@pytest.fixture
def ml_student() -> Student:
    """Senior CS student interested in machine learning."""
    return Student(
        id="stu-001",
        first_name="Ada",
        last_name="Park",
        email="ada.park@example.edu",
        major="Computer Science",
        year="Senior",
        gpa=3.9,
        research_interests=["Machine Learning"],
        skills=["Python"],
        availability="Full-time (Year-round)",
    )


@pytest.fixture
def ai_professor() -> Professor:
    """CS professor working on AI who is looking for seniors."""
    return Professor(
        id="prof-001",
        first_name="Grace",
        last_name="Lin",
        email="glin@example.edu",
        department="Computer Science",
        title="Professor",
        research_areas=["Artificial Intelligence"],
        required_skills=["Python"],
        preferred_student_level=["Senior"],
        lab_size=5,
        mentorship_style="Collaborative",
        looking_for_students=True,
    )
