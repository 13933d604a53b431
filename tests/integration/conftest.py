"""
Integration Test Configuration

Provides fixtures and configuration for integration tests.
When running in CI environment (CI=true), slow tests are automatically skipped.
"""

import os

import jsonlines
import pytest


@pytest.fixture
def is_ci_environment() -> bool:
    """
    Detect if tests are running in CI environment.

    Returns:
        True if CI environment variable is set to 'true'
    """
    return os.getenv("CI", "").lower() == "true"


@pytest.fixture(autouse=True)
def skip_slow_tests_in_ci(request, is_ci_environment):
    """Automatically skip tests marked @pytest.mark.slow when running in CI."""
    if is_ci_environment and request.node.get_closest_marker("slow"):
        pytest.skip("Skipping slow test in CI environment")


@pytest.fixture
def record_dir(tmp_path):
    """A data directory with a small mixed cohort of students and professors."""
    data = tmp_path / "data"
    data.mkdir()

    students = [
        {
            "id": "stu-1",
            "firstName": "Ada",
            "lastName": "Park",
            "email": "ada.park@example.edu",
            "major": "Computer Science",
            "year": "Senior",
            "gpa": 3.9,
            "researchInterests": ["Machine Learning", "Computer Vision"],
            "skills": ["Python", "PyTorch"],
            "experience": "Summer internship building deep learning models",
            "careerGoals": "PhD in artificial intelligence",
            "availability": "Full-time (Year-round)",
        },
        {
            "id": "stu-2",
            "firstName": "Ben",
            "lastName": "Osei",
            "major": "Biology",
            "year": "Sophomore",
            "gpa": 3.2,
            "researchInterests": ["Genetics"],
            "skills": ["Lab Techniques"],
            "availability": "Part-time (10-15 hours/week)",
        },
        {
            "id": "stu-3",
            "firstName": "Cy",
            "lastName": "Reyes",
            "year": "Junior",
            "gpa": "not reported",
        },
    ]
    professors = [
        {
            "id": "prof-1",
            "firstName": "Grace",
            "lastName": "Lin",
            "department": "Computer Science",
            "title": "Associate Professor",
            "researchAreas": ["Artificial Intelligence", "Computer Vision"],
            "requiredSkills": ["Python"],
            "preferredStudentLevel": ["Senior", "Graduate Student"],
            "labSize": 8,
            "mentorshipStyle": "Collaborative",
        },
        {
            "id": "prof-2",
            "firstName": "Hal",
            "lastName": "Mercer",
            "department": "Biology",
            "title": "Research Professor",
            "researchAreas": ["Genomics", "Molecular Biology"],
            "requiredSkills": ["Lab Techniques", "R"],
            "preferredStudentLevel": ["Sophomore", "Junior"],
            "labSize": 14,
            "mentorshipStyle": "Hands-on",
        },
        {
            "id": "prof-3",
            "firstName": "Ida",
            "lastName": "Quinn",
            "department": "Physics",
            "researchAreas": ["Quantum Computing"],
            "lookingForStudents": False,
        },
    ]
    interests = [
        {"id": "i-1", "studentId": "stu-2", "professorId": "prof-1"},
        {"id": "i-2", "studentId": "stu-1", "professorId": "prof-3"},
    ]

    for name, records in (
        ("students.jsonl", students),
        ("professors.jsonl", professors),
        ("interests.jsonl", interests),
    ):
        with jsonlines.open(data / name, mode="w") as writer:
            writer.write_all(records)

    return data
