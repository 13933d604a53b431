"""Unit tests for the seven component scorers."""

import pytest

from labyrinth.matching import components
from labyrinth.matching.components import (
    DEFAULT_GPA_EXPECTATION,
    NO_EXPERIENCE_SCORE,
    academic_level_compatibility,
    availability_fit,
    career_alignment,
    common_interests,
    experience_relevance,
    gpa_consideration,
    gpa_expectation_for,
    matched_skills,
    mentorship_demand_for,
    research_alignment,
    skills_match,
    weekly_hours_for,
)
from labyrinth.models.professor import Professor
from labyrinth.models.student import Student


class TestResearchAlignment:
    def test_full_alignment_through_synonyms(self, ml_student, ai_professor):
        assert research_alignment(ml_student, ai_professor) == pytest.approx(100.0)

    def test_partial_student_coverage(self, ai_professor):
        student = Student(research_interests=["Machine Learning", "Poetry"])

        # 0.6 * 50% + 0.4 * 100%
        assert research_alignment(student, ai_professor) == pytest.approx(70.0)

    def test_partial_professor_coverage(self, ml_student):
        professor = Professor(research_areas=["Artificial Intelligence", "Medieval History"])

        # 0.6 * 100% + 0.4 * 50%
        assert research_alignment(ml_student, professor) == pytest.approx(80.0)

    def test_empty_interests_score_zero(self, ai_professor):
        assert research_alignment(Student(), ai_professor) == 0.0

    def test_common_interests_keep_student_order(self):
        student = Student(research_interests=["Deep Learning", "Poetry", "Robotics"])
        professor = Professor(research_areas=["Robotics", "Artificial Intelligence"])

        assert common_interests(student, professor) == ["Deep Learning", "Robotics"]


class TestSkillsMatch:
    def test_all_required_skills_matched(self, ml_student, ai_professor):
        assert skills_match(ml_student, ai_professor) == 100.0

    def test_coverage_ratio(self):
        student = Student(skills=["Python"])
        professor = Professor(required_skills=["Python", "SQL", "Docker"])

        # 1 of 3 matched; penalty 100 - 2 * 10 = 80 does not bind
        assert skills_match(student, professor) == pytest.approx(100 / 3)

    def test_missing_skill_penalty_caps_score(self):
        student = Student(skills=["Python", "Python 3", "Python scripting"])
        professor = Professor(
            required_skills=[
                "Python",
                "SQL",
                "Docker",
                "AWS",
                "Git",
                "Linux",
                "Java",
                "MATLAB",
                "Excel",
                "Spark",
            ]
        )

        # 3 student skills match -> 30; 9 required skills missing -> penalty 10
        assert skills_match(student, professor) == pytest.approx(10.0)

    def test_no_required_skills_scores_zero(self):
        student = Student(skills=["Python"])

        assert skills_match(student, Professor()) == 0.0

    def test_matched_skills_listed(self):
        student = Student(skills=["Python", "Pottery", "SQL"])
        professor = Professor(required_skills=["SQL", "Python"])

        assert matched_skills(student, professor) == ["Python", "SQL"]


class TestAcademicLevel:
    @pytest.mark.parametrize(
        "year, preferred, expected",
        [
            ("Senior", ["Senior"], 100.0),
            ("senior", ["Junior", "Senior"], 100.0),
            ("Junior", ["Senior"], 85.0),
            ("Sophomore", ["Senior"], 70.0),
            ("Freshman", ["Senior"], 50.0),
            ("Freshman", ["PhD Student"], 30.0),
            ("Graduate Student", ["Freshman", "PhD Student"], 85.0),
        ],
    )
    def test_distance_bands(self, year, preferred, expected):
        student = Student(year=year)
        professor = Professor(preferred_student_level=preferred)

        assert academic_level_compatibility(student, professor) == expected

    def test_unrecognized_student_year_scores_zero(self):
        student = Student(year="Alumni")
        professor = Professor(preferred_student_level=["Senior"])

        assert academic_level_compatibility(student, professor) == 0.0

    @pytest.mark.parametrize("preferred", [[], ["Undergraduate"], ["Postdoc", ""]])
    def test_missing_or_unrecognized_preferences_score_zero(self, preferred):
        student = Student(year="Senior")
        professor = Professor(preferred_student_level=preferred)

        assert academic_level_compatibility(student, professor) == 0.0


class TestGpaConsideration:
    @pytest.mark.parametrize(
        "gpa, expected",
        [(3.9, 100.0), (3.8, 100.0), (3.6, 85.0), (3.3, 70.0), (2.9, 50.0), (2.5, 30.0)],
    )
    def test_computer_science_bands(self, gpa, expected):
        student = Student(gpa=gpa)
        professor = Professor(department="Computer Science")

        assert gpa_consideration(student, professor) == expected

    def test_unknown_department_uses_fallback(self):
        assert gpa_expectation_for("Art History") == DEFAULT_GPA_EXPECTATION

        student = Student(gpa=3.4)
        professor = Professor(department="Art History")

        # fallback (3.0, 3.3, 3.6): 3.4 >= good
        assert gpa_consideration(student, professor) == 85.0

    def test_department_lookup_ignores_case(self):
        assert gpa_expectation_for("  computer SCIENCE ") == (3.2, 3.5, 3.8)

    @pytest.mark.parametrize("gpa", [None, 4.5, -1.0, float("nan")])
    def test_missing_or_out_of_range_gpa_scores_zero(self, gpa):
        student = Student(gpa=gpa)
        professor = Professor(department="Computer Science")

        assert gpa_consideration(student, professor) == 0.0


class TestAvailabilityFit:
    def test_weekly_hours_lookup(self):
        assert weekly_hours_for("Part-time (10-15 hours/week)") == 12.5
        assert weekly_hours_for("part-time (15-20 hours/week)") == 17.5
        assert weekly_hours_for("Full-time (Summer only)") == 40.0
        assert weekly_hours_for("Whenever I can") == 15.0
        assert weekly_hours_for(None) == 15.0

    def test_first_listed_keyword_wins(self):
        demand = mentorship_demand_for("Hands-on but collaborative")

        assert demand.required_hours == 25.0
        assert demand.flexibility == 0.7

    def test_default_mentorship_demand(self):
        demand = mentorship_demand_for("Friendly")

        assert demand == components.DEFAULT_MENTORSHIP_DEMAND

    @pytest.mark.parametrize(
        "availability, style, expected",
        [
            ("Full-time (Year-round)", "Collaborative", 100.0),
            ("Part-time (10-15 hours/week)", "Independent research", 100.0),
            ("Part-time (15-20 hours/week)", "Hands-on", 85.0),
            ("Part-time (10-15 hours/week)", "Hands-on", 50.0),
            ("Part-time (10-15 hours/week)", "Collaborative", 50.0),
            ("Part-time (15-20 hours/week)", "Collaborative", 85.0),
            ("Part-time (10-15 hours/week)", "Structured", 50.0),
            ("Something else", "", 100.0),
        ],
    )
    def test_ratio_bands(self, availability, style, expected):
        student = Student(availability=availability)
        professor = Professor(mentorship_style=style)

        assert availability_fit(student, professor) == expected


class TestExperienceRelevance:
    def test_no_experience_gets_neutral_low_score(self, ai_professor):
        assert experience_relevance(Student(), ai_professor) == NO_EXPERIENCE_SCORE
        assert (
            experience_relevance(Student(experience="   "), ai_professor)
            == NO_EXPERIENCE_SCORE
        )

    def test_points_per_mentioned_area(self):
        student = Student(previous_research="Worked on machine learning models")
        professor = Professor(research_areas=["Machine Learning", "Robotics"])

        assert experience_relevance(student, professor) == 20.0

    def test_combines_experience_and_previous_research(self):
        student = Student(
            previous_research="Summer project in genetics",
            experience="Tutored students in neuroscience",
        )
        professor = Professor(research_areas=["Genetics", "Neuroscience"])

        assert experience_relevance(student, professor) == 40.0

    def test_capped_at_100(self):
        student = Student(
            experience="biology chemistry physics genetics neuroscience economics"
        )
        professor = Professor(
            research_areas=[
                "Biology",
                "Chemistry",
                "Physics",
                "Genetics",
                "Neuroscience",
                "Economics",
            ]
        )

        assert experience_relevance(student, professor) == 100.0

    def test_unrelated_experience_scores_zero(self):
        student = Student(experience="Barista")
        professor = Professor(research_areas=["Astrophysics"])

        assert experience_relevance(student, professor) == 0.0


class TestCareerAlignment:
    def test_mentioned_area_adds_points(self, ai_professor):
        student = Student(career_goals="Become a professor in artificial intelligence")

        assert career_alignment(student, ai_professor) == 25.0

    def test_empty_goals_score_zero(self, ai_professor):
        assert career_alignment(Student(), ai_professor) == 0.0

    def test_capped_at_100(self):
        student = Student(career_goals="genetics biology chemistry physics economics")
        professor = Professor(
            research_areas=["Genetics", "Biology", "Chemistry", "Physics", "Economics"]
        )

        assert career_alignment(student, professor) == 100.0


def test_malformed_profiles_stay_in_bounds():
    """Values pydantic would normally reject still score without raising."""
    student = Student.model_construct(
        research_interests=None,
        skills=["Python", 7],
        gpa="abc",
        year=None,
        availability=42,
        experience=None,
        previous_research=None,
        career_goals=None,
    )
    professor = Professor.model_construct(
        research_areas=None,
        required_skills="Python",
        preferred_student_level=None,
        department=None,
        mentorship_style=None,
    )

    for scorer in (
        research_alignment,
        skills_match,
        academic_level_compatibility,
        gpa_consideration,
        availability_fit,
        experience_relevance,
        career_alignment,
    ):
        assert 0.0 <= scorer(student, professor) <= 100.0
