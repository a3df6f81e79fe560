"""
Tests for skill-progression scoring.
"""

import pytest

from apps.academic.scoring import (
    BASE_POINTS,
    CourseRecord,
    categorize_skill,
    clamp_year,
    grade_multiplier,
    grade_points,
    score_skills,
    status_weight,
    weighted_gpa,
    year_bonus,
)


class TestWeights:
    @pytest.mark.parametrize(
        "status,expected",
        [("COMPLETED", 1.0), ("IN_PROGRESS", 0.5), ("UPCOMING", 0.2), ("DEFERRED", 0.2), ("WITHDRAWN", 0.0)],
    )
    def test_status_weight(self, status, expected):
        assert status_weight(status) == expected

    @pytest.mark.parametrize(
        "grade,expected",
        [("A", 1.2), ("A+", 1.2), ("b-", 1.1), ("C", 1.0), ("D+", 0.9), ("F", 1.0), (None, 1.0), ("", 1.0)],
    )
    def test_grade_multiplier_uses_letter_band(self, grade, expected):
        assert grade_multiplier(grade) == expected

    def test_year_bonus_is_capped(self):
        assert year_bonus(1) == pytest.approx(0.1)
        assert year_bonus(3) == pytest.approx(0.3)
        assert year_bonus(4) == pytest.approx(0.4)
        assert year_bonus(9) == pytest.approx(0.4)

    def test_clamp_year(self):
        assert clamp_year(None) == 1
        assert clamp_year(0) == 1
        assert clamp_year(7) == 4


class TestCategorize:
    def test_keywords(self):
        assert categorize_skill("Research Methods") == "Academic Skills"
        assert categorize_skill("International Law") == "International Relations"
        assert categorize_skill("Academic Writing") == "Communication Skills"
        assert categorize_skill("Data Interpretation") == "Analytical Skills"
        assert categorize_skill("Intercultural Awareness") == "Cultural & Language Skills"
        assert categorize_skill("Negotiation") == "Academic Skills"


class TestScoreSkills:
    def test_single_completed_course(self):
        scores = score_skills([CourseRecord(status="COMPLETED", grade="A", skills=["Policy Analysis"])], 1)

        assert len(scores) == 1
        # 15 * 1.0 * 1.2 = 18, then +10% for year one
        assert scores[0].level == pytest.approx(19.8)
        assert scores[0].courses == 1
        assert scores[0].category == "Academic Skills"

    def test_contributions_accumulate(self):
        courses = [
            CourseRecord(status="COMPLETED", skills=["Writing"]),
            CourseRecord(status="IN_PROGRESS", skills=["Writing"]),
        ]
        scores = score_skills(courses, 4)
        # (15 + 7.5) * 1.4
        assert scores[0].level == pytest.approx(31.5)
        assert scores[0].courses == 2

    def test_level_never_exceeds_100(self):
        courses = [CourseRecord(status="COMPLETED", grade="A", skills=["Critical Analysis"]) for _ in range(10)]
        scores = score_skills(courses, 4)
        assert scores[0].level == 100

    def test_empty_skill_lists_and_withdrawn_courses_contribute_nothing(self):
        courses = [
            CourseRecord(status="COMPLETED", skills=[]),
            CourseRecord(status="WITHDRAWN", skills=["Economics"]),
        ]
        assert score_skills(courses, 2) == []

    def test_names_merge_case_insensitively(self):
        courses = [
            CourseRecord(status="COMPLETED", skills=["Research Methods"]),
            CourseRecord(status="COMPLETED", skills=["  research methods "]),
        ]
        scores = score_skills(courses, 1)
        assert len(scores) == 1
        assert scores[0].name == "Research Methods"
        assert scores[0].courses == 2

    def test_duplicate_skill_within_one_course_counts_once(self):
        scores = score_skills([CourseRecord(status="COMPLETED", skills=["Law", "law"])], 1)
        assert scores[0].courses == 1
        assert scores[0].level == pytest.approx(BASE_POINTS * 1.1)

    def test_sorted_by_level_descending(self):
        courses = [
            CourseRecord(status="UPCOMING", skills=["Geopolitics"]),
            CourseRecord(status="COMPLETED", skills=["Diplomacy"]),
        ]
        assert [s.name for s in score_skills(courses, 1)] == ["Diplomacy", "Geopolitics"]


class TestGpa:
    @pytest.mark.parametrize(
        "grade,expected",
        [("A", 4.0), ("a-", 3.7), ("B+", 3.3), ("D-", 0.7), ("F", 0.0), ("Pass", 3.0), ("Z", 0.0), (None, 0.0)],
    )
    def test_grade_points(self, grade, expected):
        assert grade_points(grade) == expected

    def test_weighted_by_credits(self):
        # (4.0 * 30 + 3.0 * 15) / 45 = 3.666...
        assert weighted_gpa([("A", 30), ("B", 15)]) == 3.67

    def test_no_credits(self):
        assert weighted_gpa([]) == 0.0
        assert weighted_gpa([("A", 0)]) == 0.0
