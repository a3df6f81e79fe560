"""
Skill-progression scoring.

Every course lists the skills it delivers. Each course adds BASE_POINTS to
each of its skills, scaled by how far the course has got (status weight) and
how well it went (grade multiplier). Totals are clamped to 0-100, then grown
by a bonus for the current academic year and clamped again.

Pure functions only; callers load courses and persist results.
"""

from dataclasses import dataclass, field
from typing import Iterable

BASE_POINTS = 15
MAX_LEVEL = 100

STATUS_WEIGHTS = {
    "COMPLETED": 1.0,
    "IN_PROGRESS": 0.5,
    "UPCOMING": 0.2,
    "DEFERRED": 0.2,
    "WITHDRAWN": 0.0,
}

GRADE_MULTIPLIERS = {
    "A": 1.2,
    "B": 1.1,
    "C": 1.0,
    "D": 0.9,
}

# Four-point scale used for the progress summary GPA
GRADE_POINTS = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "D-": 0.7,
    "F": 0.0,
    "PASS": 3.0,
    "FAIL": 0.0,
}

YEAR_BONUS_STEP = 0.1
YEAR_BONUS_CAP = 0.4
MIN_YEAR = 1
MAX_YEAR = 4

# First matching group wins
SKILL_CATEGORIES = [
    ("Academic Skills", ("research", "analysis", "critical")),
    ("International Relations", ("international", "global", "political", "diplomatic", "law", "security")),
    ("Communication Skills", ("writing", "communication", "presentation")),
    ("Analytical Skills", ("economic", "financial", "quantitative", "data")),
    ("Cultural & Language Skills", ("language", "cultural", "intercultural")),
]
DEFAULT_CATEGORY = "Academic Skills"


@dataclass
class CourseRecord:
    """The parts of a course that feed the score."""

    status: str
    grade: str | None = None
    skills: list[str] = field(default_factory=list)


@dataclass
class SkillScore:
    name: str
    level: float
    category: str
    courses: int


def status_weight(status: str) -> float:
    # Unknown statuses count as exposure only
    return STATUS_WEIGHTS.get((status or "").upper(), 0.2)


def grade_multiplier(grade: str | None) -> float:
    """Multiplier keyed on the grade's letter band: "A+", "A-" and "a" are all A."""
    grade = (grade or "").strip().upper()
    if not grade:
        return 1.0
    return GRADE_MULTIPLIERS.get(grade[0], 1.0)


def clamp_year(year: int | None) -> int:
    return max(MIN_YEAR, min(year or MIN_YEAR, MAX_YEAR))


def year_bonus(year: int | None) -> float:
    return min(YEAR_BONUS_STEP * clamp_year(year), YEAR_BONUS_CAP)


def categorize_skill(name: str) -> str:
    lowered = name.lower()
    for category, keywords in SKILL_CATEGORIES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def course_points(course: CourseRecord) -> float:
    """Points one course adds to each skill it delivers."""
    return BASE_POINTS * status_weight(course.status) * grade_multiplier(course.grade)


def score_skills(courses: Iterable[CourseRecord], current_year: int | None = None) -> list[SkillScore]:
    """
    Score every skill delivered by `courses`.

    Skill names are trimmed and merged case-insensitively; the first spelling
    seen becomes the display name. Courses contributing nothing (no skills,
    or a zero status weight) are ignored. Results are sorted by level, highest
    first, then by name.
    """
    totals: dict[str, float] = {}
    names: dict[str, str] = {}
    counts: dict[str, int] = {}

    for course in courses:
        points = course_points(course)
        if points <= 0 or not course.skills:
            continue

        seen_in_course: set[str] = set()
        for raw_name in course.skills:
            name = (raw_name or "").strip()
            if not name:
                continue
            key = name.lower()
            if key in seen_in_course:
                continue
            seen_in_course.add(key)

            names.setdefault(key, name)
            counts[key] = counts.get(key, 0) + 1
            totals[key] = min(MAX_LEVEL, totals.get(key, 0.0) + points)

    multiplier = 1 + year_bonus(current_year)
    scores = [
        SkillScore(
            name=names[key],
            level=round(min(MAX_LEVEL, max(0.0, total) * multiplier), 1),
            category=categorize_skill(names[key]),
            courses=counts[key],
        )
        for key, total in totals.items()
    ]
    scores.sort(key=lambda s: (-s.level, s.name.lower()))
    return scores


def grade_points(grade: str | None) -> float:
    """Points on the four-point scale; unrecognised grades score zero."""
    return GRADE_POINTS.get((grade or "").strip().upper(), 0.0)


def weighted_gpa(graded: Iterable[tuple[str, int]]) -> float:
    """Credit-weighted GPA over (grade, credits) pairs, rounded to two places."""
    points = 0.0
    credits = 0
    for grade, course_credits in graded:
        points += grade_points(grade) * course_credits
        credits += course_credits
    if credits <= 0:
        return 0.0
    return round(points / credits, 2)
