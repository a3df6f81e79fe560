"""
Academic schemas for API.
"""

from datetime import date, datetime
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict

from utils.pagination import PaginationOut


class ProgressionOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    skillId: UUID = Field(validation_alias="skill_id")
    skillName: str
    currentLevel: int = Field(validation_alias="current_level")
    targetLevel: int = Field(validation_alias="target_level")
    year1Target: int | None = Field(validation_alias="year1_target", default=None)
    year2Target: int | None = Field(validation_alias="year2_target", default=None)
    year3Target: int | None = Field(validation_alias="year3_target", default=None)
    year4Target: int | None = Field(validation_alias="year4_target", default=None)
    isAcademicSkill: bool = Field(validation_alias="is_academic_skill", default=True)

    @staticmethod
    def resolve_skillName(obj):
        return obj.skill.name


class ProgramOut(Schema):
    """Academic programme output - camelCase for frontend."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    degree: str
    institution: str
    accreditation: str | None = None
    description: str | None = None
    mode: str | None = None
    startDate: date = Field(validation_alias="start_date")
    expectedEnd: date = Field(validation_alias="expected_end")
    totalYears: int = Field(validation_alias="total_years")
    currentYear: int = Field(validation_alias="current_year")
    status: str
    actualGraduationDate: date | None = Field(validation_alias="actual_graduation_date", default=None)
    dissertationStarted: bool = Field(validation_alias="dissertation_started", default=False)
    dissertationTitle: str | None = Field(validation_alias="dissertation_title", default=None)
    dissertationDeadline: date | None = Field(validation_alias="dissertation_deadline", default=None)
    dissertationSubmitted: bool = Field(validation_alias="dissertation_submitted", default=False)
    dissertationSubmissionDate: date | None = Field(validation_alias="dissertation_submission_date", default=None)
    progressions: list[ProgressionOut] = []
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")

    @staticmethod
    def resolve_progressions(obj):
        return list(obj.progressions.select_related("skill").order_by("skill__name"))


class ProgramIn(Schema):
    name: str | None = None
    degree: str | None = None
    institution: str | None = None
    accreditation: str | None = None
    description: str | None = None
    mode: str | None = None
    startDate: date | None = None
    expectedEnd: date | None = None
    totalYears: int | None = None
    currentYear: int | None = None
    status: str | None = None


class ProgramRefOut(Schema):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    degree: str
    institution: str


class AssessmentOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    type: str
    weight: int
    grade: str | None = None
    dueDate: date | None = Field(validation_alias="due_date", default=None)
    submitted: bool = False


class AssessmentIn(Schema):
    title: str
    type: str = "ESSAY"
    weight: int = 0
    grade: str | None = None
    dueDate: date | None = None
    submitted: bool = False


class CourseOut(Schema):
    """Course output - camelCase for frontend."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    programId: UUID = Field(validation_alias="program_id")
    program: ProgramRefOut
    code: str
    title: str
    description: str | None = None
    credits: int
    year: int
    semester: int
    status: str
    grade: str | None = None
    instructor: str | None = None
    startDate: date | None = Field(validation_alias="start_date", default=None)
    endDate: date | None = Field(validation_alias="end_date", default=None)
    objectives: list[str] = []
    topics: list[str] = []
    prerequisites: list[str] = []
    skillsDelivered: list[str] = Field(validation_alias="skills_delivered", default=[])
    isPublic: bool = Field(validation_alias="is_public", default=True)
    featured: bool = False
    sortOrder: int = Field(validation_alias="sort_order", default=0)
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")


class CourseDetailOut(CourseOut):
    assessments: list[AssessmentOut] = []

    @staticmethod
    def resolve_assessments(obj):
        return list(obj.assessments.all())


class CourseIn(Schema):
    programId: UUID | None = None
    code: str | None = None
    title: str | None = None
    description: str | None = None
    credits: int | None = None
    year: int | None = None
    semester: int | None = None
    status: str | None = None
    grade: str | None = None
    instructor: str | None = None
    startDate: date | None = None
    endDate: date | None = None
    objectives: list[str] | None = None
    topics: list[str] | None = None
    prerequisites: list[str] | None = None
    skillsDelivered: list[str] | None = None
    isPublic: bool | None = None
    featured: bool | None = None
    sortOrder: int | None = None


class CourseListOut(Schema):
    items: list[CourseOut]
    pagination: PaginationOut


class ProgressCourseOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    code: str
    title: str
    year: int
    semester: int
    status: str
    grade: str | None = None
    credits: int
    skillsDelivered: list[str] = Field(validation_alias="skills_delivered", default=[])


class ProgressSummaryOut(Schema):
    totalCourses: int
    completedCourses: int
    inProgressCourses: int
    upcomingCourses: int
    totalCredits: int
    completedCredits: int
    gpa: float
    completionRate: int


class CourseProgressOut(Schema):
    summary: ProgressSummaryOut
    courses: list[ProgressCourseOut]
    coursesByYear: dict[int, list[ProgressCourseOut]]


class CourseProgressIn(Schema):
    status: str | None = None
    grade: str | None = None


class SkillScoreOut(Schema):
    name: str
    level: float
    category: str
    courses: int


class SkillProgressionOut(Schema):
    programId: UUID | None = None
    currentYear: int
    yearBonus: float
    skills: list[SkillScoreOut]


class SyncOut(Schema):
    created: int
    updated: int
    skills: list[SkillScoreOut]


class AcademicSkillOut(Schema):
    """A skill progression flattened together with its skill."""

    id: UUID
    progressionId: UUID
    programId: UUID
    name: str
    category: str
    level: int
    currentLevel: int
    targetLevel: int
    year1Target: int | None = None
    year2Target: int | None = None
    year3Target: int | None = None
    year4Target: int | None = None
    icon: str | None = None
    color: str | None = None
    isActive: bool


class GraduationOut(ProgramOut):
    graduationStatus: str
    hasGraduated: bool
    isDissertationPhase: bool

    @staticmethod
    def resolve_graduationStatus(obj):
        return obj.graduation_status()

    @staticmethod
    def resolve_hasGraduated(obj):
        return obj.graduation_status() == "graduated"

    @staticmethod
    def resolve_isDissertationPhase(obj):
        return obj.dissertation_started


class GraduationIn(Schema):
    actualGraduationDate: date | None = None
    dissertationStarted: bool | None = None
    dissertationTitle: str | None = None
    dissertationDeadline: date | None = None
    dissertationSubmitted: bool | None = None
    dissertationSubmissionDate: date | None = None
