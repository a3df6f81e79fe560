"""
Academic API endpoints - programmes, courses, assessments and skill progression.
"""

import logging
from dataclasses import asdict

from django.db import transaction
from django.db.models import Count, Q, Sum
from django.http import HttpRequest
from django.utils import timezone
from ninja import Router
from ninja.errors import HttpError

from apps.skills.models import Skill, SkillCategory
from utils.auth import AuthBearer, get_optional_user, is_admin, require_admin
from utils.identifiers import get_by_id
from utils.pagination import paginate
from .models import AcademicProgram, Course, CourseAssessment, CourseStatus, ProgramStatus, SkillProgression
from .schemas import (
    AcademicSkillOut,
    AssessmentIn,
    AssessmentOut,
    CourseDetailOut,
    CourseIn,
    CourseListOut,
    CourseProgressIn,
    CourseProgressOut,
    GraduationIn,
    GraduationOut,
    ProgramIn,
    ProgramOut,
    SkillProgressionOut,
    SyncOut,
)
from .scoring import CourseRecord, clamp_year, score_skills, weighted_gpa, year_bonus

logger = logging.getLogger(__name__)

router = Router()

PROGRAM_FIELDS = {
    "name": "name",
    "degree": "degree",
    "institution": "institution",
    "accreditation": "accreditation",
    "description": "description",
    "mode": "mode",
    "startDate": "start_date",
    "expectedEnd": "expected_end",
    "totalYears": "total_years",
    "currentYear": "current_year",
    "status": "status",
}

COURSE_FIELDS = {
    "code": "code",
    "title": "title",
    "description": "description",
    "credits": "credits",
    "year": "year",
    "semester": "semester",
    "status": "status",
    "grade": "grade",
    "instructor": "instructor",
    "startDate": "start_date",
    "endDate": "end_date",
    "objectives": "objectives",
    "topics": "topics",
    "prerequisites": "prerequisites",
    "skillsDelivered": "skills_delivered",
    "isPublic": "is_public",
    "featured": "featured",
    "sortOrder": "sort_order",
}


def _apply(obj, data, fields: dict[str, str]) -> None:
    """Copy provided fields onto `obj`; explicit nulls only clear nullable columns."""
    for key, value in data.model_dump(exclude_unset=True).items():
        if key not in fields:
            continue
        if value is None and not obj._meta.get_field(fields[key]).null:
            continue
        setattr(obj, fields[key], value)


def _default_program() -> AcademicProgram | None:
    return AcademicProgram.objects.order_by("created_at").first()


# ============== Programs ==============


@router.get("/programs", response=list[ProgramOut])
def list_programs(request: HttpRequest):
    """List academic programmes with their skill progressions."""
    return list(AcademicProgram.objects.prefetch_related("progressions__skill"))


@router.post("/programs", response={201: ProgramOut}, auth=AuthBearer())
def create_program(request: HttpRequest, data: ProgramIn):
    """Create an academic programme (admin only)."""
    require_admin(request)

    if not all([data.name, data.degree, data.institution, data.startDate, data.expectedEnd]):
        raise HttpError(400, "Name, degree, institution, start date and expected end are required")
    if data.status and data.status not in ProgramStatus.values:
        raise HttpError(400, "Invalid program status")

    program = AcademicProgram()
    _apply(program, data, PROGRAM_FIELDS)
    program.save()
    return 201, program


@router.get("/programs/{program_id}", response=ProgramOut)
def get_program(request: HttpRequest, program_id: str):
    return get_by_id(AcademicProgram.objects.all(), program_id, not_found="Academic program not found")


@router.put("/programs/{program_id}", response=ProgramOut, auth=AuthBearer())
def update_program(request: HttpRequest, program_id: str, data: ProgramIn):
    """Update an academic programme (admin only)."""
    require_admin(request)
    program = get_by_id(AcademicProgram.objects.all(), program_id, not_found="Academic program not found")

    if data.status and data.status not in ProgramStatus.values:
        raise HttpError(400, "Invalid program status")

    _apply(program, data, PROGRAM_FIELDS)
    program.save()
    return program


@router.delete("/programs/{program_id}", auth=AuthBearer())
def delete_program(request: HttpRequest, program_id: str):
    """Delete a programme together with its courses (admin only)."""
    require_admin(request)
    program = get_by_id(AcademicProgram.objects.all(), program_id, not_found="Academic program not found")
    program.delete()
    return {"message": "Academic program deleted"}


# ============== Courses ==============


@router.get("/courses", response=CourseListOut)
def list_courses(
    request: HttpRequest,
    page: int = 1,
    limit: int = 10,
    status: str | None = None,
    year: int | None = None,
    programId: str | None = None,
    search: str | None = None,
):
    """List courses, paginated. Private courses are admin-only."""
    queryset = Course.objects.select_related("program")

    if not is_admin(get_optional_user(request)):
        queryset = queryset.filter(is_public=True)
    if status:
        queryset = queryset.filter(status=status.upper())
    if year is not None:
        queryset = queryset.filter(year=year)
    if programId:
        queryset = queryset.filter(program_id=get_by_id(AcademicProgram.objects.all(), programId, not_found="Academic program not found").id)
    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) | Q(code__icontains=search) | Q(description__icontains=search)
        )

    items, pagination = paginate(queryset, page, limit)
    return {"items": items, "pagination": pagination}


@router.post("/courses", response={201: CourseDetailOut}, auth=AuthBearer())
def create_course(request: HttpRequest, data: CourseIn):
    """Create a course (admin only)."""
    require_admin(request)

    if not data.programId or not data.code or not data.title:
        raise HttpError(400, "Program, code and title are required")
    if data.status and data.status not in CourseStatus.values:
        raise HttpError(400, "Invalid course status")

    program = get_by_id(AcademicProgram.objects.all(), data.programId, not_found="Academic program not found")

    course = Course(program=program)
    _apply(course, data, COURSE_FIELDS)
    course.save()
    return 201, course


@router.get("/courses/{course_id}", response=CourseDetailOut)
def get_course(request: HttpRequest, course_id: str):
    course = get_by_id(Course.objects.select_related("program"), course_id, not_found="Course not found")
    if not course.is_public and not is_admin(get_optional_user(request)):
        raise HttpError(404, "Course not found")
    return course


@router.put("/courses/{course_id}", response=CourseDetailOut, auth=AuthBearer())
def update_course(request: HttpRequest, course_id: str, data: CourseIn):
    """Update a course (admin only)."""
    require_admin(request)
    course = get_by_id(Course.objects.select_related("program"), course_id, not_found="Course not found")

    if data.status and data.status not in CourseStatus.values:
        raise HttpError(400, "Invalid course status")
    if data.programId:
        course.program = get_by_id(AcademicProgram.objects.all(), data.programId, not_found="Academic program not found")

    _apply(course, data, COURSE_FIELDS)
    course.save()
    return course


@router.delete("/courses/{course_id}", auth=AuthBearer())
def delete_course(request: HttpRequest, course_id: str):
    require_admin(request)
    get_by_id(Course.objects.all(), course_id, not_found="Course not found").delete()
    return {"message": "Course deleted"}


@router.post("/courses/{course_id}/assessments", response={201: AssessmentOut}, auth=AuthBearer())
def create_assessment(request: HttpRequest, course_id: str, data: AssessmentIn):
    """Attach an assessment to a course (admin only)."""
    require_admin(request)
    course = get_by_id(Course.objects.all(), course_id, not_found="Course not found")

    if not data.title.strip():
        raise HttpError(400, "Title is required")
    if not 0 <= data.weight <= 100:
        raise HttpError(400, "Weight must be between 0 and 100")

    assessment = CourseAssessment.objects.create(
        course=course,
        title=data.title.strip(),
        type=data.type,
        weight=data.weight,
        grade=data.grade,
        due_date=data.dueDate,
        submitted=data.submitted,
    )
    return 201, assessment



@router.put("/courses/{course_id}/progress", response=CourseDetailOut, auth=AuthBearer())
def update_course_progress(request: HttpRequest, course_id: str, data: CourseProgressIn):
    """Move a course along: set its status and/or grade (admin only)."""
    require_admin(request)
    course = get_by_id(Course.objects.select_related("program"), course_id, not_found="Course not found")

    if data.status and data.status not in CourseStatus.values:
        raise HttpError(400, "Invalid course status")

    if data.status:
        course.status = data.status
    if data.grade:
        course.grade = data.grade.strip()
    course.save()

    logger.info(f"[Academic] Updated progress for course {course.code}: {course.status}")
    return course


@router.get("/progress", response=CourseProgressOut)
def get_course_progress(request: HttpRequest, programId: str | None = None):
    """
    Progress summary across courses: status counts, credits, GPA and a
    per-year grouping.

    GPA is credit-weighted over completed courses that carry a grade.
    Private courses are left out for non-admins.
    """
    courses = Course.objects.order_by("year", "semester", "code")

    if not is_admin(get_optional_user(request)):
        courses = courses.filter(is_public=True)
    if programId:
        program = get_by_id(AcademicProgram.objects.all(), programId, not_found="Academic program not found")
        courses = courses.filter(program=program)

    completed = Q(status=CourseStatus.COMPLETED)
    totals = courses.aggregate(
        total=Count("id"),
        completed=Count("id", filter=completed),
        in_progress=Count("id", filter=Q(status=CourseStatus.IN_PROGRESS)),
        upcoming=Count("id", filter=Q(status=CourseStatus.UPCOMING)),
        credits=Sum("credits"),
        completed_credits=Sum("credits", filter=completed),
    )

    graded = courses.filter(completed, grade__isnull=False).exclude(grade="").values_list("grade", "credits")

    items = list(courses)
    by_year: dict[int, list[Course]] = {}
    for course in items:
        by_year.setdefault(course.year, []).append(course)

    total = totals["total"]
    return {
        "summary": {
            "totalCourses": total,
            "completedCourses": totals["completed"],
            "inProgressCourses": totals["in_progress"],
            "upcomingCourses": totals["upcoming"],
            "totalCredits": totals["credits"] or 0,
            "completedCredits": totals["completed_credits"] or 0,
            "gpa": weighted_gpa(graded),
            "completionRate": round(totals["completed"] * 100 / total) if total else 0,
        },
        "courses": items,
        "coursesByYear": by_year,
    }


# ============== Skill progression ==============


def _score_program(program_id: str | None):
    """Score every skill delivered by a programme's courses."""
    if program_id:
        program = get_by_id(AcademicProgram.objects.all(), program_id, not_found="Academic program not found")
    else:
        program = _default_program()

    courses = Course.objects.all()
    if program is not None:
        courses = courses.filter(program=program)

    records = [
        CourseRecord(status=c.status, grade=c.grade, skills=c.skills_delivered or [])
        for c in courses.only("status", "grade", "skills_delivered")
    ]
    current_year = clamp_year(program.current_year if program else None)
    return program, current_year, score_skills(records, current_year)


@router.get("/skill-progression", response=SkillProgressionOut)
def get_skill_progression(request: HttpRequest, programId: str | None = None):
    """Scored skills for a programme (the earliest one when not given)."""
    program, current_year, scores = _score_program(programId)
    return {
        "programId": program.id if program else None,
        "currentYear": current_year,
        "yearBonus": year_bonus(current_year),
        "skills": [asdict(s) for s in scores],
    }


@router.post("/skill-progression/sync", response=SyncOut, auth=AuthBearer())
def sync_skill_progression(request: HttpRequest, programId: str | None = None):
    """Write computed scores into the programme's skill progressions (admin only)."""
    require_admin(request)

    program, _, scores = _score_program(programId)
    if program is None:
        raise HttpError(404, "Academic program not found")

    created = updated = 0
    with transaction.atomic():
        for score in scores:
            skill = Skill.objects.filter(name__iexact=score.name).first()
            if skill is None:
                skill = Skill.objects.create(name=score.name, category=SkillCategory.ACADEMIC, level=round(score.level))

            _, was_created = SkillProgression.objects.update_or_create(
                skill=skill,
                program=program,
                defaults={"current_level": round(score.level), "is_academic_skill": True},
            )
            if was_created:
                created += 1
            else:
                updated += 1

    logger.info(f"[Academic] Synced {len(scores)} skills for program {program.id} ({created} new)")
    return {"created": created, "updated": updated, "skills": [asdict(s) for s in scores]}


@router.get("/skills", response=list[AcademicSkillOut])
def list_academic_skills(request: HttpRequest):
    """Academic skill progressions flattened with their skills."""
    progressions = (
        SkillProgression.objects.filter(is_academic_skill=True).select_related("skill").order_by("skill__name")
    )
    return [
        {
            "id": p.skill.id,
            "progressionId": p.id,
            "programId": p.program_id,
            "name": p.skill.name,
            "category": p.skill.category,
            "level": p.skill.level,
            "currentLevel": p.current_level,
            "targetLevel": p.target_level,
            "year1Target": p.year1_target,
            "year2Target": p.year2_target,
            "year3Target": p.year3_target,
            "year4Target": p.year4_target,
            "icon": p.skill.icon,
            "color": p.skill.color,
            "isActive": p.skill.is_active,
        }
        for p in progressions
    ]


# ============== Graduation ==============


@router.get("/graduation", response=GraduationOut)
def get_graduation(request: HttpRequest):
    """Graduation tracking for the main programme."""
    program = _default_program()
    if program is None:
        raise HttpError(404, "Academic program not found")
    return program


@router.put("/graduation", response=GraduationOut, auth=AuthBearer())
def update_graduation(request: HttpRequest, data: GraduationIn):
    """Update graduation and dissertation tracking (admin only)."""
    require_admin(request)

    program = _default_program()
    if program is None:
        raise HttpError(404, "Academic program not found")

    values = data.model_dump(exclude_unset=True)
    if "actualGraduationDate" in values:
        program.actual_graduation_date = values["actualGraduationDate"]
        if program.actual_graduation_date and program.actual_graduation_date <= timezone.localdate():
            program.status = ProgramStatus.COMPLETED
    if values.get("dissertationStarted") is not None:
        program.dissertation_started = values["dissertationStarted"]
    if "dissertationTitle" in values:
        program.dissertation_title = values["dissertationTitle"]
    if "dissertationDeadline" in values:
        program.dissertation_deadline = values["dissertationDeadline"]
    if values.get("dissertationSubmitted") is not None:
        program.dissertation_submitted = values["dissertationSubmitted"]
    if "dissertationSubmissionDate" in values:
        program.dissertation_submission_date = values["dissertationSubmissionDate"]

    program.save()
    return program
