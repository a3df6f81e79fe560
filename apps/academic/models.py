"""
Academic progress models - programs, courses, assessments and skill progression.
"""

import uuid
from datetime import date

from django.db import models
from django.utils import timezone

from apps.skills.models import Skill


class ProgramStatus(models.TextChoices):
    ACTIVE = "ACTIVE", "Active"
    COMPLETED = "COMPLETED", "Completed"
    ON_HOLD = "ON_HOLD", "On hold"


class CourseStatus(models.TextChoices):
    UPCOMING = "UPCOMING", "Upcoming"
    IN_PROGRESS = "IN_PROGRESS", "In progress"
    COMPLETED = "COMPLETED", "Completed"
    DEFERRED = "DEFERRED", "Deferred"
    WITHDRAWN = "WITHDRAWN", "Withdrawn"


class AcademicProgram(models.Model):
    """A degree programme the site owner is enrolled in."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    degree = models.CharField(max_length=255)
    institution = models.CharField(max_length=255)
    accreditation = models.CharField(max_length=255, null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    mode = models.CharField(max_length=50, null=True, blank=True)
    start_date = models.DateField(db_column="startDate")
    expected_end = models.DateField(db_column="expectedEnd")
    total_years = models.IntegerField(default=3, db_column="totalYears")
    current_year = models.IntegerField(default=1, db_column="currentYear")
    status = models.CharField(max_length=20, choices=ProgramStatus.choices, default=ProgramStatus.ACTIVE)

    actual_graduation_date = models.DateField(null=True, blank=True, db_column="actualGraduationDate")
    dissertation_started = models.BooleanField(default=False, db_column="dissertationStarted")
    dissertation_title = models.CharField(max_length=500, null=True, blank=True, db_column="dissertationTitle")
    dissertation_deadline = models.DateField(null=True, blank=True, db_column="dissertationDeadline")
    dissertation_submitted = models.BooleanField(default=False, db_column="dissertationSubmitted")
    dissertation_submission_date = models.DateField(null=True, blank=True, db_column="dissertationSubmissionDate")

    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "academic_programs"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.degree} - {self.institution}"

    def graduation_status(self, today: date | None = None) -> str:
        """graduated, overdue or in_progress as of `today`."""
        today = today or timezone.localdate()
        if self.actual_graduation_date and self.actual_graduation_date <= today:
            return "graduated"
        if self.expected_end and today > self.expected_end:
            return "overdue"
        return "in_progress"


class Course(models.Model):
    """A single module taken within a programme."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    program = models.ForeignKey(
        AcademicProgram, on_delete=models.CASCADE, related_name="courses", db_column="programId"
    )
    code = models.CharField(max_length=50)
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    credits = models.IntegerField(default=0)
    year = models.IntegerField(default=1)
    semester = models.IntegerField(default=1)
    status = models.CharField(max_length=20, choices=CourseStatus.choices, default=CourseStatus.UPCOMING)
    grade = models.CharField(max_length=10, null=True, blank=True)
    instructor = models.CharField(max_length=255, null=True, blank=True)
    start_date = models.DateField(null=True, blank=True, db_column="startDate")
    end_date = models.DateField(null=True, blank=True, db_column="endDate")
    objectives = models.JSONField(default=list, blank=True)
    topics = models.JSONField(default=list, blank=True)
    prerequisites = models.JSONField(default=list, blank=True)
    skills_delivered = models.JSONField(default=list, blank=True, db_column="skillsDelivered")
    is_public = models.BooleanField(default=True, db_column="isPublic")
    featured = models.BooleanField(default=False)
    sort_order = models.IntegerField(default=0, db_column="sortOrder")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "courses"
        ordering = ["-year", "semester", "code"]

    def __str__(self) -> str:
        return f"{self.code} {self.title}"


class CourseAssessment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="assessments", db_column="courseId")
    title = models.CharField(max_length=255)
    type = models.CharField(max_length=50, default="ESSAY")
    weight = models.IntegerField(default=0)
    grade = models.CharField(max_length=10, null=True, blank=True)
    due_date = models.DateField(null=True, blank=True, db_column="dueDate")
    submitted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")

    class Meta:
        db_table = "course_assessments"
        ordering = ["due_date", "created_at"]


class SkillProgression(models.Model):
    """Current vs. target mastery of one skill within one programme."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    skill = models.ForeignKey(Skill, on_delete=models.CASCADE, related_name="progressions", db_column="skillId")
    program = models.ForeignKey(
        AcademicProgram, on_delete=models.CASCADE, related_name="progressions", db_column="programId"
    )
    current_level = models.IntegerField(default=0, db_column="currentLevel")
    target_level = models.IntegerField(default=90, db_column="targetLevel")
    year1_target = models.IntegerField(null=True, blank=True, db_column="year1Target")
    year2_target = models.IntegerField(null=True, blank=True, db_column="year2Target")
    year3_target = models.IntegerField(null=True, blank=True, db_column="year3Target")
    year4_target = models.IntegerField(null=True, blank=True, db_column="year4Target")
    is_academic_skill = models.BooleanField(default=True, db_column="isAcademicSkill")
    last_updated = models.DateTimeField(auto_now=True, db_column="lastUpdated")

    class Meta:
        db_table = "skill_progressions"
        constraints = [
            models.UniqueConstraint(fields=["skill", "program"], name="unique_skill_per_program"),
        ]
