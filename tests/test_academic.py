"""
Tests for Academic API endpoints.
"""

from datetime import date, timedelta

import pytest

from apps.academic.models import AcademicProgram, Course, ProgramStatus, SkillProgression
from apps.skills.models import Skill


@pytest.fixture
def program(db):
    return AcademicProgram.objects.create(
        name="International Relations",
        degree="BA",
        institution="Open University",
        start_date=date(2024, 9, 1),
        expected_end=date.today() + timedelta(days=700),
        current_year=2,
    )


@pytest.fixture
def make_course(program):
    def _make(**overrides):
        values = {
            "program": program,
            "code": "IR101",
            "title": "Foundations",
            "status": "COMPLETED",
            "skills_delivered": ["Research Methods"],
        }
        values.update(overrides)
        return Course.objects.create(**values)

    return _make


@pytest.mark.django_db
class TestPrograms:
    def test_create_program(self, api_client, auth_headers):
        response = api_client.post(
            "/academic/programs",
            json={
                "name": "Politics",
                "degree": "MA",
                "institution": "LSE",
                "startDate": "2025-09-01",
                "expectedEnd": "2026-09-01",
            },
            headers=auth_headers,
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "ACTIVE"
        assert data["progressions"] == []

    def test_create_program_requires_fields(self, api_client, auth_headers):
        response = api_client.post("/academic/programs", json={"name": "Politics"}, headers=auth_headers)
        assert response.status_code == 400

    def test_list_programs_public(self, api_client, program):
        response = api_client.get("/academic/programs")
        assert response.status_code == 200
        assert [p["name"] for p in response.json()["data"]] == ["International Relations"]

    def test_update_program(self, api_client, auth_headers, program):
        response = api_client.put(
            f"/academic/programs/{program.id}", json={"currentYear": 3}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["data"]["currentYear"] == 3

    def test_delete_program_cascades(self, api_client, auth_headers, program, make_course):
        make_course()
        response = api_client.delete(f"/academic/programs/{program.id}", headers=auth_headers)
        assert response.status_code == 200
        assert Course.objects.count() == 0


@pytest.mark.django_db
class TestCourses:
    def test_private_courses_hidden_from_public(self, api_client, make_course):
        make_course(code="IR101")
        hidden = make_course(code="IR900", is_public=False)

        response = api_client.get("/academic/courses")
        data = response.json()["data"]
        assert [c["code"] for c in data["items"]] == ["IR101"]
        assert data["pagination"]["totalCount"] == 1

        assert api_client.get(f"/academic/courses/{hidden.id}").status_code == 404

    def test_admin_sees_private_courses(self, api_client, auth_headers, make_course):
        make_course(code="IR101")
        make_course(code="IR900", is_public=False)

        response = api_client.get("/academic/courses", headers=auth_headers)
        assert response.json()["data"]["pagination"]["totalCount"] == 2

    def test_filters(self, api_client, make_course):
        make_course(code="IR101", year=1, status="COMPLETED")
        make_course(code="IR201", title="Diplomacy", year=2, status="IN_PROGRESS")

        by_status = api_client.get("/academic/courses?status=in_progress").json()["data"]["items"]
        assert [c["code"] for c in by_status] == ["IR201"]

        by_year = api_client.get("/academic/courses?year=1").json()["data"]["items"]
        assert [c["code"] for c in by_year] == ["IR101"]

        by_search = api_client.get("/academic/courses?search=diplo").json()["data"]["items"]
        assert [c["code"] for c in by_search] == ["IR201"]

    def test_last_page_of_paginated_courses(self, api_client, make_course):
        for i in range(1, 24):
            make_course(code=f"C{i:02d}")

        data = api_client.get("/academic/courses?page=3&limit=10").json()["data"]
        assert [c["code"] for c in data["items"]] == ["C21", "C22", "C23"]
        assert data["pagination"] == {
            "page": 3,
            "limit": 10,
            "totalCount": 23,
            "totalPages": 3,
            "hasNextPage": False,
            "hasPreviousPage": True,
        }

    def test_create_course(self, api_client, auth_headers, program):
        response = api_client.post(
            "/academic/courses",
            json={
                "programId": str(program.id),
                "code": "IR102",
                "title": "World History",
                "skillsDelivered": ["Historical Analysis"],
            },
            headers=auth_headers,
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "UPCOMING"
        assert data["skillsDelivered"] == ["Historical Analysis"]
        assert data["assessments"] == []

    def test_create_course_rejects_bad_status(self, api_client, auth_headers, program):
        response = api_client.post(
            "/academic/courses",
            json={"programId": str(program.id), "code": "X", "title": "X", "status": "PASSED"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_add_assessment(self, api_client, auth_headers, make_course):
        course = make_course()
        response = api_client.post(
            f"/academic/courses/{course.id}/assessments",
            json={"title": "Essay 1", "weight": 40},
            headers=auth_headers,
        )
        assert response.status_code == 201

        detail = api_client.get(f"/academic/courses/{course.id}").json()["data"]
        assert [a["title"] for a in detail["assessments"]] == ["Essay 1"]

    def test_assessment_weight_bounds(self, api_client, auth_headers, make_course):
        course = make_course()
        response = api_client.post(
            f"/academic/courses/{course.id}/assessments",
            json={"title": "Exam", "weight": 150},
            headers=auth_headers,
        )
        assert response.status_code == 400


@pytest.mark.django_db
class TestCourseProgress:
    def test_summary(self, api_client, make_course):
        make_course(code="IR101", year=1, credits=30, grade="A")
        make_course(code="IR102", year=1, credits=15, grade="B")
        make_course(code="IR103", year=1, credits=15, status="COMPLETED")
        make_course(code="IR201", year=2, credits=30, status="IN_PROGRESS", grade="F")
        make_course(code="IR301", year=3, credits=30, status="UPCOMING")
        make_course(code="IR900", year=3, credits=60, is_public=False)

        response = api_client.get("/academic/progress")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["summary"] == {
            "totalCourses": 5,
            "completedCourses": 3,
            "inProgressCourses": 1,
            "upcomingCourses": 1,
            "totalCredits": 120,
            "completedCredits": 60,
            "gpa": 3.67,
            "completionRate": 60,
        }
        assert [c["code"] for c in data["courses"]] == ["IR101", "IR102", "IR103", "IR201", "IR301"]
        assert [c["code"] for c in data["coursesByYear"]["1"]] == ["IR101", "IR102", "IR103"]
        assert set(data["coursesByYear"]) == {"1", "2", "3"}

    def test_admin_counts_private_courses(self, api_client, auth_headers, make_course):
        make_course(code="IR101")
        make_course(code="IR900", is_public=False)

        data = api_client.get("/academic/progress", headers=auth_headers).json()["data"]
        assert data["summary"]["totalCourses"] == 2

    def test_empty(self, api_client):
        summary = api_client.get("/academic/progress").json()["data"]["summary"]
        assert summary["totalCourses"] == 0
        assert summary["gpa"] == 0.0
        assert summary["completionRate"] == 0

    def test_filter_by_program(self, api_client, program, make_course):
        other = AcademicProgram.objects.create(
            name="History", degree="BA", institution="Open University",
            start_date=date(2023, 9, 1), expected_end=date(2026, 6, 30),
        )
        make_course(code="IR101")
        make_course(program=other, code="HI101")

        data = api_client.get(f"/academic/progress?programId={other.id}").json()["data"]
        assert [c["code"] for c in data["courses"]] == ["HI101"]

    def test_update_progress(self, api_client, auth_headers, make_course):
        course = make_course(status="IN_PROGRESS")

        response = api_client.put(
            f"/academic/courses/{course.id}/progress",
            json={"status": "COMPLETED", "grade": "A-"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        course.refresh_from_db()
        assert course.status == "COMPLETED"
        assert course.grade == "A-"

    def test_update_progress_keeps_grade_when_omitted(self, api_client, auth_headers, make_course):
        course = make_course(grade="B")

        api_client.put(f"/academic/courses/{course.id}/progress", json={"status": "WITHDRAWN"}, headers=auth_headers)
        course.refresh_from_db()
        assert course.status == "WITHDRAWN"
        assert course.grade == "B"

    def test_update_progress_rejects_bad_status(self, api_client, auth_headers, make_course):
        course = make_course()
        response = api_client.put(
            f"/academic/courses/{course.id}/progress", json={"status": "PAUSED"}, headers=auth_headers
        )
        assert response.status_code == 400

    def test_update_progress_requires_admin(self, api_client, user_auth_headers, make_course):
        course = make_course()
        response = api_client.put(
            f"/academic/courses/{course.id}/progress", json={"status": "COMPLETED"}, headers=user_auth_headers
        )
        assert response.status_code == 403


@pytest.mark.django_db
class TestSkillProgression:
    def test_scores_program_courses(self, api_client, program, make_course):
        make_course(code="IR101", grade="A", skills_delivered=["Research Methods"])
        make_course(code="IR102", status="WITHDRAWN", skills_delivered=["Economics"])

        response = api_client.get(f"/academic/skill-progression?programId={program.id}")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["currentYear"] == 2
        assert data["yearBonus"] == pytest.approx(0.2)
        assert [s["name"] for s in data["skills"]] == ["Research Methods"]
        # 15 * 1.2 * 1.2
        assert data["skills"][0]["level"] == pytest.approx(21.6)

    def test_defaults_to_first_program(self, api_client, program, make_course):
        make_course()
        data = api_client.get("/academic/skill-progression").json()["data"]
        assert data["programId"] == str(program.id)

    def test_sync_creates_then_updates(self, api_client, auth_headers, program, make_course):
        make_course(skills_delivered=["Research Methods", "Policy Analysis"])
        Skill.objects.create(name="research methods", category="ACADEMIC", level=10)

        first = api_client.post(
            f"/academic/skill-progression/sync?programId={program.id}", headers=auth_headers
        ).json()["data"]
        assert first["created"] == 2
        assert first["updated"] == 0
        assert Skill.objects.filter(name__iexact="research methods").count() == 1
        assert SkillProgression.objects.filter(program=program).count() == 2

        second = api_client.post(
            f"/academic/skill-progression/sync?programId={program.id}", headers=auth_headers
        ).json()["data"]
        assert second["created"] == 0
        assert second["updated"] == 2

        skills = api_client.get("/academic/skills").json()["data"]
        assert sorted(s["name"] for s in skills) == ["Policy Analysis", "research methods"]

    def test_sync_requires_admin(self, api_client, user_auth_headers, program):
        response = api_client.post("/academic/skill-progression/sync", headers=user_auth_headers)
        assert response.status_code == 403


@pytest.mark.django_db
class TestGraduation:
    def test_status_in_progress(self, api_client, program):
        data = api_client.get("/academic/graduation").json()["data"]
        assert data["graduationStatus"] == "in_progress"
        assert data["hasGraduated"] is False

    def test_overdue(self):
        program = AcademicProgram(
            start_date=date(2020, 1, 1), expected_end=date(2023, 1, 1)
        )
        assert program.graduation_status(today=date(2024, 1, 1)) == "overdue"

    def test_recording_graduation_completes_program(self, api_client, auth_headers, program):
        yesterday = (date.today() - timedelta(days=1)).isoformat()
        response = api_client.put(
            "/academic/graduation",
            json={"actualGraduationDate": yesterday, "dissertationSubmitted": True},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["graduationStatus"] == "graduated"
        assert data["dissertationSubmitted"] is True

        program.refresh_from_db()
        assert program.status == ProgramStatus.COMPLETED

    def test_no_program(self, api_client):
        assert api_client.get("/academic/graduation").status_code == 404
