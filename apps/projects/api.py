"""
Projects API endpoints.
"""

from django.db import transaction
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from utils.auth import AuthBearer, get_optional_user, is_admin, require_admin
from utils.identifiers import resolve_identifier
from utils.text import slugify
from .models import DemoCategory, Project, ProjectCategory, ProjectStatus
from .schemas import DemosOut, ProjectIn, ProjectOut

router = Router()

# camelCase input field -> model field
FIELD_MAP = {
    "title": "title",
    "slug": "slug",
    "description": "description",
    "shortDesc": "short_desc",
    "image": "image",
    "technologies": "technologies",
    "highlights": "highlights",
    "featured": "featured",
    "flagship": "flagship",
    "isActive": "is_active",
    "isDemo": "is_demo",
    "demoCategory": "demo_category",
    "status": "status",
    "category": "category",
    "liveUrl": "live_url",
    "githubUrl": "github_url",
    "demoUrl": "demo_url",
    "detailedDescription": "detailed_description",
    "challenges": "challenges",
    "solutions": "solutions",
    "results": "results",
    "clientName": "client_name",
    "projectDuration": "project_duration",
    "teamSize": "team_size",
    "myRole": "my_role",
    "sortOrder": "sort_order",
}


def _validate_choices(values: dict) -> None:
    if values.get("status") is not None and values["status"] not in ProjectStatus.values:
        raise HttpError(400, f"Invalid status. Use one of: {', '.join(ProjectStatus.values)}")
    if values.get("category") is not None and values["category"] not in ProjectCategory.values:
        raise HttpError(400, f"Invalid category. Use one of: {', '.join(ProjectCategory.values)}")
    if values.get("demo_category") is not None and values["demo_category"] not in DemoCategory.values:
        raise HttpError(400, f"Invalid demo category. Use one of: {', '.join(DemoCategory.values)}")


def _model_values(data: ProjectIn) -> dict:
    provided = data.model_dump(exclude_unset=True)
    return {FIELD_MAP[key]: value for key, value in provided.items() if key in FIELD_MAP}


def _slug_taken(slug: str, exclude_id=None) -> bool:
    queryset = Project.objects.filter(slug=slug)
    if exclude_id is not None:
        queryset = queryset.exclude(id=exclude_id)
    return queryset.exists()


@router.get("/", response=list[ProjectOut])
def list_projects(
    request: HttpRequest,
    featured: bool | None = None,
    flagship: bool | None = None,
    category: str | None = None,
    status: str | None = None,
):
    """List projects. Inactive projects are only visible to admins."""
    queryset = Project.objects.all()

    if not is_admin(get_optional_user(request)):
        queryset = queryset.filter(is_active=True)
    if featured is not None:
        queryset = queryset.filter(featured=featured)
    if flagship is not None:
        queryset = queryset.filter(flagship=flagship)
    if category:
        queryset = queryset.filter(category=category)
    if status:
        queryset = queryset.filter(status=status)

    return list(queryset)


@router.get("/demos", response=DemosOut)
def list_demos(request: HttpRequest):
    """Active demo projects grouped by showcase category."""
    demos = Project.objects.filter(is_active=True, is_demo=True).order_by("sort_order", "-created_at")

    grouped: dict[str, list[Project]] = {choice: [] for choice in DemoCategory.values}
    for project in demos:
        if project.demo_category in grouped:
            grouped[project.demo_category].append(project)

    return grouped


@router.get("/{identifier}", response=ProjectOut)
def get_project(request: HttpRequest, identifier: str):
    """Get a project by id or slug."""
    return resolve_identifier(
        Project.objects.all(),
        identifier,
        public_filters={"is_active": True},
        is_admin=is_admin(get_optional_user(request)),
        not_found="Project not found",
    )


@router.post("/", response={201: ProjectOut}, auth=AuthBearer())
def create_project(request: HttpRequest, data: ProjectIn):
    """Create a new project (admin only)."""
    require_admin(request)

    values = _model_values(data)
    if not values.get("title") or not values.get("description"):
        raise HttpError(400, "Title and description are required")

    values["slug"] = slugify(values.get("slug") or values["title"])
    if not values["slug"]:
        raise HttpError(400, "Slug could not be derived from title")
    _validate_choices(values)

    if _slug_taken(values["slug"]):
        raise HttpError(409, "Project with this slug already exists")

    # Unique constraint still guards concurrent creates; the handler maps it to 409
    with transaction.atomic():
        project = Project.objects.create(**{k: v for k, v in values.items() if v is not None})

    return 201, project


@router.api_operation(["PUT", "PATCH"], "/{identifier}", response=ProjectOut, auth=AuthBearer())
def update_project(request: HttpRequest, identifier: str, data: ProjectIn):
    """Update a project by id or slug (admin only)."""
    require_admin(request)

    project = resolve_identifier(Project.objects.all(), identifier, is_admin=True, not_found="Project not found")

    values = _model_values(data)
    _validate_choices(values)

    if values.get("slug") is not None:
        values["slug"] = slugify(values["slug"])
        if not values["slug"]:
            raise HttpError(400, "Slug cannot be empty")
        if _slug_taken(values["slug"], exclude_id=project.id):
            raise HttpError(409, "Project with this slug already exists")

    for field, value in values.items():
        # Explicit nulls only clear nullable columns
        if value is None and not Project._meta.get_field(field).null:
            continue
        setattr(project, field, value)

    with transaction.atomic():
        project.save()

    return project


@router.delete("/{identifier}", auth=AuthBearer())
def delete_project(request: HttpRequest, identifier: str):
    """Delete a project by id or slug (admin only)."""
    require_admin(request)

    project = resolve_identifier(Project.objects.all(), identifier, is_admin=True, not_found="Project not found")
    project.delete()
    return {"message": "Project deleted"}
