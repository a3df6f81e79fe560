"""
Skills API endpoints.
"""

from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from utils.auth import AuthBearer, get_optional_user, is_admin, require_admin
from utils.identifiers import get_by_id
from .models import Skill, SkillCategory
from .schemas import SkillIn, SkillOut

router = Router()


def clamp_level(level: int) -> int:
    return max(0, min(100, level))


def _get_skill(skill_id: str) -> Skill:
    return get_by_id(Skill.objects.all(), skill_id, not_found="Skill not found")


def _check_category(category: str) -> None:
    if category not in SkillCategory.values:
        raise HttpError(400, f"Invalid category. Use one of: {', '.join(SkillCategory.values)}")


@router.get("/", response=list[SkillOut])
def list_skills(request: HttpRequest, category: str | None = None):
    """List skills grouped by category order."""
    queryset = Skill.objects.all()

    if not is_admin(get_optional_user(request)):
        queryset = queryset.filter(is_active=True)
    if category:
        queryset = queryset.filter(category=category.upper())

    return list(queryset)


@router.get("/{skill_id}", response=SkillOut)
def get_skill(request: HttpRequest, skill_id: str):
    return _get_skill(skill_id)


@router.post("/", response={201: SkillOut}, auth=AuthBearer())
def create_skill(request: HttpRequest, data: SkillIn):
    """Create a skill (admin only)."""
    require_admin(request)

    if not data.name or not data.name.strip() or not data.category:
        raise HttpError(400, "Name and category are required")
    _check_category(data.category)

    skill = Skill.objects.create(
        name=data.name.strip(),
        category=data.category,
        level=clamp_level(data.level if data.level is not None else 50),
        icon=data.icon,
        color=data.color,
        is_active=data.isActive if data.isActive is not None else True,
        sort_order=data.sortOrder or 0,
    )
    return 201, skill


@router.put("/{skill_id}", response=SkillOut, auth=AuthBearer())
def update_skill(request: HttpRequest, skill_id: str, data: SkillIn):
    """Update a skill (admin only)."""
    require_admin(request)
    skill = _get_skill(skill_id)

    if data.name is not None:
        if not data.name.strip():
            raise HttpError(400, "Name cannot be empty")
        skill.name = data.name.strip()
    if data.category is not None:
        _check_category(data.category)
        skill.category = data.category
    if data.level is not None:
        skill.level = clamp_level(data.level)
    if data.icon is not None:
        skill.icon = data.icon
    if data.color is not None:
        skill.color = data.color
    if data.isActive is not None:
        skill.is_active = data.isActive
    if data.sortOrder is not None:
        skill.sort_order = data.sortOrder

    skill.save()
    return skill


@router.delete("/{skill_id}", auth=AuthBearer())
def delete_skill(request: HttpRequest, skill_id: str):
    """Delete a skill (admin only)."""
    require_admin(request)
    _get_skill(skill_id).delete()
    return {"message": "Skill deleted"}
