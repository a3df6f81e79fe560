"""
Portfolio sections and pages API endpoints.
"""

from django.db import transaction
from django.db.models import Max
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from utils.auth import AuthBearer, get_optional_user, is_admin, require_admin
from utils.identifiers import get_by_id, resolve_identifier
from utils.text import slugify
from .models import PortfolioPage, PortfolioSection, SectionType
from .schemas import PageIn, PageOut, SectionIn, SectionOut

sections_router = Router()
pages_router = Router()


# ============== Sections ==============


def _check_section_type(section_type: str) -> None:
    if section_type not in SectionType.values:
        raise HttpError(400, f"Invalid section type. Use one of: {', '.join(SectionType.values)}")


@sections_router.get("/", response=list[SectionOut])
def list_sections(request: HttpRequest):
    """Sections in display order. Inactive ones are admin-only."""
    queryset = PortfolioSection.objects.all()
    if not is_admin(get_optional_user(request)):
        queryset = queryset.filter(is_active=True)
    return list(queryset)


@sections_router.post("/", response={201: SectionOut}, auth=AuthBearer())
def create_section(request: HttpRequest, data: SectionIn):
    """Create a section, appended at the end unless sortOrder is given (admin only)."""
    require_admin(request)

    if not data.sectionType or not data.displayName:
        raise HttpError(400, "Section type and display name are required")
    _check_section_type(data.sectionType)

    sort_order = data.sortOrder
    if sort_order is None:
        last = PortfolioSection.objects.aggregate(last=Max("sort_order"))["last"]
        sort_order = (last or 0) + 1

    section = PortfolioSection.objects.create(
        name=slugify(data.displayName),
        display_name=data.displayName,
        section_type=data.sectionType,
        title=data.title,
        subtitle=data.subtitle,
        description=data.description,
        content=data.content or {},
        settings=data.settings or {},
        is_active=data.isActive if data.isActive is not None else True,
        sort_order=sort_order,
    )
    return 201, section


@sections_router.get("/{section_id}", response=SectionOut)
def get_section(request: HttpRequest, section_id: str):
    section = get_by_id(PortfolioSection.objects.all(), section_id, not_found="Section not found")
    if not section.is_active and not is_admin(get_optional_user(request)):
        raise HttpError(404, "Section not found")
    return section


@sections_router.put("/{section_id}", response=SectionOut, auth=AuthBearer())
def update_section(request: HttpRequest, section_id: str, data: SectionIn):
    require_admin(request)
    section = get_by_id(PortfolioSection.objects.all(), section_id, not_found="Section not found")

    if data.sectionType is not None:
        _check_section_type(data.sectionType)
        section.section_type = data.sectionType
    if data.displayName is not None:
        section.display_name = data.displayName
        section.name = slugify(data.displayName)
    if data.title is not None:
        section.title = data.title
    if data.subtitle is not None:
        section.subtitle = data.subtitle
    if data.description is not None:
        section.description = data.description
    if data.content is not None:
        section.content = data.content
    if data.settings is not None:
        section.settings = data.settings
    if data.isActive is not None:
        section.is_active = data.isActive
    if data.sortOrder is not None:
        section.sort_order = data.sortOrder

    section.save()
    return section


@sections_router.delete("/{section_id}", auth=AuthBearer())
def delete_section(request: HttpRequest, section_id: str):
    require_admin(request)
    get_by_id(PortfolioSection.objects.all(), section_id, not_found="Section not found").delete()
    return {"message": "Section deleted"}


# ============== Pages ==============


@pages_router.get("/", response=list[PageOut])
def list_pages(request: HttpRequest):
    queryset = PortfolioPage.objects.all()
    if not is_admin(get_optional_user(request)):
        queryset = queryset.filter(is_published=True)
    return list(queryset)


@pages_router.get("/homepage", response=PageOut)
def get_homepage(request: HttpRequest):
    page = PortfolioPage.objects.filter(is_homepage=True).first()
    if page is None or (not page.is_published and not is_admin(get_optional_user(request))):
        raise HttpError(404, "No homepage set")
    return page


@pages_router.get("/{identifier}", response=PageOut)
def get_page(request: HttpRequest, identifier: str):
    """Get a page by id or slug. Unpublished pages are admin-only."""
    admin = is_admin(get_optional_user(request))
    page = resolve_identifier(
        PortfolioPage.objects.all(),
        identifier,
        public_filters={"is_published": True},
        is_admin=admin,
        not_found="Page not found",
    )
    if not admin and not page.is_published:
        raise HttpError(404, "Page not found")
    return page


@pages_router.post("/", response={201: PageOut}, auth=AuthBearer())
def create_page(request: HttpRequest, data: PageIn):
    """Create a page; the homepage flag moves to it when requested (admin only)."""
    require_admin(request)

    if not data.title:
        raise HttpError(400, "Title is required")
    slug = slugify(data.slug or data.title)
    if not slug:
        raise HttpError(400, "Slug could not be derived from title")
    if PortfolioPage.objects.filter(slug=slug).exists():
        raise HttpError(409, "Page with this slug already exists")

    with transaction.atomic():
        page = PortfolioPage.objects.create(
            slug=slug,
            title=data.title,
            description=data.description,
            content=data.content or {},
            meta_title=data.metaTitle,
            meta_description=data.metaDescription,
            is_published=bool(data.isPublished),
            sort_order=data.sortOrder or 0,
        )
        if data.isHomepage:
            page.make_homepage()

    return 201, page


@pages_router.put("/{page_id}", response=PageOut, auth=AuthBearer())
def update_page(request: HttpRequest, page_id: str, data: PageIn):
    require_admin(request)
    page = get_by_id(PortfolioPage.objects.all(), page_id, not_found="Page not found")

    if data.slug is not None:
        slug = slugify(data.slug)
        if not slug:
            raise HttpError(400, "Slug cannot be empty")
        if PortfolioPage.objects.filter(slug=slug).exclude(id=page.id).exists():
            raise HttpError(409, "Page with this slug already exists")
        page.slug = slug
    if data.title is not None:
        page.title = data.title
    if data.description is not None:
        page.description = data.description
    if data.content is not None:
        page.content = data.content
    if data.metaTitle is not None:
        page.meta_title = data.metaTitle
    if data.metaDescription is not None:
        page.meta_description = data.metaDescription
    if data.isPublished is not None:
        page.is_published = data.isPublished
    if data.sortOrder is not None:
        page.sort_order = data.sortOrder

    with transaction.atomic():
        if data.isHomepage:
            page.make_homepage()
        elif data.isHomepage is False:
            page.is_homepage = False
        page.save()

    return page


@pages_router.post("/{page_id}/homepage", response=PageOut, auth=AuthBearer())
def set_homepage(request: HttpRequest, page_id: str):
    """Make this page the only homepage (admin only)."""
    require_admin(request)
    page = get_by_id(PortfolioPage.objects.all(), page_id, not_found="Page not found")
    page.make_homepage()
    page.refresh_from_db()
    return page


@pages_router.delete("/{page_id}", auth=AuthBearer())
def delete_page(request: HttpRequest, page_id: str):
    require_admin(request)
    get_by_id(PortfolioPage.objects.all(), page_id, not_found="Page not found").delete()
    return {"message": "Page deleted"}
