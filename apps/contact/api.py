"""
Contact and work-inquiry API endpoints.
"""

import logging

from django.conf import settings
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from utils.auth import AuthBearer, require_admin
from utils.email import send_email
from utils.pagination import paginate
from .models import Contact, DemoRequest
from .schemas import ContactIn, ContactsListOut, DemoRequestIn, DemoRequestsListOut, SubmittedOut

logger = logging.getLogger(__name__)

router = Router()


def _send_pair(kind: str, notification: dict, confirmation: dict) -> None:
    """Send the owner notification and the sender confirmation. Never raises."""
    notified = send_email(**notification)
    confirmed = send_email(**confirmation)

    if not notified.get("success") or not confirmed.get("success"):
        logger.warning(
            f"[Contact] {kind} emails incomplete: "
            f"notification={notified.get('error') or 'sent'}, confirmation={confirmed.get('error') or 'sent'}"
        )


@router.post("/contact", response={201: SubmittedOut})
def submit_contact(request: HttpRequest, data: ContactIn):
    """Store a contact message and email both parties."""
    fields = {key: (value or "").strip() for key, value in data.model_dump().items()}
    if not all(fields.values()):
        raise HttpError(400, "All fields are required")

    contact = Contact.objects.create(**fields)
    context = {"contact": contact, "site_name": settings.SITE_NAME, "site_url": settings.SITE_URL}

    _send_pair(
        "Contact",
        notification={
            "to": settings.CONTACT_EMAIL,
            "subject": f"Contact form: {contact.subject}",
            "template": "contact/notification.html",
            "context": context,
        },
        confirmation={
            "to": contact.email,
            "subject": f"Thanks for getting in touch, {contact.name}",
            "template": "contact/confirmation.html",
            "context": context,
        },
    )
    return 201, {"message": "Contact form submitted successfully", "id": contact.id}


@router.post("/demo-request", response={201: SubmittedOut})
def submit_demo_request(request: HttpRequest, data: DemoRequestIn):
    """Store a work inquiry and email both parties."""
    name = (data.name or "").strip()
    email = (data.email or "").strip()
    description = (data.description or "").strip()
    if not name or not email or not description:
        raise HttpError(400, "Name, email, and description are required")

    inquiry = DemoRequest.objects.create(
        name=name,
        email=email,
        description=description,
        company=data.company or None,
        position=data.position or None,
        project_type=data.workType or None,
        timeline=data.timeline or None,
    )
    context = {"inquiry": inquiry, "site_name": settings.SITE_NAME, "site_url": settings.SITE_URL}

    _send_pair(
        "Work inquiry",
        notification={
            "to": settings.CONTACT_EMAIL,
            "subject": f"Work inquiry from {inquiry.company or inquiry.name}",
            "template": "contact/demo_request_notification.html",
            "context": context,
        },
        confirmation={
            "to": inquiry.email,
            "subject": "Your inquiry has been received",
            "template": "contact/demo_request_confirmation.html",
            "context": context,
        },
    )
    return 201, {"message": "Work inquiry submitted successfully", "id": inquiry.id}


@router.get("/contacts", response=ContactsListOut, auth=AuthBearer())
def list_contacts(request: HttpRequest, page: int = 1, limit: int = 20):
    require_admin(request)
    items, pagination = paginate(Contact.objects.all(), page, limit)
    return {"items": items, "pagination": pagination}


@router.get("/demo-requests", response=DemoRequestsListOut, auth=AuthBearer())
def list_demo_requests(request: HttpRequest, page: int = 1, limit: int = 20):
    require_admin(request)
    items, pagination = paginate(DemoRequest.objects.all(), page, limit)
    return {"items": items, "pagination": pagination}
