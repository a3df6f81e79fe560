"""
File upload API endpoints (admin only).
"""

from django.http import HttpRequest
from ninja import File, Form, Router
from ninja.errors import HttpError
from ninja.files import UploadedFile

from utils.auth import AuthBearer, require_admin
from .storage import BlobStorage
from .validation import validate_upload

router = Router(auth=AuthBearer())


@router.post("/")
def upload_file(
    request: HttpRequest,
    file: UploadedFile | None = File(None),
    folder: str = Form("uploads"),
    type: str = Form("image"),
):
    """Validate and store an image or document; returns its public URL."""
    require_admin(request)

    if file is None:
        raise HttpError(400, "No file provided")
    validate_upload(file.content_type, file.size, type)

    url = BlobStorage().upload(file, folder)
    return {
        "url": url,
        "filename": file.name,
        "size": file.size,
        "type": file.content_type,
        "message": f"{'Document' if type == 'document' else 'Image'} uploaded successfully",
    }


@router.delete("/")
def delete_file(request: HttpRequest, url: str | None = None):
    require_admin(request)

    if not url:
        raise HttpError(400, "No URL provided")
    if not BlobStorage().delete(url):
        raise HttpError(404, "File not found")
    return {"message": "File deleted successfully"}


@router.get("/")
def list_files(request: HttpRequest, folder: str | None = None):
    require_admin(request)
    return {"files": BlobStorage().list(folder)}
