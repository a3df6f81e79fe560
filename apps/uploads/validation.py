"""
Upload checks run before anything touches storage.
"""

from dataclasses import dataclass

from ninja.errors import HttpError

MB = 1024 * 1024


@dataclass(frozen=True)
class UploadRule:
    allowed_types: tuple[str, ...]
    max_size: int
    type_error: str
    size_error: str


IMAGE_RULE = UploadRule(
    allowed_types=("image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif"),
    max_size=5 * MB,
    type_error="Invalid file type. Please upload JPEG, PNG, WebP, or GIF images.",
    size_error="File too large. Please upload images smaller than 5MB.",
)

DOCUMENT_RULE = UploadRule(
    allowed_types=(
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "text/plain",
    ),
    max_size=10 * MB,
    type_error="Invalid file type. Please upload PDF, DOC, DOCX, or TXT files.",
    size_error="File too large. Please upload documents smaller than 10MB.",
)

RULES = {
    "image": IMAGE_RULE,
    "document": DOCUMENT_RULE,
}


def validate_upload(content_type: str | None, size: int | None, kind: str = "image") -> None:
    """Raise HttpError(400) naming the first rule the file breaks."""
    rule = RULES.get(kind)
    if rule is None:
        raise HttpError(400, "Invalid upload type. Use 'image' or 'document'")

    if (content_type or "").lower() not in rule.allowed_types:
        raise HttpError(400, rule.type_error)
    if size is None or size > rule.max_size:
        raise HttpError(400, rule.size_error)
