"""
Blob storage on top of Django's configured file storage.

Callers only ever see public URLs: upload returns one, delete and list
work in terms of them.
"""

import logging
import posixpath
import time
from urllib.parse import unquote, urlsplit

from django.conf import settings
from django.core.files.storage import Storage, default_storage
from django.utils.text import get_valid_filename

logger = logging.getLogger(__name__)


def clean_folder(folder: str | None) -> str:
    """Normalise a user-supplied folder into a safe relative path."""
    parts = []
    for part in (folder or "").replace("\\", "/").split("/"):
        part = part.strip()
        if part in ("", ".", ".."):
            continue
        parts.append(get_valid_filename(part))
    return "/".join(parts) or "uploads"


class BlobStorage:
    def __init__(self, storage: Storage | None = None):
        self.storage = storage or default_storage

    def upload(self, file, folder: str | None = None) -> str:
        """Store `file` as `{folder}/{timestamp}-{name}` and return its URL."""
        name = f"{clean_folder(folder)}/{int(time.time() * 1000)}-{get_valid_filename(file.name)}"
        saved = self.storage.save(name, file)
        logger.info(f"[Upload] Stored {saved} ({file.size} bytes)")
        return self.storage.url(saved)

    def name_from_url(self, url: str) -> str | None:
        """Map a URL issued by `upload` back to its storage name."""
        path = unquote(urlsplit(url).path)
        media_path = urlsplit(settings.MEDIA_URL).path or "/"
        if not media_path.endswith("/"):
            media_path += "/"

        if not path.startswith(media_path):
            return None
        name = posixpath.normpath(path[len(media_path):])
        if name in ("", ".") or name.startswith(".."):
            return None
        return name

    def delete(self, url: str) -> bool:
        """Delete the file behind `url`. Returns False when there is none."""
        name = self.name_from_url(url)
        if name is None or not self.storage.exists(name):
            logger.warning(f"[Upload] Nothing to delete for {url}")
            return False

        self.storage.delete(name)
        logger.info(f"[Upload] Deleted {name}")
        return True

    def list(self, prefix: str | None = None) -> list[str]:
        """URLs of every file under `prefix`, walking sub-folders."""
        root = clean_folder(prefix) if prefix else ""
        urls: list[str] = []
        pending = [root]

        while pending:
            current = pending.pop()
            try:
                directories, files = self.storage.listdir(current)
            except FileNotFoundError:
                continue
            for directory in directories:
                pending.append(posixpath.join(current, directory))
            for filename in files:
                urls.append(self.storage.url(posixpath.join(current, filename)))

        return sorted(urls)
