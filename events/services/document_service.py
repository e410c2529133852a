"""Storage of supporting documents attached to registrations."""

import logging
import time
from dataclasses import dataclass

from django.core.exceptions import SuspiciousFileOperation
from django.core.files.base import File
from django.core.files.storage import Storage, default_storage
from django.utils.text import get_valid_filename

from events.domain.errors import EmptyDocumentError, InvalidDocumentOwnerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedDocument:
    url: str
    name: str
    content_type: str | None


class DocumentService:
    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage or default_storage

    def upload(self, file: File, user_id: str, event_id: str | None = None) -> UploadedDocument:
        """Store a file under documents/<user>/ and return where it lives.

        Raises:
            EmptyDocumentError: If the file has no content.
            InvalidDocumentOwnerError: If user_id has no usable filename characters.
        """
        if not file.size:
            raise EmptyDocumentError()
        try:
            owner_dir = get_valid_filename(user_id)
        except SuspiciousFileOperation as exc:
            raise InvalidDocumentOwnerError(user_id) from exc

        original_name = file.name or "document"
        prefix = f"{event_id}_" if event_id else ""
        filename = f"{prefix}{int(time.time() * 1000)}_{original_name.replace(' ', '_')}"
        path = f"documents/{owner_dir}/{get_valid_filename(filename)}"

        stored_name = self._storage.save(path, file)
        url = self._storage.url(stored_name)
        logger.info("Stored document %s for user %s (%d bytes)", stored_name, user_id, file.size)
        return UploadedDocument(
            url=url,
            name=original_name,
            content_type=getattr(file, "content_type", None),
        )
