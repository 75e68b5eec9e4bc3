"""File repository: validation and persistence of uploaded files.

Files are kept inline as data URLs, so the size ceiling bounds both the
request and the row. Listing is always newest first.
"""
from __future__ import annotations

import logging
from typing import Optional

from musicare.errors import NotFound, PayloadTooLarge, ValidationError
from musicare.models.file_record import FileRecord
from musicare.schemas.file import FileCreate
from musicare.services.content_codec import decode_data_url
from musicare.services.stores.base import FileStore

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 5 * 1024 * 1024
# base64 of MAX_FILE_SIZE bytes plus room for the "data:<type>;base64," prefix
MAX_ENCODED_LENGTH = 4 * -(-MAX_FILE_SIZE // 3) + 128
ALLOWED_TYPES = frozenset({"text/plain", "application/pdf"})
REQUIRED_FIELDS = ("name", "type", "content", "section")


class FileRepository:

    def __init__(self, store: FileStore):
        self.store = store

    async def list(self, section: Optional[str] = None) -> list[FileRecord]:
        return await self.store.list_files(section)

    async def get(self, file_id: int) -> FileRecord:
        record = await self.store.get_file(file_id)
        if record is None:
            raise NotFound("File not found")
        return record

    async def create(self, draft: FileCreate) -> FileRecord:
        """Validate a draft and persist it. Raises ValidationError / PayloadTooLarge."""
        missing = [field for field in REQUIRED_FIELDS if not getattr(draft, field)]
        if missing:
            raise ValidationError("Missing required fields", details=", ".join(missing))
        if draft.type not in ALLOWED_TYPES:
            raise ValidationError(
                "Unsupported file type",
                details=f"Allowed types: {', '.join(sorted(ALLOWED_TYPES))}",
            )

        size = draft.size
        if size is not None and size < 0:
            raise ValidationError("File size must not be negative")
        if (size is not None and size > MAX_FILE_SIZE) or len(draft.content) > MAX_ENCODED_LENGTH:
            raise PayloadTooLarge()

        try:
            actual_size = len(decode_data_url(draft.content))
        except ValueError:
            raise ValidationError("File content is not valid base64")
        if actual_size > MAX_FILE_SIZE:
            raise PayloadTooLarge()
        if size is None:
            size = actual_size
        elif size != actual_size:
            raise ValidationError(
                "File size does not match content",
                details=f"declared {size} bytes, content has {actual_size}",
            )

        record = await self.store.add_file(
            name=draft.name,
            type=draft.type,
            size=size,
            content=draft.content,
            section=draft.section,
        )
        logger.info(f"Stored file {record.id} ({record.name}, {record.size} bytes) in section '{record.section}'")
        return record

    async def delete(self, file_id: int) -> None:
        if not await self.store.delete_file(file_id):
            raise NotFound("File not found")
        logger.info(f"Deleted file {file_id}")
