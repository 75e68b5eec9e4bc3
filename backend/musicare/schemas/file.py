"""File request/response schemas."""
from typing import Optional
from datetime import datetime
from musicare.schemas.base import CamelModel, CamelORMModel


class FileCreate(CamelModel):
    """Upload body. Fields are optional here; the repository decides what is missing."""
    name: Optional[str] = None
    type: Optional[str] = None
    size: Optional[int] = None
    content: Optional[str] = None
    section: Optional[str] = None


class FileResponse(CamelORMModel):
    id: int
    name: str
    type: str
    size: int
    content: str
    section: str
    created_at: datetime


class FileEnvelope(CamelModel):
    file: FileResponse


class FileListResponse(CamelModel):
    files: list[FileResponse]
