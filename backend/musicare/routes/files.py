"""Files API routes."""
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from musicare.dependencies import get_file_repository
from musicare.errors import PersistenceError, ValidationError
from musicare.models.file_record import FileRecord
from musicare.schemas.common import MessageResponse
from musicare.schemas.file import FileCreate, FileEnvelope, FileListResponse, FileResponse
from musicare.services.content_codec import decode_data_url
from musicare.services.file_repository import FileRepository

router = APIRouter(prefix="/api/files", tags=["files"])


@router.get("", response_model=FileListResponse)
async def list_files(
    section: Optional[str] = Query(None, description="Only files in this section"),
    repo: FileRepository = Depends(get_file_repository),
):
    """List files, newest first."""
    records = await repo.list(section)
    return FileListResponse(files=[_to_response(r) for r in records])


@router.post("", response_model=FileEnvelope, status_code=201)
async def upload_file(
    body: FileCreate,
    repo: FileRepository = Depends(get_file_repository),
):
    """Store a base64 data-URL encoded file."""
    record = await repo.create(body)
    return FileEnvelope(file=_to_response(record))


@router.delete("", response_model=MessageResponse)
async def delete_file(
    id: Optional[str] = Query(None),
    repo: FileRepository = Depends(get_file_repository),
):
    """Delete a file by ?id=."""
    if not id:
        raise ValidationError("File ID is required")
    try:
        file_id = int(id)
    except ValueError:
        raise ValidationError("File ID must be an integer")

    await repo.delete(file_id)
    return MessageResponse(message="File deleted successfully")


@router.get("/{file_id}", response_model=FileEnvelope)
async def get_file(
    file_id: int,
    repo: FileRepository = Depends(get_file_repository),
):
    """Get a single file, content included."""
    record = await repo.get(file_id)
    return FileEnvelope(file=_to_response(record))


@router.get("/{file_id}/download")
async def download_file(
    file_id: int,
    repo: FileRepository = Depends(get_file_repository),
):
    """Return the decoded file bytes as an attachment."""
    record = await repo.get(file_id)
    try:
        data = decode_data_url(record.content)
    except ValueError as e:
        raise PersistenceError(f"Stored content for file {file_id} is corrupt") from e

    return Response(
        content=data,
        media_type=record.type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(record.name)}"},
    )


def _to_response(record: FileRecord) -> FileResponse:
    """Convert SQLAlchemy model to response schema."""
    return FileResponse.model_validate(record)
