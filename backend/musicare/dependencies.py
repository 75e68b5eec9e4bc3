"""FastAPI dependencies that hand routes a repository bound to the active backend.

Mock mode serves every request from the ``MockStore`` built in the app
lifespan. Database mode opens one session per request; a missing
``DATABASE_URL`` surfaces as ``ConfigurationError`` before any route code runs.
"""
from fastapi import Request

from musicare.config import settings
from musicare.database import async_session
from musicare.services.file_repository import FileRepository
from musicare.services.person_repository import PersonRepository
from musicare.services.stores import SqlFileStore, SqlPersonStore


async def get_file_repository(request: Request):
    if settings.use_mock_store:
        yield FileRepository(request.app.state.mock_store)
        return
    async with async_session() as db:
        yield FileRepository(SqlFileStore(db))


async def get_person_repository(request: Request):
    if settings.use_mock_store:
        yield PersonRepository(request.app.state.mock_store)
        return
    async with async_session() as db:
        yield PersonRepository(SqlPersonStore(db))
