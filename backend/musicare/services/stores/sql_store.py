"""SQLAlchemy-backed stores (the real persistence provider).

Each store wraps one request-scoped ``AsyncSession``. Provider calls are
bounded by ``DB_TIMEOUT_SECONDS``; driver errors are rolled back, logged and
re-raised as ``PersistenceError`` so callers only deal with the app taxonomy.
"""
import asyncio
import logging
from typing import Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from musicare.config import settings
from musicare.errors import PersistenceError, StoreTimeout
from musicare.models.file_record import FileRecord
from musicare.models.person import Person
from musicare.services.stores.base import FileStore, PersonStore

logger = logging.getLogger(__name__)


class _SqlStore:

    def __init__(self, db: AsyncSession, timeout: Optional[float] = None):
        self.db = db
        self.timeout = timeout if timeout is not None else settings.DB_TIMEOUT_SECONDS

    async def _run(self, operation: str, coro):
        try:
            return await asyncio.wait_for(coro, timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"{operation} timed out after {self.timeout}s")
            await self._rollback()
            raise StoreTimeout()
        except SQLAlchemyError as e:
            logger.error(f"{operation} failed: {e}")
            await self._rollback()
            raise PersistenceError() from e

    async def _rollback(self):
        try:
            await self.db.rollback()
        except SQLAlchemyError as e:
            logger.warning(f"Rollback failed: {e}")


class SqlFileStore(_SqlStore, FileStore):

    async def list_files(self, section: Optional[str] = None) -> list[FileRecord]:
        query = select(FileRecord).order_by(desc(FileRecord.created_at), desc(FileRecord.id))
        if section is not None:
            query = query.where(FileRecord.section == section)

        async def _list():
            result = await self.db.execute(query)
            return list(result.scalars().all())

        return await self._run("list files", _list())

    async def get_file(self, file_id: int) -> Optional[FileRecord]:
        return await self._run("get file", self.db.get(FileRecord, file_id))

    async def add_file(self, name: str, type: str, size: int, content: str, section: str) -> FileRecord:
        async def _add():
            record = FileRecord(name=name, type=type, size=size, content=content, section=section)
            self.db.add(record)
            await self.db.commit()
            await self.db.refresh(record)
            return record

        return await self._run("create file", _add())

    async def delete_file(self, file_id: int) -> bool:
        async def _delete():
            record = await self.db.get(FileRecord, file_id)
            if record is None:
                return False
            await self.db.delete(record)
            await self.db.commit()
            return True

        return await self._run("delete file", _delete())


class SqlPersonStore(_SqlStore, PersonStore):

    async def list_people(self) -> list[Person]:
        async def _list():
            result = await self.db.execute(select(Person).order_by(Person.id))
            return list(result.scalars().all())

        return await self._run("list people", _list())

    async def add_person(self, first_name: str, last_name: str) -> Person:
        async def _add():
            person = Person(first_name=first_name, last_name=last_name)
            self.db.add(person)
            await self.db.commit()
            await self.db.refresh(person)
            return person

        return await self._run("create person", _add())

    async def replace_people(self, people: list[tuple[str, str]]) -> int:
        async def _replace():
            await self.db.execute(delete(Person))
            self.db.add_all([Person(first_name=f, last_name=l) for f, l in people])
            await self.db.commit()
            return len(people)

        return await self._run("populate people", _replace())

    async def delete_all_people(self) -> int:
        async def _clear():
            result = await self.db.execute(delete(Person))
            await self.db.commit()
            return result.rowcount

        return await self._run("clear people", _clear())
