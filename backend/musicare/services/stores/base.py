"""Store interfaces shared by the SQL provider and the in-memory mock.

Both backends return ``FileRecord`` / ``Person`` model instances and raise the
same errors, so repositories and routes never know which one serves them.
"""
from abc import ABC, abstractmethod
from typing import Optional

from musicare.models.file_record import FileRecord
from musicare.models.person import Person


class FileStore(ABC):

    @abstractmethod
    async def list_files(self, section: Optional[str] = None) -> list[FileRecord]:
        """All files, optionally for one section, newest first."""

    @abstractmethod
    async def get_file(self, file_id: int) -> Optional[FileRecord]:
        ...

    @abstractmethod
    async def add_file(self, name: str, type: str, size: int, content: str, section: str) -> FileRecord:
        """Persist a file; the store assigns id and created_at."""

    @abstractmethod
    async def delete_file(self, file_id: int) -> bool:
        """Remove a file. Returns False when no file has that id."""


class PersonStore(ABC):

    @abstractmethod
    async def list_people(self) -> list[Person]:
        """All people, id ascending."""

    @abstractmethod
    async def add_person(self, first_name: str, last_name: str) -> Person:
        ...

    @abstractmethod
    async def replace_people(self, people: list[tuple[str, str]]) -> int:
        """Delete everyone, then insert ``people`` in one unit of work.

        Returns the number inserted.
        """

    @abstractmethod
    async def delete_all_people(self) -> int:
        """Delete everyone and return how many rows went."""
