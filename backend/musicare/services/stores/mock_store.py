"""In-memory store for running without a database.

One ``MockStore`` is built per application lifespan and holds both tables.
Everything is lost on restart.
"""
import threading
from datetime import datetime, timezone
from typing import Optional

from musicare.models.file_record import FileRecord
from musicare.models.person import Person
from musicare.services.stores.base import FileStore, PersonStore


class MockStore(FileStore, PersonStore):
    """Process-local substitute for the SQL provider."""

    def __init__(self):
        self._lock = threading.Lock()
        self._files: list[FileRecord] = []
        self._next_file_id = 1
        self._people: list[Person] = []
        self._next_person_id = 1

    # ── files ────────────────────────────────────────────────────

    async def list_files(self, section: Optional[str] = None) -> list[FileRecord]:
        with self._lock:
            files = [f for f in self._files if section is None or f.section == section]
        return sorted(files, key=lambda f: (f.created_at, f.id), reverse=True)

    async def get_file(self, file_id: int) -> Optional[FileRecord]:
        with self._lock:
            return next((f for f in self._files if f.id == file_id), None)

    async def add_file(self, name: str, type: str, size: int, content: str, section: str) -> FileRecord:
        with self._lock:
            record = FileRecord(
                id=self._next_file_id,
                name=name,
                type=type,
                size=size,
                content=content,
                section=section,
                created_at=datetime.now(timezone.utc),
            )
            self._next_file_id += 1
            self._files.append(record)
        return record

    async def delete_file(self, file_id: int) -> bool:
        with self._lock:
            for index, record in enumerate(self._files):
                if record.id == file_id:
                    del self._files[index]
                    return True
        return False

    # ── people ───────────────────────────────────────────────────

    async def list_people(self) -> list[Person]:
        with self._lock:
            return sorted(self._people, key=lambda p: p.id)

    async def add_person(self, first_name: str, last_name: str) -> Person:
        with self._lock:
            return self._insert_person(first_name, last_name)

    async def replace_people(self, people: list[tuple[str, str]]) -> int:
        with self._lock:
            self._people = []
            self._next_person_id = 1
            for first_name, last_name in people:
                self._insert_person(first_name, last_name)
            return len(self._people)

    async def delete_all_people(self) -> int:
        with self._lock:
            deleted = len(self._people)
            self._people = []
            self._next_person_id = 1
        return deleted

    def _insert_person(self, first_name: str, last_name: str) -> Person:
        """Caller must hold the lock."""
        person = Person(id=self._next_person_id, first_name=first_name, last_name=last_name)
        self._next_person_id += 1
        self._people.append(person)
        return person
