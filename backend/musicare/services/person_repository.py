"""Person repository: CRUD plus the destructive populate/clear bulk operations."""
from __future__ import annotations

import logging
from typing import Optional

from musicare.errors import ValidationError
from musicare.models.person import Person
from musicare.services.stores.base import PersonStore

logger = logging.getLogger(__name__)

SAMPLE_PEOPLE = (
    ("John", "Doe"),
    ("Jane", "Smith"),
    ("Bob", "Johnson"),
)


class PersonRepository:

    def __init__(self, store: PersonStore):
        self.store = store

    async def list(self) -> list[Person]:
        return await self.store.list_people()

    async def create(self, first_name: Optional[str], last_name: Optional[str]) -> Person:
        if not first_name or not last_name:
            raise ValidationError("Missing required fields: firstName and lastName")
        return await self.store.add_person(first_name, last_name)

    async def populate(self) -> tuple[int, list[Person]]:
        """Replace every person with the sample set. Prior rows are not kept."""
        count = await self.store.replace_people(list(SAMPLE_PEOPLE))
        logger.info(f"Populated people table with {count} sample rows")
        return count, await self.store.list_people()

    async def clear(self) -> int:
        deleted = await self.store.delete_all_people()
        logger.info(f"Deleted {deleted} people")
        return deleted
