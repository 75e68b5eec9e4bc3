"""Person request/response schemas."""
from typing import Optional
from musicare.schemas.base import CamelModel, CamelORMModel


class PersonCreate(CamelModel):
    """Either a single person or ``{"action": "populate"}``."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    action: Optional[str] = None


class PersonResponse(CamelORMModel):
    id: int
    first_name: str
    last_name: str


class PersonEnvelope(CamelModel):
    person: PersonResponse


class PeopleListResponse(CamelModel):
    people: list[PersonResponse]


class PopulateResponse(CamelModel):
    message: str = "Database populated successfully"
    count: int
    people: list[PersonResponse]


class ClearPeopleResponse(CamelModel):
    message: str = "All people deleted successfully"
    deleted_count: int
