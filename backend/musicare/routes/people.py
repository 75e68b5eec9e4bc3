"""People API routes."""
from typing import Union

from fastapi import APIRouter, Depends

from musicare.dependencies import get_person_repository
from musicare.models.person import Person
from musicare.schemas.person import (
    ClearPeopleResponse,
    PeopleListResponse,
    PersonCreate,
    PersonEnvelope,
    PersonResponse,
    PopulateResponse,
)
from musicare.services.person_repository import PersonRepository

router = APIRouter(prefix="/api/people", tags=["people"])


@router.get("", response_model=PeopleListResponse)
async def list_people(repo: PersonRepository = Depends(get_person_repository)):
    """List all people, id ascending."""
    people = await repo.list()
    return PeopleListResponse(people=[_to_response(p) for p in people])


@router.post("", response_model=Union[PopulateResponse, PersonEnvelope], status_code=201)
async def create_person(
    body: PersonCreate,
    repo: PersonRepository = Depends(get_person_repository),
):
    """Create one person, or reset the table to sample data with {"action": "populate"}."""
    if body.action == "populate":
        count, people = await repo.populate()
        return PopulateResponse(count=count, people=[_to_response(p) for p in people])

    person = await repo.create(body.first_name, body.last_name)
    return PersonEnvelope(person=_to_response(person))


@router.delete("", response_model=ClearPeopleResponse)
async def clear_people(repo: PersonRepository = Depends(get_person_repository)):
    """Delete every person."""
    deleted = await repo.clear()
    return ClearPeopleResponse(deleted_count=deleted)


def _to_response(person: Person) -> PersonResponse:
    return PersonResponse.model_validate(person)
