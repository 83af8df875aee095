"""
People endpoints.

A plain CRUD surface over ``PeopleService``.  Every response leaves
out empty fields, and looking up an unknown id answers 200 with an
empty object rather than 404.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Request

from registry_api.app.core.errors import NotFoundError, RegistryError
from registry_api.app.schemas.person import Person, PersonCreate
from registry_api.app.services.people_service import PeopleService

router = APIRouter()


def _get_people_service(request: Request) -> PeopleService:
    svc = getattr(request.app.state, "people_service", None)
    if svc is None:
        raise RuntimeError("PeopleService is not configured")
    return svc


@router.get("", response_model=List[Person], response_model_exclude_none=True)
def list_people(request: Request) -> List[Person]:
    return _get_people_service(request).list_people()


@router.get("/{person_id}", response_model=Person, response_model_exclude_none=True)
def get_person(request: Request, person_id: str = Path(..., description="ID of the person")) -> Person:
    try:
        return _get_people_service(request).get_person(person_id)
    except NotFoundError:
        return Person()
    except RegistryError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


# Declared before "/{person_id}" so that "add" is not taken for an id.
@router.post("/add", response_model=Person, response_model_exclude_none=True)
def create_person(request: Request, person: Optional[PersonCreate] = None) -> Person:
    """Create a person with the next free server-generated id."""
    try:
        return _get_people_service(request).create_person(person or PersonCreate())
    except RegistryError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.post("/{person_id}", response_model=Person, response_model_exclude_none=True)
def create_person_with_id(
    request: Request,
    person_id: str = Path(..., description="ID to give the new person"),
    person: Optional[PersonCreate] = None,
) -> Person:
    """Create a person under a caller-chosen id.  403 if the id is taken."""
    try:
        return _get_people_service(request).create_person(person or PersonCreate(), person_id=person_id)
    except RegistryError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.delete("/{person_id}", response_model=List[Person], response_model_exclude_none=True)
def delete_person(request: Request, person_id: str = Path(..., description="ID of the person")) -> List[Person]:
    """Delete a person and return everyone left.  Unknown ids change nothing."""
    try:
        return _get_people_service(request).delete_person(person_id)
    except RegistryError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
