"""
Business logic for people records.

Identifiers are strings.  When the caller does not name one, the
service hands out the next value of a counter that only moves
forward, skipping values already in use; identifiers freed by a
delete are never handed out again.  A caller-named identifier is
accepted as long as no stored person already has it.
"""

import itertools
import logging
import threading
from typing import List, Optional

from ..core.errors import AlreadyExistsError, NotFoundError
from ..schemas.person import Address, Person, PersonCreate
from ..storage import MemoryStore

logger = logging.getLogger(__name__)

DEMO_PEOPLE = (
    Person(
        id="1",
        firstname="Alex",
        lastname="Lee",
        address=Address(city="Ho Chi Minh", state="Tan Phu"),
    ),
    Person(id="2", firstname="Minh", lastname="Le"),
)


def new_people_store() -> MemoryStore[Person]:
    return MemoryStore("person", key_func=lambda person: person.id)


class PeopleService:
    """CRUD over people held in a ``MemoryStore``."""

    def __init__(self, store: Optional[MemoryStore[Person]] = None) -> None:
        self.store = store if store is not None else new_people_store()
        self._ids = itertools.count(1)
        self._id_lock = threading.Lock()

    def seed(self) -> None:
        """Load the demo records, skipping any id already present."""
        for person in DEMO_PEOPLE:
            if not self.store.contains(person.id):
                self.store.add(person)
        logger.info("Seeded %d demo people", len(DEMO_PEOPLE))

    def _next_id(self) -> str:
        # Caller holds self._id_lock.
        while True:
            candidate = str(next(self._ids))
            if not self.store.contains(candidate):
                return candidate

    def list_people(self) -> List[Person]:
        return self.store.list()

    def get_person(self, person_id: str) -> Person:
        """Return the person with ``person_id`` or raise ``NotFoundError``."""
        try:
            return self.store.get(person_id)
        except NotFoundError:
            raise NotFoundError(f"Person {person_id} not found") from None

    def create_person(self, data: PersonCreate, person_id: Optional[str] = None) -> Person:
        """Store a new person and return it with its identifier set.

        With ``person_id`` given, raises ``AlreadyExistsError`` if the
        identifier is taken.
        """
        fields = data.model_dump()
        with self._id_lock:
            if person_id is None:
                person_id = self._next_id()
            person = Person(id=person_id, **fields)
            try:
                self.store.add(person)
            except AlreadyExistsError:
                raise AlreadyExistsError(f"Person {person_id} already exists") from None
        logger.info("Created person %s", person_id)
        return person

    def delete_person(self, person_id: str) -> List[Person]:
        """Remove ``person_id`` if present and return the people left."""
        if self.store.delete(person_id):
            logger.info("Deleted person %s", person_id)
        else:
            logger.info("Delete of unknown person %s ignored", person_id)
        return self.store.list()
