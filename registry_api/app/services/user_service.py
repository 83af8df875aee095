"""
Business logic for users.

``UserService`` enforces email uniqueness on top of a ``MemoryStore``.
Input format checks (presence of email and name, ``@`` in the email)
belong to the HTTP boundary; by the time ``register`` is called the
parameters have already passed ``RegisterParams.check``.
"""

import logging
from typing import Optional

from ..core.errors import AlreadyExistsError, NotFoundError
from ..schemas.user import RegisterParams, User
from ..storage import MemoryStore

logger = logging.getLogger(__name__)


def new_user_store() -> MemoryStore[User]:
    return MemoryStore("user", key_func=lambda user: user.email)


class UserService:
    """Registration and lookup of users."""

    def __init__(self, store: Optional[MemoryStore[User]] = None) -> None:
        self.store = store if store is not None else new_user_store()

    def register(self, params: RegisterParams) -> User:
        """Store a new user.

        Raises ``AlreadyExistsError`` when the email is taken.  Any
        storage failure other than ``NotFoundError`` from the existence
        check propagates unchanged.
        """
        try:
            self.store.get(params.email)
        except NotFoundError:
            pass
        else:
            raise AlreadyExistsError("Email is already in use")

        user = User(email=params.email, name=params.name)
        try:
            # A concurrent registration may have won since the lookup.
            self.store.add(user)
        except AlreadyExistsError:
            raise AlreadyExistsError("Email is already in use") from None
        logger.info("Registered user %s", user.email)
        return user

    def get_by_email(self, email: str) -> User:
        """Return the user registered under ``email`` or raise ``NotFoundError``."""
        try:
            return self.store.get(email)
        except NotFoundError:
            raise NotFoundError("User not found") from None
