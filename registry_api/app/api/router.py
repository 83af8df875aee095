"""
Top-level routers.

The users and people services are served by separate apps, so each
gets its own aggregate router.  Paths are mounted at the root to keep
the public URLs (``/register``, ``/user``, ``/people``) unchanged.
"""

from fastapi import APIRouter

from .endpoints import people, users

users_router = APIRouter()
users_router.include_router(users.router, tags=["users"])

people_router = APIRouter()
people_router.include_router(people.router, prefix="/people", tags=["people"])
