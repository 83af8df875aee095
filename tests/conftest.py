from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the package importable when running the tests from a checkout.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from registry_api.app.main import create_people_app, create_users_app  # noqa: E402
from registry_api.app.services.people_service import PeopleService  # noqa: E402
from registry_api.app.services.user_service import UserService  # noqa: E402


@pytest.fixture()
def user_service() -> UserService:
    return UserService()


@pytest.fixture()
def users_client(user_service):
    return TestClient(create_users_app(user_service))


@pytest.fixture()
def people_service() -> PeopleService:
    return PeopleService()


@pytest.fixture()
def people_client(people_service):
    """People app over a store holding the two demo records."""
    return TestClient(create_people_app(people_service, seed=True))
