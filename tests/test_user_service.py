from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from registry_api.app.core.errors import AlreadyExistsError, NotFoundError, StorageError, ValidationError
from registry_api.app.schemas.user import RegisterParams, check_email
from registry_api.app.services.user_service import UserService, new_user_store


class FailingStore:
    """Store whose lookups fail with something other than NotFound."""

    def __init__(self):
        self.saved = []

    def get(self, key):
        raise StorageError("user store get failed")

    def add(self, entity):
        self.saved.append(entity)


def test_register_then_fetch_round_trip(user_service):
    user = user_service.register(RegisterParams(email="alex@example.com", name="Alex Lee"))
    fetched = user_service.get_by_email("alex@example.com")
    assert fetched == user
    assert fetched.model_dump() == {"email": "alex@example.com", "name": "Alex Lee"}


def test_second_registration_of_same_email_fails(user_service):
    user_service.register(RegisterParams(email="alex@example.com", name="Alex Lee"))
    with pytest.raises(AlreadyExistsError) as excinfo:
        user_service.register(RegisterParams(email="alex@example.com", name="Other"))
    assert str(excinfo.value) == "Email is already in use"
    assert user_service.get_by_email("alex@example.com").name == "Alex Lee"


def test_unknown_email_is_not_found(user_service):
    with pytest.raises(NotFoundError) as excinfo:
        user_service.get_by_email("ghost@example.com")
    assert str(excinfo.value) == "User not found"


def test_storage_errors_propagate_unchanged():
    store = FailingStore()
    svc = UserService(store)
    with pytest.raises(StorageError):
        svc.register(RegisterParams(email="alex@example.com", name="Alex"))
    assert store.saved == []


def test_concurrent_distinct_registrations_all_succeed():
    svc = UserService(new_user_store())
    emails = [f"user{i}@example.com" for i in range(200)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda e: svc.register(RegisterParams(email=e, name=e.split("@")[0])), emails))

    assert len(svc.store) == len(emails)
    for email in emails:
        assert svc.get_by_email(email).name == email.split("@")[0]


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": "Alex"}, "Email cannot be empty"),
        ({"email": "alex.example.com", "name": "Alex"}, "Email must include an '@' symbol"),
        ({"email": "alex@example.com"}, "Name cannot be empty"),
    ],
)
def test_register_params_check(payload, message):
    params = RegisterParams.model_validate(payload)
    with pytest.raises(ValidationError) as excinfo:
        params.check()
    assert str(excinfo.value) == message


def test_register_params_keys_are_case_insensitive():
    params = RegisterParams.model_validate({"EMAIL": "alex@example.com", "Name": "Alex Lee"})
    assert params.email == "alex@example.com"
    assert params.name == "Alex Lee"
    params.check()


def test_check_email_messages():
    with pytest.raises(ValidationError, match="Email must not be empty"):
        check_email("")
    with pytest.raises(ValidationError, match="must include an '@'"):
        check_email("nope")
    check_email("ok@example.com")
