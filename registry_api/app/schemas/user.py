"""
Pydantic models for user registration.

``RegisterParams`` is the inbound body of ``POST /register``; ``User``
is what the store keeps and what ``GET /user`` returns.  Input keys
are matched case-insensitively so ``{"Name": ...}`` and
``{"name": ...}`` decode the same way.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..core.errors import ValidationError


class User(BaseModel):
    """A registered user, keyed by email."""

    email: str = Field(..., json_schema_extra={"example": "alex@example.com"})
    name: str = Field(..., json_schema_extra={"example": "Alex Lee"})


class RegisterParams(BaseModel):
    """Schema for registering a user.

    Both fields default to an empty string so that a missing field is
    reported by ``check`` with a readable message instead of failing
    body decoding.
    """

    email: str = Field("", json_schema_extra={"example": "alex@example.com"})
    name: str = Field("", json_schema_extra={"example": "Alex Lee"})

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # null decodes as an empty value so check() can report it.
        folded = {}
        for key, value in data.items():
            if isinstance(key, str):
                folded.setdefault(key.lower(), "" if value is None else value)
        return folded

    def check(self) -> None:
        """Raise ``ValidationError`` unless email and name are usable."""
        if not self.email:
            raise ValidationError("Email cannot be empty")
        if "@" not in self.email:
            raise ValidationError("Email must include an '@' symbol")
        if not self.name:
            raise ValidationError("Name cannot be empty")


def check_email(email: str) -> None:
    """Validate a lookup email (``GET /user``)."""
    if not email:
        raise ValidationError("Email must not be empty")
    if "@" not in email:
        raise ValidationError("Email must include an '@' symbol")
