"""
Pydantic schemas for people records.

Every field is optional and an empty string counts as absent.
Responses are rendered with ``exclude_none`` so a person without an
address carries no ``address`` key, and an unknown person renders as
``{}``.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


def _blank_to_none(value: Any) -> Any:
    return None if value == "" else value


class Address(BaseModel):
    city: Optional[str] = Field(None, json_schema_extra={"example": "Ho Chi Minh"})
    state: Optional[str] = Field(None, json_schema_extra={"example": "Tan Phu"})

    @field_validator("city", "state", mode="before")
    @classmethod
    def drop_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)


class PersonCreate(BaseModel):
    """Body of a create request.  Any ``id`` sent by the client is ignored."""

    firstname: Optional[str] = Field(None, json_schema_extra={"example": "Hung"})
    lastname: Optional[str] = Field(None, json_schema_extra={"example": "Tran"})
    address: Optional[Address] = None

    @field_validator("firstname", "lastname", mode="before")
    @classmethod
    def drop_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)


class Person(BaseModel):
    """A stored person, keyed by ``id``."""

    id: Optional[str] = Field(None, json_schema_extra={"example": "3"})
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    address: Optional[Address] = None

    @field_validator("firstname", "lastname", mode="before")
    @classmethod
    def drop_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)
