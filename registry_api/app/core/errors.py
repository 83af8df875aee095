"""
Error types shared by the storage, service and transport layers.

Each subclass carries the HTTP status the transport layer answers
with, so endpoints can translate any ``RegistryError`` without a
lookup table.
"""

from fastapi import status


class RegistryError(Exception):
    """Base class for registry errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(RegistryError):
    """The requested entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class AlreadyExistsError(RegistryError):
    """An entity with the same identifier is already stored."""

    status_code = status.HTTP_403_FORBIDDEN


class ValidationError(RegistryError):
    """User input failed a presence or format check."""

    status_code = status.HTTP_400_BAD_REQUEST


class StorageError(RegistryError):
    """Opaque failure inside a store."""
