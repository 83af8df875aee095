"""
Application package.

Layout follows the three layers of the services: ``storage`` holds
entities, ``services`` enforces business rules on top of it and
``api`` is the HTTP/JSON boundary.  ``core`` carries settings,
logging and the shared error types.
"""

from .main import people_app, users_app  # noqa: F401
