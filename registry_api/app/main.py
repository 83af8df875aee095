"""
Application factories for the registry services.

Two FastAPI applications are built here: the users app
(``/register``, ``/user``) and the people app (``/people...``).
Each factory sets up logging, creates the service with a fresh
in-memory store, stores it on ``app.state`` and includes its router.
Instances are created at import time so that an ASGI server can
discover them, e.g.::

    uvicorn registry_api.app.main:users_app --port 8080
    uvicorn registry_api.app.main:people_app --port 8888

``run.py`` at the project root serves both at once.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import people_router, users_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.people_service import PeopleService
from .services.user_service import UserService

logger = logging.getLogger(__name__)


async def _plain_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def _unreadable_body(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.debug("Rejected body on %s: %s", request.url.path, exc.errors())
    return PlainTextResponse("Unable to read your request", status_code=status.HTTP_400_BAD_REQUEST)


async def _internal_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _base_app(title: str, banner: str) -> FastAPI:
    # Initialise logging before anything else so that the service
    # constructors below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=title, version=settings.api_version)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(banner)

    return app


def create_users_app(service: Optional[UserService] = None) -> FastAPI:
    """Create the user registration app.

    Errors are answered in plain text; bodies that cannot be decoded
    into ``RegisterParams`` get a 400 instead of FastAPI's 422.

    Parameters
    ----------
    service : Optional[UserService]
        Service to serve.  A new one with an empty store is created
        when omitted.
    """
    app = _base_app(f"{settings.project_name}: users", "Separate server: register & get user")
    app.state.user_service = service or UserService()
    app.add_exception_handler(StarletteHTTPException, _plain_http_error)
    app.add_exception_handler(RequestValidationError, _unreadable_body)
    app.add_exception_handler(Exception, _internal_error)
    app.include_router(users_router)
    return app


def create_people_app(service: Optional[PeopleService] = None, seed: Optional[bool] = None) -> FastAPI:
    """Create the people CRUD app.

    ``seed`` defaults to ``settings.seed_people``; when true the two
    demo records are loaded into the service's store.
    """
    app = _base_app(f"{settings.project_name}: people", "People REST API")
    people_service = service or PeopleService()
    if settings.seed_people if seed is None else seed:
        people_service.seed()
    app.state.people_service = people_service
    app.include_router(people_router)
    return app


users_app = create_users_app()
people_app = create_people_app()
