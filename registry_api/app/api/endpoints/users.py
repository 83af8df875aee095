"""
User endpoints.

``POST /register`` stores a new user and answers 201 with an empty
body; ``GET /user?email=...`` returns the stored user as JSON.  Input
checks run here, before the service is called.  Errors are raised as
``HTTPException`` and rendered as plain text by the users app.
"""

from fastapi import APIRouter, HTTPException, Request, Response, status

from registry_api.app.core.errors import RegistryError
from registry_api.app.schemas.user import RegisterParams, User, check_email
from registry_api.app.services.user_service import UserService

router = APIRouter()

OTHER_THAN_POST = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]
OTHER_THAN_GET = ["HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _get_user_service(request: Request) -> UserService:
    svc = getattr(request.app.state, "user_service", None)
    if svc is None:
        raise RuntimeError("UserService is not configured")
    return svc


@router.post("/register", status_code=status.HTTP_201_CREATED, response_class=Response)
def register(params: RegisterParams, request: Request) -> Response:
    """Register a user.

    Returns 400 when email or name is missing or the email has no
    ``@``, 403 when the email is already registered.
    """
    try:
        params.check()
        _get_user_service(request).register(params)
    except RegistryError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return Response(status_code=status.HTTP_201_CREATED)


@router.api_route("/register", methods=OTHER_THAN_POST, include_in_schema=False)
def register_wrong_method() -> None:
    raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, detail="Register requires a post request")


@router.get("/user", response_model=User)
def get_user(request: Request, email: str = "") -> User:
    """Look up a user by email.  404 if nobody registered it."""
    try:
        check_email(email)
        return _get_user_service(request).get_by_email(email)
    except RegistryError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.api_route("/user", methods=OTHER_THAN_GET, include_in_schema=False)
def get_user_wrong_method() -> None:
    raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, detail="GetUser requires a get request")
