# File: app/api/v1/routes_auth.py

"""
Auth API routes: registration and login.

These sit outside the token gate; login is where tokens come from.
"""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_auth_service, get_user_service
from app.core.errors import ApiError, CredentialMismatch
from app.schemas.token import Token
from app.schemas.user import LoginRequest, UserCreate, UserRead
from app.services.auth_service import AuthService
from app.services.user_service import UserService

router = APIRouter()


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(payload: UserCreate, users: UserService = Depends(get_user_service)):
    if users.get_user_by_email(payload.email) is not None:
        raise ApiError("Email already registered", status_code=status.HTTP_409_CONFLICT)
    return users.create_user(payload)


@router.post("/login", response_model=Token, summary="Exchange credentials for a bearer token")
def login(payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.login(payload.email, payload.password)
    if isinstance(result, Token):
        return result
    raise CredentialMismatch(result.error)
