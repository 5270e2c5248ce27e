# File: app/api/v1/routes_users.py

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_user_service
from app.core.errors import ApiError, NotFound
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services.user_service import UserService

router = APIRouter()

USER_NOT_FOUND = "User not found"


@router.get("/", response_model=list[UserRead], summary="List users")
def list_users(users: UserService = Depends(get_user_service)):
    return users.get_all_users()


@router.get("/{user_id}", response_model=UserRead, summary="Get a user")
def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    user = users.get_user_by_id(user_id)
    if user is None:
        raise NotFound(USER_NOT_FOUND)
    return user


@router.post(
    "/",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
def create_user(payload: UserCreate, users: UserService = Depends(get_user_service)):
    if users.get_user_by_email(payload.email) is not None:
        raise ApiError("Email already registered", status_code=status.HTTP_409_CONFLICT)
    return users.create_user(payload)


@router.put("/{user_id}", response_model=UserRead, summary="Update a user")
def update_user(user_id: int, payload: UserUpdate, users: UserService = Depends(get_user_service)):
    user = users.update_user(payload, user_id)
    if user is None:
        raise NotFound(USER_NOT_FOUND)
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a user")
def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    if not users.delete_user(user_id):
        raise NotFound(USER_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
