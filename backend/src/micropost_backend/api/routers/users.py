"""Users resource endpoints, including the ``destroy_all`` collection action."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from micropost_backend.api.dependencies import get_user_service
from micropost_backend.api.models import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from micropost_backend.api.services import (
    EmailAlreadyTakenError,
    UserNotFoundError,
    UserService,
)
from micropost_backend.database import SessionDep

router = APIRouter(prefix="/users", tags=["users"])


def _user_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


def _email_taken() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT, detail="Email has already been taken"
    )


@router.get("", response_model=list[UserResponse], name="users#index")
def list_users(
    session: SessionDep,
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List every user, oldest first."""

    users = user_service.list_users(session=session)
    return [UserResponse.model_validate(user) for user in users]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    name="users#create",
)
def create_user(
    session: SessionDep,
    payload: UserCreateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = user_service.create_user(
            session=session, name=payload.name, email=payload.email
        )
    except EmailAlreadyTakenError as exc:
        raise _email_taken() from exc

    return UserResponse.model_validate(user)


# Collection routes must be declared before the member routes below, otherwise
# ``/users/destroy_all`` would be matched as ``/users/{user_id}``.
@router.delete(
    "/destroy_all",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="users#destroy_all",
)
def destroy_all_users(
    session: SessionDep,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    """Delete every user and, through the foreign key cascade, every micropost."""

    user_service.delete_all_users(session=session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}", response_model=UserResponse, name="users#show")
def show_user(
    session: SessionDep,
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = user_service.get_user(session=session, user_id=user_id)
    except UserNotFoundError as exc:
        raise _user_not_found() from exc

    return UserResponse.model_validate(user)


@router.api_route(
    "/{user_id}",
    methods=["PATCH", "PUT"],
    response_model=UserResponse,
    name="users#update",
)
def update_user(
    session: SessionDep,
    user_id: UUID,
    payload: UserUpdateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update the given fields of a user; PUT and PATCH behave the same."""

    try:
        user = user_service.update_user(
            session=session,
            user_id=user_id,
            name=payload.name,
            email=payload.email,
        )
    except UserNotFoundError as exc:
        raise _user_not_found() from exc
    except EmailAlreadyTakenError as exc:
        raise _email_taken() from exc

    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="users#destroy",
)
def destroy_user(
    session: SessionDep,
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    try:
        user_service.delete_user(session=session, user_id=user_id)
    except UserNotFoundError as exc:
        raise _user_not_found() from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)
