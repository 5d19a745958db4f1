"""Microposts resource endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from micropost_backend.api.dependencies import get_micropost_service
from micropost_backend.api.models import (
    MicropostCreateRequest,
    MicropostResponse,
    MicropostUpdateRequest,
)
from micropost_backend.api.services import (
    MicropostNotFoundError,
    MicropostService,
    UnknownAuthorError,
)
from micropost_backend.database import SessionDep

router = APIRouter(prefix="/microposts", tags=["microposts"])


def _micropost_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Micropost not found"
    )


def _unknown_author() -> HTTPException:
    return HTTPException(
        status_code=422, detail="User must exist"
    )


@router.get("", response_model=list[MicropostResponse], name="microposts#index")
def list_microposts(
    session: SessionDep,
    user_id: UUID | None = None,
    micropost_service: MicropostService = Depends(get_micropost_service),
) -> list[MicropostResponse]:
    """List microposts, optionally only those written by ``user_id``."""

    microposts = micropost_service.list_microposts(session=session, user_id=user_id)
    return [MicropostResponse.model_validate(micropost) for micropost in microposts]


@router.post(
    "",
    response_model=MicropostResponse,
    status_code=status.HTTP_201_CREATED,
    name="microposts#create",
)
def create_micropost(
    session: SessionDep,
    payload: MicropostCreateRequest,
    micropost_service: MicropostService = Depends(get_micropost_service),
) -> MicropostResponse:
    try:
        micropost = micropost_service.create_micropost(
            session=session, content=payload.content, user_id=payload.user_id
        )
    except UnknownAuthorError as exc:
        raise _unknown_author() from exc

    return MicropostResponse.model_validate(micropost)


@router.get("/{micropost_id}", response_model=MicropostResponse, name="microposts#show")
def show_micropost(
    session: SessionDep,
    micropost_id: UUID,
    micropost_service: MicropostService = Depends(get_micropost_service),
) -> MicropostResponse:
    try:
        micropost = micropost_service.get_micropost(
            session=session, micropost_id=micropost_id
        )
    except MicropostNotFoundError as exc:
        raise _micropost_not_found() from exc

    return MicropostResponse.model_validate(micropost)


@router.api_route(
    "/{micropost_id}",
    methods=["PATCH", "PUT"],
    response_model=MicropostResponse,
    name="microposts#update",
)
def update_micropost(
    session: SessionDep,
    micropost_id: UUID,
    payload: MicropostUpdateRequest,
    micropost_service: MicropostService = Depends(get_micropost_service),
) -> MicropostResponse:
    try:
        micropost = micropost_service.update_micropost(
            session=session,
            micropost_id=micropost_id,
            content=payload.content,
            user_id=payload.user_id,
        )
    except MicropostNotFoundError as exc:
        raise _micropost_not_found() from exc
    except UnknownAuthorError as exc:
        raise _unknown_author() from exc

    return MicropostResponse.model_validate(micropost)


@router.delete(
    "/{micropost_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="microposts#destroy",
)
def destroy_micropost(
    session: SessionDep,
    micropost_id: UUID,
    micropost_service: MicropostService = Depends(get_micropost_service),
) -> Response:
    try:
        micropost_service.delete_micropost(session=session, micropost_id=micropost_id)
    except MicropostNotFoundError as exc:
        raise _micropost_not_found() from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)
