"""User endpoints.  Responses carry public fields only."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from mythic.application.register_user import RegisterUserHandler
from mythic.application.remove_user import RemoveUserHandler
from mythic.application.show_user import ListUsersHandler, ShowUserHandler
from mythic.application.update_user import UpdateUserHandler
from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.infrastructure.api.dependencies import get_uow
from mythic.infrastructure.api.schemas import UserCreate, UserOut, UserPatch

router = APIRouter()


@router.post("", response_model=UserOut, status_code=201)
def register_user(body: UserCreate, uow: UnitOfWork = Depends(get_uow)) -> UserOut:
    dto = RegisterUserHandler(uow).handle(email=body.email, name=body.name, password=body.password)
    return UserOut.from_dto(dto)


@router.get("", response_model=List[UserOut])
def list_users(uow: UnitOfWork = Depends(get_uow)) -> List[UserOut]:
    return [UserOut.from_dto(u) for u in ListUsersHandler(uow).handle()]


@router.get("/{user_id}", response_model=UserOut)
def show_user(user_id: str, uow: UnitOfWork = Depends(get_uow)) -> UserOut:
    return UserOut.from_dto(ShowUserHandler(uow).handle(user_id))


@router.put("/{user_id}", response_model=UserOut)
def replace_user(user_id: str, body: UserCreate, uow: UnitOfWork = Depends(get_uow)) -> UserOut:
    dto = UpdateUserHandler(uow).handle(
        user_id, email=body.email, name=body.name, password=body.password
    )
    return UserOut.from_dto(dto)


@router.patch("/{user_id}", response_model=UserOut)
def patch_user(user_id: str, body: UserPatch, uow: UnitOfWork = Depends(get_uow)) -> UserOut:
    dto = UpdateUserHandler(uow).handle(
        user_id, email=body.email, name=body.name, password=body.password
    )
    return UserOut.from_dto(dto)


@router.delete("/{user_id}", response_model=UserOut)
def remove_user(user_id: str, uow: UnitOfWork = Depends(get_uow)) -> UserOut:
    return UserOut.from_dto(RemoveUserHandler(uow).handle(user_id))
