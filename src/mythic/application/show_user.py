"""Application service: Show / List Users (queries)."""

from __future__ import annotations

from mythic.application.dto import UserDTO
from mythic.application.mapping import user_dto
from mythic.domain.exceptions import NotFoundError
from mythic.domain.repository.unit_of_work import UnitOfWork


class ShowUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str) -> UserDTO:
        with self._uow:
            user = self._uow.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user_dto(user)


class ListUsersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[UserDTO]:
        with self._uow:
            return [user_dto(u) for u in self._uow.users.list_all()]
