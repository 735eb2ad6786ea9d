"""Application service: Remove User use case.

Orders keep their ``user_id``; enrichment reports a missing user as null.
"""

from __future__ import annotations

from mythic.application.dto import UserDTO
from mythic.application.mapping import user_dto
from mythic.domain.exceptions import NotFoundError
from mythic.domain.repository.unit_of_work import UnitOfWork


class RemoveUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str) -> UserDTO:
        with self._uow:
            user = self._uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError(f"User {user_id} not found")
            self._uow.users.delete(user_id)
            self._uow.commit()
        return user_dto(user)
