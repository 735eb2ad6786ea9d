"""Application service: Update User use case (full or partial)."""

from __future__ import annotations

from mythic.application.dto import UserDTO
from mythic.application.mapping import user_dto
from mythic.domain.exceptions import NotFoundError, ValidationError
from mythic.domain.model.user import email_taken
from mythic.domain.repository.unit_of_work import UnitOfWork


class UpdateUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        user_id: str,
        email: str | None = None,
        name: str | None = None,
        password: str | None = None,
    ) -> UserDTO:
        if email is None and name is None and password is None:
            raise ValidationError("Nothing to update")

        with self._uow:
            user = self._uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError(f"User {user_id} not found")

            user.revise(email=email, name=name, password=password)
            owner = self._uow.users.get_by_email(str(user.email))
            if owner is not None and owner.id != user.id:
                raise email_taken(user.email)
            self._uow.users.save(user)
            self._uow.commit()
        return user_dto(user)
