"""Application service: Register User use case.

Passwords are hashed once on the way in and never leave the domain.
"""

from __future__ import annotations

import logging

from mythic.application.dto import UserDTO
from mythic.application.mapping import user_dto
from mythic.domain.exceptions import FieldError, ValidationError
from mythic.domain.model.user import User, email_taken
from mythic.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class RegisterUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, email: str, name: str, password: str, user_id: str | None = None) -> UserDTO:
        user = User.register(email=email, name=name, password=password, user_id=user_id)
        with self._uow:
            if self._uow.users.get_by_id(user.id) is not None:
                raise ValidationError.for_fields(
                    [FieldError("id", f"User {user.id} already exists")]
                )
            if self._uow.users.get_by_email(str(user.email)) is not None:
                raise email_taken(user.email)
            self._uow.users.save(user)
            self._uow.commit()

        logger.info("User %s registered", user.id)
        return user_dto(user)
