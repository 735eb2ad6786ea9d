"""SQLAlchemy-backed user repository."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mythic.domain.model.user import User, email_taken
from mythic.domain.model.value_objects import EmailAddress, PasswordHash
from mythic.domain.repository.user_repository import UserRepository
from mythic.infrastructure.persistence.errors import translate_errors
from mythic.infrastructure.persistence.orm import UserRow


class SqlUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: str) -> User | None:
        with translate_errors("load user"):
            row = self._session.get(UserRow, user_id)
        return self._to_domain(row) if row is not None else None

    def get_by_email(self, email: str) -> User | None:
        with translate_errors("load user"):
            row = self._session.query(UserRow).filter(UserRow.email == email).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[User]:
        with translate_errors("list users"):
            rows = self._session.query(UserRow).order_by(UserRow.email).all()
        return [self._to_domain(r) for r in rows]

    def save(self, user: User) -> None:
        """Insert or update *user*.

        A concurrent writer may take the e-mail between the caller's check
        and this flush; the unique index then rejects it.
        """
        with translate_errors(f"save user {user.id}"):
            self._session.merge(
                UserRow(
                    id=user.id,
                    email=str(user.email),
                    name=user.name,
                    password_hash=user.password_hash.digest,
                )
            )
            try:
                self._session.flush()
            except IntegrityError as exc:
                raise email_taken(user.email) from exc

    def delete(self, user_id: str) -> None:
        with translate_errors(f"delete user {user_id}"):
            self._session.query(UserRow).filter(UserRow.id == user_id).delete()

    @staticmethod
    def _to_domain(row: UserRow) -> User:
        return User(
            id=row.id,
            email=EmailAddress(row.email),
            name=row.name,
            password_hash=PasswordHash(row.password_hash),
        )
