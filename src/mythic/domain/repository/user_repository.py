"""Abstract repository for the User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mythic.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the user owning *email*, or None."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Remove a user."""
