"""User aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from mythic.domain.exceptions import FieldError, ValidationError
from mythic.domain.model.value_objects import EmailAddress, PasswordHash, new_id


@dataclass
class User:
    id: str
    email: EmailAddress
    name: str
    password_hash: PasswordHash

    @staticmethod
    def register(email: str, name: str, password: str, user_id: str | None = None) -> User:
        user = User(id=user_id or new_id(), email=None, name="", password_hash=None)  # type: ignore[arg-type]
        user.revise(email=email, name=name, password=password)
        return user

    def revise(
        self,
        email: str | None = None,
        name: str | None = None,
        password: str | None = None,
    ) -> None:
        """Validate every supplied field, then apply them together."""
        errors: list[FieldError] = []
        new_email = new_hash = None
        if email is not None:
            try:
                new_email = EmailAddress.of(email)
            except ValidationError as exc:
                errors.append(FieldError("email", exc.message))
        if name is not None and not name.strip():
            errors.append(FieldError("name", "Name is required"))
        if password is not None:
            try:
                new_hash = PasswordHash.from_plain(password)
            except ValidationError as exc:
                errors.append(FieldError("password", exc.message))
        if errors:
            raise ValidationError.for_fields(errors)

        if new_email is not None:
            self.email = new_email
        if name is not None:
            self.name = name.strip()
        if new_hash is not None:
            self.password_hash = new_hash


def email_taken(email: EmailAddress | str) -> ValidationError:
    """The error raised when another user already owns *email*."""
    return ValidationError.for_fields(
        [FieldError("email", f"E-mail {email} is already registered")]
    )
