"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import hashlib
import re
import uuid
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from functools import total_ordering

from mythic.domain.exceptions import ValidationError

CENT = Decimal("0.01")


def new_id() -> str:
    """Generate a fresh entity identifier."""
    return uuid.uuid4().hex


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative amount in one currency.

    Decimal keeps order totals reproducible across runs.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        amount = self.amount
        if not isinstance(amount, Decimal):
            raise ValidationError(f"Expected a Decimal amount, got {type(amount).__name__}")
        if not amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {amount}")
        if amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {amount}")

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._amount_of(other), self.currency)

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._amount_of(other)

    def scaled(self, factor: Decimal) -> Money:
        """Multiply by *factor*, rounding half-even to whole cents."""
        result = (self.amount * factor).quantize(CENT, rounding=ROUND_HALF_EVEN)
        return Money(result, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def _amount_of(self, other: Money) -> Decimal:
        if other.currency != self.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return other.amount

    @classmethod
    def zero(cls, currency: str = "USD") -> Money:
        return cls(Decimal("0.00"), currency)

    @classmethod
    def of(cls, amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Coerce through ``str`` so floats keep their printed value."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return cls(value, currency)


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class EmailAddress:
    """A syntactically valid, lower-cased e-mail address."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _EMAIL_RE.match(self.value):
            raise ValidationError(f"Invalid e-mail address: {self.value!r}")

    @staticmethod
    def of(raw: str) -> EmailAddress:
        return EmailAddress((raw or "").strip().lower())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PasswordHash:
    """Hex-encoded SHA-512 digest of a password.

    Only the digest is ever stored; there is no verification path.
    """

    digest: str

    @staticmethod
    def from_plain(password: str) -> PasswordHash:
        if not password:
            raise ValidationError("Password is required")
        return PasswordHash(hashlib.sha512(password.encode("utf-8")).hexdigest())
