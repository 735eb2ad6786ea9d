"""Domain service: Referential Integrity Checker.

Confirms that every referenced id exists before a write begins.  The
requested ids are compared as a set against what the store returns, so
repeated ids in a request cannot mask a missing one.
"""

from __future__ import annotations

from typing import Any, Protocol

from mythic.domain.exceptions import ReferentialIntegrityError


class _Lookup(Protocol):
    def get_many(self, ids: list[str], lock: bool = False) -> list[Any]: ...


class ReferentialIntegrityChecker:

    def __init__(self, lookup: _Lookup, entity: str = "product") -> None:
        self._lookup = lookup
        self._entity = entity

    def confirm(self, ids: list[str] | tuple[str, ...], lock: bool = True) -> list[Any]:
        """Return the referenced entities in request order.

        Raises ReferentialIntegrityError naming every missing id.  With
        ``lock`` the rows are held for the rest of the unit of work.
        """
        requested = list(dict.fromkeys(ids))
        if not requested:
            return []
        found = {e.id: e for e in self._lookup.get_many(requested, lock=lock)}
        missing = [i for i in requested if i not in found]
        if missing:
            raise ReferentialIntegrityError(self._entity, missing)
        return [found[i] for i in requested]
