"""Analytics events: page views, user actions and reached goals.

All three kinds share the same shape.  ``label`` holds the action name for
actions and the goal name for goals; views have none.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from mythic.domain.exceptions import FieldError, ValidationError
from mythic.domain.model.value_objects import new_id


class EventKind(Enum):
    VIEW = "view"
    ACTION = "action"
    GOAL = "goal"

    @property
    def label_field(self) -> str | None:
        """Name of the kind-specific field, if any."""
        return {EventKind.ACTION: "action", EventKind.GOAL: "goal"}.get(self)


@dataclass
class AnalyticsEvent:
    id: str
    kind: EventKind
    source: str
    url: str
    visitor: str
    label: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def record(
        kind: EventKind,
        source: str,
        url: str,
        visitor: str,
        label: str | None = None,
        created_at: datetime | None = None,
        meta: dict[str, Any] | None = None,
        event_id: str | None = None,
    ) -> AnalyticsEvent:
        event = AnalyticsEvent(id=event_id or new_id(), kind=kind, source="", url="", visitor="")
        event.replace(source, url, visitor, label, created_at, meta)
        return event

    def replace(
        self,
        source: str,
        url: str,
        visitor: str,
        label: str | None = None,
        created_at: datetime | None = None,
        meta: dict[str, Any] | None = None,
    ) -> None:
        """Overwrite every field; a missing ``created_at`` keeps the current one."""
        errors: list[FieldError] = []
        for name, value in (("source", source), ("url", url), ("visitor", visitor)):
            if not value or not value.strip():
                errors.append(FieldError(name, f"{name} is required"))
        label_field = self.kind.label_field
        if label_field and (not label or not label.strip()):
            errors.append(FieldError(label_field, f"{label_field} is required"))
        if errors:
            raise ValidationError.for_fields(errors)

        self.source = source
        self.url = url
        self.visitor = visitor
        self.label = label if label_field else None
        if created_at is not None:
            self.created_at = created_at
        self.meta = dict(meta or {})
