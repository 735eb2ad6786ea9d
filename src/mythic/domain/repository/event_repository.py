"""Abstract repository for analytics events."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mythic.domain.model.event import AnalyticsEvent, EventKind


class EventRepository(ABC):

    @abstractmethod
    def get_by_id(self, kind: EventKind, event_id: str) -> AnalyticsEvent | None:
        """Return an event of the given kind, or None."""

    @abstractmethod
    def list_by_kind(self, kind: EventKind) -> list[AnalyticsEvent]:
        """Return every event of one kind."""

    @abstractmethod
    def list_by_visitor(self, kind: EventKind, visitor: str) -> list[AnalyticsEvent]:
        """Return events of one kind left by *visitor*."""

    @abstractmethod
    def save(self, event: AnalyticsEvent) -> None:
        """Persist a new or replaced event."""

    @abstractmethod
    def delete(self, kind: EventKind, event_id: str) -> None:
        """Remove an event."""
