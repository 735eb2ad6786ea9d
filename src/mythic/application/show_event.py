"""Application services: analytics queries."""

from __future__ import annotations

from mythic.application.dto import EventDTO, GoalDetailsDTO
from mythic.application.mapping import event_dto
from mythic.domain.exceptions import NotFoundError
from mythic.domain.model.event import EventKind
from mythic.domain.repository.unit_of_work import UnitOfWork


class ShowEventHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, kind: EventKind, event_id: str) -> EventDTO:
        with self._uow:
            event = self._uow.events.get_by_id(kind, event_id)
        if event is None:
            raise NotFoundError(f"{kind.value.capitalize()} {event_id} not found")
        return event_dto(event)


class ListEventsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, kind: EventKind) -> list[EventDTO]:
        with self._uow:
            return [event_dto(e) for e in self._uow.events.list_by_kind(kind)]


class GoalDetailsHandler:
    """A goal together with every view and action from the same visitor."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, goal_id: str) -> GoalDetailsDTO:
        with self._uow:
            goal = self._uow.events.get_by_id(EventKind.GOAL, goal_id)
            if goal is None:
                raise NotFoundError(f"Goal {goal_id} not found")
            views = self._uow.events.list_by_visitor(EventKind.VIEW, goal.visitor)
            actions = self._uow.events.list_by_visitor(EventKind.ACTION, goal.visitor)
        return GoalDetailsDTO(
            goal=event_dto(goal),
            views=[event_dto(v) for v in views],
            actions=[event_dto(a) for a in actions],
        )
