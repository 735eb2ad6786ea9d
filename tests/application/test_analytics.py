"""Tests for the analytics event use cases."""

from datetime import datetime, timezone

import pytest

from mythic.application.record_event import (
    RecordEventHandler,
    RemoveEventHandler,
    ReplaceEventHandler,
)
from mythic.application.show_event import GoalDetailsHandler, ListEventsHandler, ShowEventHandler
from mythic.domain.exceptions import NotFoundError, ValidationError
from mythic.domain.model.event import EventKind
from tests.fakes import FakeUnitOfWork


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


class TestRecordEvent:

    def test_view(self, uow):
        dto = RecordEventHandler(uow).handle(EventKind.VIEW, "web", "/home", "v1", meta={"ref": "ad"})
        assert dto.kind == "view"
        assert dto.label is None
        assert dto.meta == {"ref": "ad"}

    def test_action_needs_label(self, uow):
        with pytest.raises(ValidationError, match="action"):
            RecordEventHandler(uow).handle(EventKind.ACTION, "web", "/home", "v1")

    def test_kinds_are_separate(self, uow):
        dto = RecordEventHandler(uow).handle(EventKind.VIEW, "web", "/", "v1")
        with pytest.raises(NotFoundError, match="Action"):
            ShowEventHandler(uow).handle(EventKind.ACTION, dto.id)
        assert ListEventsHandler(uow).handle(EventKind.ACTION) == []


class TestReplaceAndRemoveEvent:

    def test_replace(self, uow):
        when = datetime(2024, 5, 1, tzinfo=timezone.utc)
        dto = RecordEventHandler(uow).handle(
            EventKind.ACTION, "web", "/", "v1", label="click", created_at=when
        )

        replaced = ReplaceEventHandler(uow).handle(
            EventKind.ACTION, dto.id, "app", "/shop", "v1", label="scroll"
        )

        assert (replaced.source, replaced.label) == ("app", "scroll")
        assert replaced.created_at == when

    def test_replace_unknown(self, uow):
        with pytest.raises(NotFoundError):
            ReplaceEventHandler(uow).handle(EventKind.VIEW, "e9", "web", "/", "v1")

    def test_remove(self, uow):
        dto = RecordEventHandler(uow).handle(EventKind.VIEW, "web", "/", "v1")
        RemoveEventHandler(uow).handle(EventKind.VIEW, dto.id)
        assert ListEventsHandler(uow).handle(EventKind.VIEW) == []

    def test_remove_unknown(self, uow):
        with pytest.raises(NotFoundError):
            RemoveEventHandler(uow).handle(EventKind.GOAL, "e9")


class TestGoalDetails:

    def test_collects_visitor_history(self, uow):
        record = RecordEventHandler(uow)
        record.handle(EventKind.VIEW, "web", "/", "v1")
        record.handle(EventKind.VIEW, "web", "/shop", "v1")
        record.handle(EventKind.VIEW, "web", "/", "v2")
        record.handle(EventKind.ACTION, "web", "/shop", "v1", label="add-to-cart")
        goal = record.handle(EventKind.GOAL, "web", "/checkout", "v1", label="purchase")

        details = GoalDetailsHandler(uow).handle(goal.id)

        assert details.goal == goal
        assert sorted(v.url for v in details.views) == ["/", "/shop"]
        assert [a.label for a in details.actions] == ["add-to-cart"]

    def test_unknown_goal(self, uow):
        with pytest.raises(NotFoundError, match="Goal"):
            GoalDetailsHandler(uow).handle("g9")
