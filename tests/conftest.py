"""Shared pytest fixtures and test utilities for Order-O-Matic tests."""

import os
import tempfile
from typing import Generator

import pytest

from orderomatic.ordering.types import WidgetItem, WidgetType
from orderomatic.services.dashboard_service import DashboardService
from orderomatic.services.widget_service import WidgetService
from orderomatic.storage.database import Database, reset_db


@pytest.fixture(scope="function")
def temp_db() -> Generator[Database, None, None]:
    """
    Create a temporary SQLite database for testing.

    Yields:
        Database instance with tables created
    """
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    reset_db()

    database = Database(f"sqlite:///{db_path}")
    database.create_tables()

    yield database

    database.drop_tables()
    database.dispose()
    reset_db()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def dashboard_service(temp_db):
    """Create a dashboard service instance."""
    with temp_db.session() as session:
        yield DashboardService(session)


@pytest.fixture
def widget_service(temp_db):
    """Create a widget service instance together with an empty dashboard."""
    with temp_db.session() as session:
        dashboard = DashboardService(session).create_dashboard(
            name="Operations", dashboard_id="dash-1"
        )
        yield WidgetService(session), dashboard.id


@pytest.fixture
def sectioned_dashboard(widget_service):
    """
    Dashboard laid out as A, S(B, C), D.

    Drag indices: A=0, S=1, B=2, C=3, end-S=4, D=5.
    """
    service, dashboard_id = widget_service
    service.create_widget(dashboard_id, "A", "Text", widget_id="A")
    service.create_widget(dashboard_id, "S", "Section", widget_id="S")
    service.create_widget(dashboard_id, "B", "Chart", section_id="S", widget_id="B")
    service.create_widget(dashboard_id, "C", "Table", section_id="S", widget_id="C")
    service.create_widget(dashboard_id, "D", "Text", widget_id="D")
    return service, dashboard_id


class WidgetFactory:
    """Builds in-memory widget lists for the ordering tests."""

    @staticmethod
    def widget(widget_id: str, section_id: str = "", order: int = 0, **kwargs) -> WidgetItem:
        return WidgetItem(id=widget_id, name=widget_id, section_id=section_id, order=order, **kwargs)

    @staticmethod
    def section(widget_id: str, order: int = 0, members: list[str] | None = None) -> WidgetItem:
        return WidgetItem(
            id=widget_id,
            name=widget_id,
            widget_type=WidgetType.SECTION,
            order=order,
            content={"title": widget_id, "widgetIds": list(members or [])},
        )

    @classmethod
    def layout(cls, *entries: tuple[str, str]) -> list[WidgetItem]:
        """
        Build a widget list from (id, section) pairs.

        A section value of "section" makes the entry a Section widget;
        anything else is the id of the section it belongs to ("" = top level).
        """
        items = []
        for order, (widget_id, section) in enumerate(entries):
            if section == "section":
                members = [w for w, s in entries if s == widget_id]
                items.append(cls.section(widget_id, order=order, members=members))
            else:
                items.append(cls.widget(widget_id, section_id=section, order=order))
        return items


@pytest.fixture
def factory():
    """Provide the WidgetFactory helpers."""
    return WidgetFactory


@pytest.fixture
def basic_items(factory):
    """A, S(B, C): drag indices A=0, S=1, B=2, C=3, end-S=4."""
    return factory.layout(("A", ""), ("S", "section"), ("B", "S"), ("C", "S"))


@pytest.fixture
def trailing_items(factory):
    """A, S(B, C), D: drag indices A=0, S=1, B=2, C=3, end-S=4, D=5."""
    return factory.layout(("A", ""), ("S", "section"), ("B", "S"), ("C", "S"), ("D", ""))


@pytest.fixture
def two_section_items(factory):
    """S1(X), S2(Y), Z: drag indices S1=0, X=1, end-S1=2, S2=3, Y=4, end-S2=5, Z=6."""
    return factory.layout(("S1", "section"), ("X", "S1"), ("S2", "section"), ("Y", "S2"), ("Z", ""))


def ids(widgets) -> list[str]:
    return [w.id for w in widgets]


def by_id(widgets) -> dict[str, WidgetItem]:
    return {w.id: w for w in widgets}


@pytest.fixture
def helpers():
    """Provide small assertion helpers."""

    class Helpers:
        ids = staticmethod(ids)
        by_id = staticmethod(by_id)

        @staticmethod
        def assert_consistent(widgets) -> None:
            """Orders are 0..n-1 and every section lists exactly its members, in order."""
            assert [w.order for w in widgets] == list(range(len(widgets)))
            for widget in widgets:
                if widget.is_section:
                    expected = [w.id for w in widgets if w.section_id == widget.id]
                    assert widget.child_ids == expected

    return Helpers
