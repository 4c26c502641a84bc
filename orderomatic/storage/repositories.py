"""Repository pattern implementation for data access layer."""

from __future__ import annotations

from typing import Iterable, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from orderomatic.models.dashboard import Dashboard
from orderomatic.models.widget import Widget
from orderomatic.ordering.types import WidgetItem


class DashboardRepository:
    """Repository for dashboard operations."""

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self.session = session

    def create(self, dashboard: Dashboard) -> Dashboard:
        """Create a new dashboard."""
        self.session.add(dashboard)
        self.session.flush()
        return dashboard

    def get_by_id(self, dashboard_id: str) -> Optional[Dashboard]:
        """Get dashboard by ID."""
        return self.session.get(Dashboard, dashboard_id)

    def get_all(self, limit: int = 100, offset: int = 0) -> list[Dashboard]:
        """Get all dashboards with pagination, most recent first."""
        stmt = (
            select(Dashboard)
            .order_by(Dashboard.created_at.desc(), Dashboard.id)
            .limit(limit)
            .offset(offset)
        )
        return list(self.session.scalars(stmt))

    def search_by_name(self, name_pattern: str, limit: int = 100) -> list[Dashboard]:
        """Search dashboards by name pattern."""
        stmt = (
            select(Dashboard)
            .where(Dashboard.name.ilike(f"%{name_pattern}%"))
            .order_by(Dashboard.created_at.desc(), Dashboard.id)
            .limit(limit)
        )
        return list(self.session.scalars(stmt))

    def update(self, dashboard: Dashboard) -> Dashboard:
        """Flush pending changes of a dashboard."""
        self.session.flush()
        return dashboard

    def delete(self, dashboard_id: str) -> bool:
        """Delete a dashboard (and its widgets) by ID."""
        dashboard = self.get_by_id(dashboard_id)
        if dashboard:
            self.session.delete(dashboard)
            self.session.flush()
            return True
        return False


class WidgetRepository:
    """Repository for widget operations."""

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self.session = session

    def create(self, widget: Widget) -> Widget:
        """Create a new widget."""
        self.session.add(widget)
        self.session.flush()
        return widget

    def get_by_id(self, widget_id: str) -> Optional[Widget]:
        """Get widget by ID."""
        return self.session.get(Widget, widget_id)

    def get_by_dashboard_id(self, dashboard_id: str) -> list[Widget]:
        """Get all widgets of a dashboard in stored order."""
        stmt = (
            select(Widget)
            .where(Widget.dashboard_id == dashboard_id)
            .order_by(Widget.order_index, Widget.id)
        )
        return list(self.session.scalars(stmt))

    def count_by_dashboard(self, dashboard_id: str) -> int:
        """Count widgets of a dashboard."""
        stmt = select(func.count(Widget.id)).where(Widget.dashboard_id == dashboard_id)
        return self.session.scalar(stmt) or 0

    def update(self, widget: Widget) -> Widget:
        """Flush pending changes of a widget."""
        self.session.flush()
        return widget

    def apply_arrangement(self, dashboard_id: str, items: Iterable[WidgetItem]) -> list[Widget]:
        """
        Write order, section and content of each item back to its row.

        Args:
            dashboard_id: Dashboard the items belong to
            items: Widgets as returned by the ordering operations

        Returns:
            Updated rows in the new order
        """
        rows = {widget.id: widget for widget in self.get_by_dashboard_id(dashboard_id)}
        updated = []
        for item in items:
            row = rows[item.id]
            row.order_index = item.order
            row.section_id = item.section_id or None
            if row.content != item.content:
                row.content = dict(item.content)
            updated.append(row)
        self.session.flush()
        return updated

    def delete(self, widget_id: str) -> bool:
        """Delete a widget (and, for sections, its members) by ID."""
        widget = self.get_by_id(widget_id)
        if widget:
            self.session.delete(widget)
            self.session.flush()
            return True
        return False
