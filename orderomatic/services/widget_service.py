"""Widget service layer: creation, listing and drag-and-drop moves."""

import logging
import uuid
from typing import Any

from sqlalchemy.orm import Session

from orderomatic.exceptions import (
    DatabaseError,
    DuplicateError,
    NotFoundError,
    ValidationError,
)
from orderomatic.models.widget import Widget
from orderomatic.ordering import (
    Metric,
    WidgetItem,
    WidgetTree,
    WidgetType,
    build_tree,
    linearize,
    move_metric,
    move_widget,
    rebuild_widgets,
)
from orderomatic.services.validation import WidgetValidator
from orderomatic.storage.repositories import DashboardRepository, WidgetRepository

logger = logging.getLogger(__name__)


def to_item(widget: Widget) -> WidgetItem:
    """Convert a stored widget row into the immutable ordering type."""
    return WidgetItem(
        id=widget.id,
        name=widget.name,
        widget_type=WidgetType(widget.widget_type),
        section_id=widget.section_id,
        order=widget.order_index,
        content=dict(widget.content or {}),
    )


def normalize(items: list[WidgetItem]) -> list[WidgetItem]:
    """Regroup members under their sections and renumber orders from 0."""
    return rebuild_widgets(linearize(build_tree(items)))


class WidgetService:
    """Service layer for widget operations with validation and error handling."""

    def __init__(self, session: Session):
        """
        Initialize widget service with database session.

        Args:
            session: SQLAlchemy database session
        """
        self.session = session
        self.dashboard_repo = DashboardRepository(session)
        self.widget_repo = WidgetRepository(session)
        self.validator = WidgetValidator()

    def create_widget(
        self,
        dashboard_id: str,
        name: str,
        widget_type: str | WidgetType,
        section_id: str | None = None,
        content: dict[str, Any] | None = None,
        widget_id: str | None = None,
    ) -> WidgetItem:
        """
        Create a widget at the end of its section, or of the dashboard.

        Args:
            dashboard_id: Dashboard ID (required)
            name: Widget name (required, non-empty)
            widget_type: One of the WidgetType values
            section_id: Optional ID of the top-level Section widget to join
            content: Optional widget content (JSON structure)
            widget_id: Optional widget ID. If not provided, generates a UUID.

        Returns:
            The created widget, with its final order

        Raises:
            ValidationError: If any input is invalid or the section cannot hold the widget
            NotFoundError: If the dashboard or section is not found
            DuplicateError: If a widget with the same ID already exists
            DatabaseError: If database operation fails
        """
        self.validator.validate_id(dashboard_id, "dashboard_id")
        self.validator.validate_name(name)
        widget_type = self.validator.validate_widget_type(widget_type)
        if content is not None:
            self.validator.validate_content(content)

        if self.dashboard_repo.get_by_id(dashboard_id) is None:
            raise NotFoundError("Dashboard", dashboard_id)

        if section_id is not None:
            self.validator.validate_id(section_id, "section_id")
            self._check_section(dashboard_id, section_id, widget_type)

        if widget_id is None:
            widget_id = str(uuid.uuid4())
        else:
            self.validator.validate_id(widget_id)
        if self.widget_repo.get_by_id(widget_id) is not None:
            raise DuplicateError("Widget", "id", widget_id)

        try:
            items = self.list_widgets(dashboard_id)
            item = WidgetItem(
                id=widget_id,
                name=name,
                widget_type=widget_type,
                section_id=section_id,
                content=content or {},
            )
            items.insert(self._insert_position(items, section_id), item)
            arranged = normalize(items)

            self.widget_repo.create(
                Widget(
                    id=widget_id,
                    dashboard_id=dashboard_id,
                    section_id=section_id,
                    name=name,
                    widget_type=widget_type.value,
                    order_index=len(items) - 1,
                    content=dict(item.content),
                )
            )
            self.widget_repo.apply_arrangement(dashboard_id, arranged)
            self.session.commit()
            return next(w for w in arranged if w.id == widget_id)

        except (NotFoundError, ValidationError):
            raise
        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to create widget: {str(e)}", e) from e

    def get_widget(self, widget_id: str) -> WidgetItem:
        """
        Get widget by ID.

        Raises:
            ValidationError: If widget_id is invalid
            NotFoundError: If widget is not found
        """
        self.validator.validate_id(widget_id)
        widget = self.widget_repo.get_by_id(widget_id)
        if widget is None:
            raise NotFoundError("Widget", widget_id)
        return to_item(widget)

    def list_widgets(self, dashboard_id: str) -> list[WidgetItem]:
        """
        Get all widgets of a dashboard in stored order.

        Raises:
            ValidationError: If dashboard_id is invalid
            NotFoundError: If dashboard is not found
            DatabaseError: If database operation fails
        """
        self.validator.validate_id(dashboard_id, "dashboard_id")
        if self.dashboard_repo.get_by_id(dashboard_id) is None:
            raise NotFoundError("Dashboard", dashboard_id)

        try:
            return [to_item(w) for w in self.widget_repo.get_by_dashboard_id(dashboard_id)]
        except Exception as e:
            raise DatabaseError(f"Failed to list widgets: {str(e)}", e) from e

    def get_widget_tree(self, dashboard_id: str) -> WidgetTree:
        """Build the drag-and-drop tree for a dashboard's current widgets."""
        return build_tree(self.list_widgets(dashboard_id))

    def move_widget(
        self,
        dashboard_id: str,
        source_index: int,
        destination_index: int,
    ) -> list[WidgetItem] | None:
        """
        Apply a drag from one tree position to another and persist the result.

        Args:
            dashboard_id: Dashboard ID
            source_index: Drag index of the dragged widget
            destination_index: Drag index it was dropped on

        Returns:
            The full reordered widget list, or None when the move changes nothing

        Raises:
            ValidationError: If an argument has the wrong type
            NotFoundError: If dashboard is not found
            DatabaseError: If database operation fails
        """
        self.validator.validate_index(source_index, "source_index")
        self.validator.validate_index(destination_index, "destination_index")

        tree = self.get_widget_tree(dashboard_id)
        widgets = move_widget(tree, source_index, destination_index)
        if widgets is None:
            logger.debug(
                "Move %s -> %s on dashboard %s is a no-op", source_index, destination_index, dashboard_id
            )
            return None

        try:
            self.widget_repo.apply_arrangement(dashboard_id, widgets)
            self.session.commit()
            logger.info(
                "Moved widget %s -> %s on dashboard %s", source_index, destination_index, dashboard_id
            )
            return widgets

        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to move widget: {str(e)}", e) from e

    def delete_widget(self, widget_id: str) -> bool:
        """
        Delete a widget; deleting a section also deletes its members.

        Returns:
            True if the widget was deleted, False if not found
        """
        self.validator.validate_id(widget_id)

        try:
            widget = self.widget_repo.get_by_id(widget_id)
            if widget is None:
                return False
            dashboard_id = widget.dashboard_id
            self.widget_repo.delete(widget_id)
            self.widget_repo.apply_arrangement(dashboard_id, normalize(self.list_widgets(dashboard_id)))
            self.session.commit()
            return True

        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to delete widget: {str(e)}", e) from e

    def move_metric(self, widget_id: str, index: int, new_index: int) -> WidgetItem:
        """
        Reorder the metrics of a Metrics widget.

        Out-of-bounds positions leave the metrics unchanged.

        Raises:
            ValidationError: If the widget is not a Metrics widget or an index is not an integer
            NotFoundError: If widget is not found
            DatabaseError: If database operation fails
        """
        self.validator.validate_index(index, "index")
        self.validator.validate_index(new_index, "new_index")
        item = self.get_widget(widget_id)
        if item.widget_type != WidgetType.METRICS:
            raise ValidationError(f"Widget {widget_id} is not a Metrics widget", "widget_id")

        metrics = [Metric.model_validate(m) for m in item.content.get("metrics", [])]
        reordered = move_metric(metrics, index, new_index)
        if reordered == metrics:
            return item

        try:
            widget = self.widget_repo.get_by_id(widget_id)
            widget.content = {**item.content, "metrics": [m.model_dump() for m in reordered]}
            self.widget_repo.update(widget)
            self.session.commit()
            return to_item(widget)

        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to move metric: {str(e)}", e) from e

    def _check_section(self, dashboard_id: str, section_id: str, widget_type: WidgetType) -> None:
        if widget_type == WidgetType.SECTION:
            raise ValidationError("Sections cannot be nested inside other sections", "section_id")
        section = self.widget_repo.get_by_id(section_id)
        if section is None:
            raise NotFoundError("Widget", section_id)
        if section.dashboard_id != dashboard_id:
            raise ValidationError("Section must belong to the same dashboard", "section_id")
        if section.widget_type != WidgetType.SECTION.value or section.section_id is not None:
            raise ValidationError(f"Widget {section_id} is not a top-level section", "section_id")

    @staticmethod
    def _insert_position(items: list[WidgetItem], section_id: str | None) -> int:
        if not section_id:
            return len(items)
        position = len(items)
        for index, item in enumerate(items):
            if item.id == section_id or item.section_id == section_id:
                position = index + 1
        return position
