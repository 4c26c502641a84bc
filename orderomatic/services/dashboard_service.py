"""Dashboard service layer for business logic and validation."""

import uuid

from sqlalchemy.orm import Session

from orderomatic.exceptions import (
    DatabaseError,
    DuplicateError,
    NotFoundError,
    ValidationError,
)
from orderomatic.models.dashboard import Dashboard
from orderomatic.services.validation import WidgetValidator
from orderomatic.storage.repositories import DashboardRepository, WidgetRepository


class DashboardService:
    """Service layer for dashboard CRUD operations with validation and error handling."""

    def __init__(self, session: Session):
        """
        Initialize dashboard service with database session.

        Args:
            session: SQLAlchemy database session
        """
        self.session = session
        self.dashboard_repo = DashboardRepository(session)
        self.widget_repo = WidgetRepository(session)
        self.validator = WidgetValidator()

    def create_dashboard(
        self,
        name: str,
        description: str = "",
        dashboard_id: str | None = None,
    ) -> Dashboard:
        """
        Create a new dashboard.

        Args:
            name: Dashboard name (required, non-empty)
            description: Optional free-form description
            dashboard_id: Optional dashboard ID. If not provided, generates a UUID.

        Returns:
            Created dashboard

        Raises:
            ValidationError: If name or ID is invalid
            DuplicateError: If a dashboard with the same ID already exists
            DatabaseError: If database operation fails
        """
        self.validator.validate_name(name)
        if not isinstance(description, str):
            raise ValidationError("Description must be a string", "description")

        if dashboard_id is None:
            dashboard_id = str(uuid.uuid4())
        else:
            self.validator.validate_id(dashboard_id)

        if self.dashboard_repo.get_by_id(dashboard_id) is not None:
            raise DuplicateError("Dashboard", "id", dashboard_id)

        try:
            dashboard = Dashboard(id=dashboard_id, name=name, description=description)
            self.dashboard_repo.create(dashboard)
            self.session.commit()
            return dashboard

        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to create dashboard: {str(e)}", e) from e

    def get_dashboard(self, dashboard_id: str) -> Dashboard:
        """
        Get dashboard by ID.

        Raises:
            ValidationError: If dashboard_id is invalid
            NotFoundError: If dashboard is not found
        """
        self.validator.validate_id(dashboard_id)
        dashboard = self.dashboard_repo.get_by_id(dashboard_id)
        if dashboard is None:
            raise NotFoundError("Dashboard", dashboard_id)
        return dashboard

    def update_dashboard(
        self,
        dashboard_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> Dashboard:
        """Update dashboard name and/or description."""
        if name is not None:
            self.validator.validate_name(name)
        if description is not None and not isinstance(description, str):
            raise ValidationError("Description must be a string", "description")

        dashboard = self.get_dashboard(dashboard_id)
        try:
            if name is not None:
                dashboard.name = name
            if description is not None:
                dashboard.description = description
            self.dashboard_repo.update(dashboard)
            self.session.commit()
            return dashboard

        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to update dashboard: {str(e)}", e) from e

    def delete_dashboard(self, dashboard_id: str) -> bool:
        """
        Delete a dashboard and all of its widgets.

        Returns:
            True if the dashboard was deleted, False if not found
        """
        self.validator.validate_id(dashboard_id)

        try:
            deleted = self.dashboard_repo.delete(dashboard_id)
            if deleted:
                self.session.commit()
            return deleted

        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to delete dashboard: {str(e)}", e) from e

    def list_dashboards(
        self,
        name_pattern: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[dict]:
        """
        List dashboards as summaries.

        Args:
            name_pattern: Optional case-insensitive substring filter on the name
            limit: Maximum number of results
            offset: Number of results to skip (ignored when filtering by name)

        Returns:
            Summaries with id, name, widget_count and updated_at

        Raises:
            ValidationError: If pagination parameters are invalid
            DatabaseError: If database operation fails
        """
        if limit < 0:
            raise ValidationError("limit must be non-negative", "limit")
        if offset < 0:
            raise ValidationError("offset must be non-negative", "offset")

        try:
            if name_pattern:
                dashboards = self.dashboard_repo.search_by_name(name_pattern, limit=limit)
            else:
                dashboards = self.dashboard_repo.get_all(limit=limit, offset=offset)

            return [
                {
                    "id": dashboard.id,
                    "name": dashboard.name,
                    "widget_count": self.widget_repo.count_by_dashboard(dashboard.id),
                    "updated_at": dashboard.updated_at,
                }
                for dashboard in dashboards
            ]

        except Exception as e:
            raise DatabaseError(f"Failed to list dashboards: {str(e)}", e) from e
