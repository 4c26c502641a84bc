"""Service layer for business logic and validation."""

from orderomatic.services.dashboard_service import DashboardService
from orderomatic.services.validation import WidgetValidator
from orderomatic.services.widget_service import WidgetService

__all__ = ["DashboardService", "WidgetService", "WidgetValidator"]
