"""Input validation for dashboards and widgets."""

from typing import Any

from orderomatic.exceptions import ValidationError
from orderomatic.ordering.types import WidgetType


class WidgetValidator:
    """Validates dashboard and widget input according to business rules."""

    # Validation constants
    NAME_MIN_LENGTH = 1
    NAME_MAX_LENGTH = 500
    ID_MAX_LENGTH = 255

    @staticmethod
    def validate_id(value: str, field: str = "id") -> None:
        """
        Validate a dashboard or widget ID.

        Args:
            value: ID to validate
            field: Name of the field reported in the error

        Raises:
            ValidationError: If the ID is invalid
        """
        if not isinstance(value, str):
            raise ValidationError("ID must be a string", field)
        if not value or not value.strip():
            raise ValidationError("ID cannot be empty", field)
        if len(value) > WidgetValidator.ID_MAX_LENGTH:
            raise ValidationError(
                f"ID must be at most {WidgetValidator.ID_MAX_LENGTH} characters", field
            )

    @staticmethod
    def validate_name(name: str) -> None:
        """
        Validate a dashboard or widget name.

        Raises:
            ValidationError: If name is invalid
        """
        if not isinstance(name, str):
            raise ValidationError("Name must be a string", "name")
        if not name or not name.strip():
            raise ValidationError("Name is required and cannot be empty", "name")
        if len(name) > WidgetValidator.NAME_MAX_LENGTH:
            raise ValidationError(
                f"Name must be at most {WidgetValidator.NAME_MAX_LENGTH} characters", "name"
            )

    @staticmethod
    def validate_widget_type(widget_type: Any) -> WidgetType:
        """Parse a widget type, raising ValidationError for unknown values."""
        try:
            return WidgetType(widget_type)
        except ValueError:
            allowed = ", ".join(t.value for t in WidgetType)
            raise ValidationError(
                f"Unknown widget type {widget_type!r} (expected one of: {allowed})",
                "widget_type",
            ) from None

    @staticmethod
    def validate_content(content: Any) -> None:
        if not isinstance(content, dict):
            raise ValidationError("Content must be a dictionary", "content")

    @staticmethod
    def validate_index(value: Any, field: str) -> None:
        """Positions must be integers; range checks are left to the ordering operations."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{field} must be an integer", field)
