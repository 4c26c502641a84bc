"""Database models for Order-O-Matic."""

from orderomatic.models.base import Base
from orderomatic.models.dashboard import Dashboard
from orderomatic.models.widget import Widget

__all__ = ["Base", "Dashboard", "Widget"]
