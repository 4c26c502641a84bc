"""Storage layer for Order-O-Matic."""

from orderomatic.storage.database import Database, get_db
from orderomatic.storage.repositories import DashboardRepository, WidgetRepository

__all__ = [
    "Database",
    "get_db",
    "DashboardRepository",
    "WidgetRepository",
]
