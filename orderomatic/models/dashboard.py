"""Dashboard model for storing dashboards."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orderomatic.models.base import Base, TimestampMixin


class Dashboard(Base, TimestampMixin):
    """Dashboard model owning an ordered list of widgets."""

    __tablename__ = "dashboards"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    widgets: Mapped[list["Widget"]] = relationship(
        "Widget",
        back_populates="dashboard",
        cascade="all, delete-orphan",
        order_by="Widget.order_index",
    )

    def __repr__(self) -> str:
        return f"<Dashboard(id={self.id!r}, name={self.name!r})>"
