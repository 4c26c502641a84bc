"""Widget model for storing dashboard widgets."""

from typing import Any, Optional

from sqlalchemy import ForeignKey, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orderomatic.models.base import Base, TimestampMixin


class Widget(Base, TimestampMixin):
    """Widget model; section widgets own the widgets that reference them."""

    __tablename__ = "widgets"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    dashboard_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("dashboards.id", ondelete="CASCADE"), nullable=False, index=True
    )
    section_id: Mapped[Optional[str]] = mapped_column(
        String(255),
        ForeignKey("widgets.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    widget_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    content: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    # Relationships
    dashboard: Mapped["Dashboard"] = relationship("Dashboard", back_populates="widgets")
    section: Mapped[Optional["Widget"]] = relationship(
        "Widget", remote_side=[id], back_populates="members"
    )
    members: Mapped[list["Widget"]] = relationship(
        "Widget", back_populates="section", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Widget(id={self.id!r}, widget_type={self.widget_type!r}, dashboard_id={self.dashboard_id!r})>"
