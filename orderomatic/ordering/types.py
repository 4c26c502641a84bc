"""Domain and tree types shared by the ordering operations."""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

SECTION_END_PREFIX = "end-"


class WidgetType(str, Enum):
    """Kinds of dashboard widgets. Only sections can own other widgets."""

    TEXT = "Text"
    CHART = "Chart"
    TABLE = "Table"
    METRICS = "Metrics"
    IMAGE = "Image"
    SECTION = "Section"


class WidgetItem(BaseModel):
    """A dashboard widget as seen by the ordering operations.

    Instances are immutable; every change produces a new object through
    ``model_copy``. A section's member ids are kept in ``content["widgetIds"]``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    widget_type: WidgetType = WidgetType.TEXT
    section_id: str = ""
    order: int = 0
    content: dict[str, Any] = Field(default_factory=dict)

    @field_validator("section_id", mode="before")
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_section(self) -> bool:
        return self.widget_type == WidgetType.SECTION

    @property
    def child_ids(self) -> list[str]:
        return list(self.content.get("widgetIds", []))


class Metric(BaseModel):
    """A single entry of a Metrics widget."""

    model_config = ConfigDict(frozen=True, extra="allow")

    title: str
    value: Optional[float] = None
    change_over_time: str = ""


class WidgetNode(BaseModel):
    """Tree node wrapping a widget."""

    kind: Literal["widget"] = "widget"
    handle: int
    id: str
    drag_index: int = 0
    label: str
    children: list[int] = Field(default_factory=list)
    widget: WidgetItem
    section_id: str = ""

    @property
    def is_section(self) -> bool:
        return self.widget.is_section


class SectionEndNode(BaseModel):
    """Synthetic last child of a section node.

    Occupies the "end of this section" slot; dropping a widget here places it
    after the section instead of inside it.
    """

    kind: Literal["section_end"] = "section_end"
    handle: int
    id: str
    drag_index: int = 0
    label: str = ""
    children: list[int] = Field(default_factory=list)
    section_id: str

    @property
    def is_section(self) -> bool:
        return False


TreeNode = Annotated[Union[WidgetNode, SectionEndNode], Field(discriminator="kind")]


class WidgetTree(BaseModel):
    """Two-level addressable tree.

    ``nodes`` is an arena indexed by node handle; ``roots`` lists the handles
    of the top-level nodes in order. ``by_id`` and ``by_drag_index`` map to
    handles.
    """

    nodes: list[TreeNode] = Field(default_factory=list)
    roots: list[int] = Field(default_factory=list)
    by_id: dict[str, int] = Field(default_factory=dict)
    by_drag_index: dict[int, int] = Field(default_factory=dict)
    length: int = 0

    def get(self, node_id: str) -> WidgetNode | SectionEndNode | None:
        handle = self.by_id.get(node_id)
        return None if handle is None else self.nodes[handle]

    def at(self, drag_index: int) -> WidgetNode | SectionEndNode | None:
        handle = self.by_drag_index.get(drag_index)
        return None if handle is None else self.nodes[handle]

    def top_level(self) -> list[WidgetNode]:
        return [self.nodes[handle] for handle in self.roots]

    def children_of(self, node: WidgetNode | SectionEndNode) -> list[WidgetNode | SectionEndNode]:
        return [self.nodes[handle] for handle in node.children]


class MoveDecision(BaseModel):
    """Outcome of the move policy for one drag.

    ``section_id`` is the source's new section ("" for top-level) or None when
    the source keeps its current section.
    """

    model_config = ConfigDict(frozen=True)

    destination_index: int
    section_id: Optional[str] = None
