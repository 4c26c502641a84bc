"""Ordering operations for nested dashboard widgets."""

from orderomatic.ordering.move_engine import apply_move, linearize, move_widget, resolve_move
from orderomatic.ordering.rebuilder import rebuild_widgets
from orderomatic.ordering.reorder import move_metric, relocate
from orderomatic.ordering.tree_builder import WidgetTreeBuilder, build_tree
from orderomatic.ordering.types import (
    Metric,
    MoveDecision,
    SectionEndNode,
    WidgetItem,
    WidgetNode,
    WidgetTree,
    WidgetType,
)

__all__ = [
    "Metric",
    "MoveDecision",
    "SectionEndNode",
    "WidgetItem",
    "WidgetNode",
    "WidgetTree",
    "WidgetTreeBuilder",
    "WidgetType",
    "apply_move",
    "build_tree",
    "linearize",
    "move_metric",
    "move_widget",
    "rebuild_widgets",
    "relocate",
    "resolve_move",
]
