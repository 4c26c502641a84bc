"""Build the addressable widget tree from an ordered widget list."""

import logging
from typing import Iterable

from orderomatic.ordering.types import (
    SECTION_END_PREFIX,
    SectionEndNode,
    WidgetItem,
    WidgetNode,
    WidgetTree,
)

logger = logging.getLogger(__name__)


class WidgetTreeBuilder:
    """Builds a two-level tree with dense drag indices.

    Every ``build()`` call starts from an empty tree, so one builder can be
    reused across widget lists.
    """

    def __init__(self) -> None:
        self.tree = WidgetTree()

    def build(self, widgets: Iterable[WidgetItem]) -> WidgetTree:
        """
        Build the tree for an ordered widget list.

        Top-level widgets are labelled "1", "2", ...; section members are
        labelled relative to their section ("2.1", "2.2"). Drag indices are
        assigned in pre-order, with a trailing end node for every section.

        Args:
            widgets: Widgets in their stored order

        Returns:
            The populated tree
        """
        self.tree = WidgetTree()
        widgets = list(widgets)
        top_level: dict[str, WidgetNode] = {}

        for widget in widgets:
            if not widget.section_id:
                self._add_top_level(widget, top_level)

        for widget in widgets:
            if not widget.section_id:
                continue
            parent = top_level.get(widget.section_id)
            if parent is None or not parent.is_section:
                logger.warning(
                    "Widget %s references unknown section %r, placing it at top level",
                    widget.id,
                    widget.section_id,
                )
                self._add_top_level(widget, top_level)
                continue
            child = self._add_node(
                widget.id,
                label=f"{parent.label}.{len(parent.children) + 1}",
                widget=widget,
                section_id=parent.id,
            )
            parent.children.append(child.handle)

        self._assign_drag_indices()
        return self.tree

    def _add_top_level(self, widget: WidgetItem, top_level: dict[str, WidgetNode]) -> None:
        node = self._add_node(widget.id, label=str(len(self.tree.roots) + 1), widget=widget)
        self.tree.roots.append(node.handle)
        top_level[widget.id] = node

    def _add_node(self, node_id: str, label: str, widget: WidgetItem, section_id: str = "") -> WidgetNode:
        node = WidgetNode(
            handle=len(self.tree.nodes),
            id=node_id,
            label=label,
            widget=widget,
            section_id=section_id,
        )
        self.tree.nodes.append(node)
        self.tree.by_id[node_id] = node.handle
        return node

    def _assign_drag_indices(self) -> None:
        counter = 0
        for handle in self.tree.roots:
            node = self.tree.nodes[handle]
            counter = self._index(node, counter)
            for child_handle in list(node.children):
                counter = self._index(self.tree.nodes[child_handle], counter)
            if node.is_section:
                end = SectionEndNode(
                    handle=len(self.tree.nodes),
                    id=f"{SECTION_END_PREFIX}{node.id}",
                    section_id=node.id,
                )
                self.tree.nodes.append(end)
                self.tree.by_id[end.id] = end.handle
                node.children.append(end.handle)
                counter = self._index(end, counter)
        self.tree.length = counter

    def _index(self, node: WidgetNode | SectionEndNode, counter: int) -> int:
        node.drag_index = counter
        self.tree.by_drag_index[counter] = node.handle
        return counter + 1


def build_tree(widgets: Iterable[WidgetItem]) -> WidgetTree:
    """Build the addressable tree for an ordered widget list."""
    return WidgetTreeBuilder().build(widgets)
