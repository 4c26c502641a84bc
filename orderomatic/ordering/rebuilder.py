"""Rebuild the ordered widget list from a sequence of tree nodes."""

from typing import Iterable

from orderomatic.ordering.types import SectionEndNode, WidgetItem, WidgetNode


def rebuild_widgets(nodes: Iterable[WidgetNode | SectionEndNode]) -> list[WidgetItem]:
    """
    Build the widget list for a (possibly reordered) node sequence.

    End nodes are skipped. Each widget takes the section of the node that
    wraps it and its position in the output as ``order``. Section member
    lists are recomputed from the output order, ignoring whatever the
    sections listed before.

    Args:
        nodes: Nodes in their new order

    Returns:
        New widget objects with contiguous orders starting at 0
    """
    widgets: list[WidgetItem] = []
    members: dict[str, list[str]] = {}

    for node in nodes:
        if not isinstance(node, WidgetNode):
            continue
        changes = {"order": len(widgets), "content": dict(node.widget.content)}
        if node.section_id != node.widget.section_id:
            changes["section_id"] = node.section_id
        if node.widget.is_section:
            members[node.id] = []
        widgets.append(node.widget.model_copy(update=changes))

    for widget in widgets:
        if widget.section_id and widget.section_id in members:
            members[widget.section_id].append(widget.id)

    return [
        widget.model_copy(update={"content": {**widget.content, "widgetIds": members[widget.id]}})
        if widget.id in members
        else widget
        for widget in widgets
    ]
