"""Model serialization for MCP responses."""

from typing import Any

from orderomatic.ordering.types import WidgetItem, WidgetTree


def serialize_model(obj: Any) -> dict[str, Any]:
    """
    Serialize a SQLAlchemy model to dictionary.

    Relationship collections are left out; datetimes become ISO strings.

    Args:
        obj: SQLAlchemy model instance

    Returns:
        Dictionary representation of the model
    """
    if hasattr(obj, "__table__"):
        result = {}
        for column in obj.__table__.columns:
            value = getattr(obj, column.key)
            result[column.key] = value.isoformat() if hasattr(value, "isoformat") else value
        return result
    return obj


def serialize_widget(widget: WidgetItem) -> dict[str, Any]:
    """Serialize a widget to its JSON form."""
    return widget.model_dump(mode="json")


def serialize_widget_tree(tree: WidgetTree) -> dict[str, Any]:
    """
    Serialize the drag-and-drop tree with nested children.

    Args:
        tree: Tree built for a dashboard

    Returns:
        Dictionary with "nodes" (nested) and "length"
    """

    def serialize_node(node: Any) -> dict[str, Any]:
        result = {
            "id": node.id,
            "kind": node.kind,
            "drag_index": node.drag_index,
            "label": node.label,
            "section_id": node.section_id,
            "children": [serialize_node(child) for child in tree.children_of(node)],
        }
        if node.kind == "widget":
            result["widget"] = serialize_widget(node.widget)
        return result

    return {
        "nodes": [serialize_node(node) for node in tree.top_level()],
        "length": tree.length,
    }
