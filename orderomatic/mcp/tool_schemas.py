"""MCP tool schema definitions."""

from typing import Any

from orderomatic.ordering.types import WidgetType

WIDGET_TYPES = [t.value for t in WidgetType]


def get_tool_schemas() -> dict[str, dict[str, Any]]:
    """Get all MCP tool schemas."""
    return {
        "create_dashboard": {
            "name": "create_dashboard",
            "description": "Create a new, empty dashboard",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "Dashboard name"},
                    "description": {
                        "type": "string",
                        "description": "Optional dashboard description",
                    },
                    "dashboard_id": {
                        "type": "string",
                        "description": "Optional dashboard ID (generates UUID if not provided)",
                    },
                },
                "required": ["name"],
            },
        },
        "get_dashboard": {
            "name": "get_dashboard",
            "description": "Retrieve a dashboard by ID with its widgets in order",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "dashboard_id": {"type": "string", "description": "Dashboard ID"},
                },
                "required": ["dashboard_id"],
            },
        },
        "list_dashboards": {
            "name": "list_dashboards",
            "description": "List dashboards with widget counts",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "name_pattern": {
                        "type": "string",
                        "description": "Optional case-insensitive name filter",
                    },
                    "limit": {"type": "integer", "description": "Maximum results (default: 100)"},
                    "offset": {"type": "integer", "description": "Results to skip (default: 0)"},
                },
            },
        },
        "delete_dashboard": {
            "name": "delete_dashboard",
            "description": "Delete a dashboard and all of its widgets",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "dashboard_id": {"type": "string", "description": "Dashboard ID"},
                },
                "required": ["dashboard_id"],
            },
        },
        "create_widget": {
            "name": "create_widget",
            "description": "Add a widget at the end of a dashboard or of one of its sections",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "dashboard_id": {"type": "string", "description": "Dashboard ID"},
                    "name": {"type": "string", "description": "Widget name"},
                    "widget_type": {
                        "type": "string",
                        "enum": WIDGET_TYPES,
                        "description": "Widget type",
                    },
                    "section_id": {
                        "type": "string",
                        "description": "Optional ID of the Section widget to place it in",
                    },
                    "content": {"type": "object", "description": "Optional widget content"},
                    "widget_id": {
                        "type": "string",
                        "description": "Optional widget ID (generates UUID if not provided)",
                    },
                },
                "required": ["dashboard_id", "name", "widget_type"],
            },
        },
        "list_widgets": {
            "name": "list_widgets",
            "description": "List the widgets of a dashboard in order",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "dashboard_id": {"type": "string", "description": "Dashboard ID"},
                },
                "required": ["dashboard_id"],
            },
        },
        "get_widget_tree": {
            "name": "get_widget_tree",
            "description": "Get the drag-and-drop tree (labels and drag indices) of a dashboard",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "dashboard_id": {"type": "string", "description": "Dashboard ID"},
                },
                "required": ["dashboard_id"],
            },
        },
        "move_widget": {
            "name": "move_widget",
            "description": (
                "Move the widget at one drag index to another; sections carry their "
                "widgets and plain widgets join or leave sections depending on where they land"
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "dashboard_id": {"type": "string", "description": "Dashboard ID"},
                    "source_index": {
                        "type": "integer",
                        "description": "Drag index of the widget to move",
                    },
                    "destination_index": {
                        "type": "integer",
                        "description": "Drag index to drop it on",
                    },
                },
                "required": ["dashboard_id", "source_index", "destination_index"],
            },
        },
        "delete_widget": {
            "name": "delete_widget",
            "description": "Delete a widget (deleting a section deletes its widgets too)",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "widget_id": {"type": "string", "description": "Widget ID"},
                },
                "required": ["widget_id"],
            },
        },
        "move_metric": {
            "name": "move_metric",
            "description": "Reorder the metrics of a Metrics widget",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "widget_id": {"type": "string", "description": "Metrics widget ID"},
                    "index": {"type": "integer", "description": "Current metric position"},
                    "new_index": {"type": "integer", "description": "New metric position"},
                },
                "required": ["widget_id", "index", "new_index"],
            },
        },
    }
