"""MCP tool handlers for executing tool operations."""

import json
from typing import Any

from mcp import McpError
from mcp.types import ErrorData, TextContent

from orderomatic.exceptions import (
    DatabaseError,
    DuplicateError,
    NotFoundError,
    ValidationError,
)
from orderomatic.mcp.serializers import serialize_model, serialize_widget, serialize_widget_tree
from orderomatic.services.dashboard_service import DashboardService
from orderomatic.services.widget_service import WidgetService


def _text(result: Any) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(result, indent=2, default=str))]


# Dashboard handlers
async def handle_create_dashboard(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle create_dashboard tool."""
    with db.session() as session:
        dashboard = DashboardService(session).create_dashboard(
            name=arguments["name"],
            description=arguments.get("description", ""),
            dashboard_id=arguments.get("dashboard_id"),
        )
        return _text(serialize_model(dashboard))


async def handle_get_dashboard(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle get_dashboard tool."""
    with db.session() as session:
        dashboard = DashboardService(session).get_dashboard(arguments["dashboard_id"])
        result = serialize_model(dashboard)
        result["widgets"] = [
            serialize_widget(w) for w in WidgetService(session).list_widgets(dashboard.id)
        ]
        return _text(result)


async def handle_list_dashboards(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle list_dashboards tool."""
    with db.session() as session:
        dashboards = DashboardService(session).list_dashboards(
            name_pattern=arguments.get("name_pattern"),
            limit=arguments.get("limit", 100),
            offset=arguments.get("offset", 0),
        )
        return _text({"dashboards": dashboards})


async def handle_delete_dashboard(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle delete_dashboard tool."""
    with db.session() as session:
        deleted = DashboardService(session).delete_dashboard(arguments["dashboard_id"])
        return _text({"deleted": deleted})


# Widget handlers
async def handle_create_widget(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle create_widget tool."""
    with db.session() as session:
        widget = WidgetService(session).create_widget(
            dashboard_id=arguments["dashboard_id"],
            name=arguments["name"],
            widget_type=arguments["widget_type"],
            section_id=arguments.get("section_id"),
            content=arguments.get("content"),
            widget_id=arguments.get("widget_id"),
        )
        return _text(serialize_widget(widget))


async def handle_list_widgets(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle list_widgets tool."""
    with db.session() as session:
        widgets = WidgetService(session).list_widgets(arguments["dashboard_id"])
        return _text({"widgets": [serialize_widget(w) for w in widgets]})


async def handle_get_widget_tree(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle get_widget_tree tool."""
    with db.session() as session:
        tree = WidgetService(session).get_widget_tree(arguments["dashboard_id"])
        return _text(serialize_widget_tree(tree))


async def handle_move_widget(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle move_widget tool. A move that changes nothing reports moved=false."""
    with db.session() as session:
        widgets = WidgetService(session).move_widget(
            dashboard_id=arguments["dashboard_id"],
            source_index=arguments["source_index"],
            destination_index=arguments["destination_index"],
        )
        if widgets is None:
            return _text({"moved": False})
        return _text({"moved": True, "widgets": [serialize_widget(w) for w in widgets]})


async def handle_delete_widget(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle delete_widget tool."""
    with db.session() as session:
        deleted = WidgetService(session).delete_widget(arguments["widget_id"])
        return _text({"deleted": deleted})


async def handle_move_metric(arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """Handle move_metric tool."""
    with db.session() as session:
        widget = WidgetService(session).move_metric(
            widget_id=arguments["widget_id"],
            index=arguments["index"],
            new_index=arguments["new_index"],
        )
        return _text(serialize_widget(widget))


TOOL_HANDLERS = {
    "create_dashboard": handle_create_dashboard,
    "get_dashboard": handle_get_dashboard,
    "list_dashboards": handle_list_dashboards,
    "delete_dashboard": handle_delete_dashboard,
    "create_widget": handle_create_widget,
    "list_widgets": handle_list_widgets,
    "get_widget_tree": handle_get_widget_tree,
    "move_widget": handle_move_widget,
    "delete_widget": handle_delete_widget,
    "move_metric": handle_move_metric,
}


async def call_tool_handler(tool_name: str, arguments: dict[str, Any], db: Any) -> list[TextContent]:
    """
    Call the appropriate tool handler.

    Args:
        tool_name: Name of the tool to call
        arguments: Tool arguments
        db: Database instance

    Returns:
        List of TextContent with tool execution result

    Raises:
        McpError: If tool name is unknown or handler raises an error
    """
    if tool_name not in TOOL_HANDLERS:
        raise McpError(
            ErrorData(
                code=-32601,  # Method not found
                message=f"Unknown tool: {tool_name}",
            )
        )

    handler = TOOL_HANDLERS[tool_name]

    try:
        return await handler(arguments, db)
    except McpError:
        raise
    except KeyError as e:
        raise McpError(
            ErrorData(
                code=-32602,  # Invalid params
                message=f"Missing required argument: {e.args[0]}",
            )
        )
    except ValidationError as e:
        raise McpError(
            ErrorData(
                code=-32602,  # Invalid params
                message=f"Validation error: {str(e)}",
            )
        )
    except NotFoundError as e:
        raise McpError(
            ErrorData(
                code=-32001,  # Custom error: not found
                message=str(e),
            )
        )
    except DuplicateError as e:
        raise McpError(
            ErrorData(
                code=-32002,  # Custom error: duplicate
                message=str(e),
            )
        )
    except DatabaseError as e:
        raise McpError(
            ErrorData(
                code=-32603,  # Internal error
                message=f"Database error: {str(e)}",
            )
        )
    except Exception as e:
        raise McpError(
            ErrorData(
                code=-32603,  # Internal error
                message=f"Internal error: {str(e)}",
            )
        )
