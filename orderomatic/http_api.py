"""HTTP API for Order-O-Matic: MCP JSON-RPC over Server-Sent Events."""

import json
import logging
from typing import Any, Dict

from fastapi import Body, FastAPI
from fastapi.responses import StreamingResponse
from mcp import McpError

from orderomatic import __version__
from orderomatic.mcp.tool_handlers import call_tool_handler
from orderomatic.mcp.tool_schemas import get_tool_schemas
from orderomatic.storage.database import get_db

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Order-O-Matic MCP Service",
    description="Drag-and-drop ordering for nested dashboard widgets",
    version=__version__,
)


def _tools() -> list[dict[str, Any]]:
    return [
        {
            "name": tool_def["name"],
            "description": tool_def["description"],
            "inputSchema": tool_def["inputSchema"],
        }
        for tool_def in get_tool_schemas().values()
    ]


async def handle_jsonrpc_request(request: Dict[str, Any]) -> Dict[str, Any]:
    """Handle JSON-RPC 2.0 request."""
    jsonrpc = request.get("jsonrpc", "2.0")
    request_id = request.get("id")
    method = request.get("method")
    params = request.get("params") or {}

    if method == "initialize":
        return {
            "jsonrpc": jsonrpc,
            "id": request_id,
            "result": {
                "protocolVersion": "2024-11-05",
                "capabilities": {"tools": {}},
                "serverInfo": {"name": "order-o-matic", "version": __version__},
            },
        }
    elif method == "tools/list":
        return {"jsonrpc": jsonrpc, "id": request_id, "result": {"tools": _tools()}}
    elif method == "tools/call":
        tool_name = params.get("name")
        arguments = params.get("arguments") or {}

        try:
            result = await call_tool_handler(tool_name, arguments, get_db())
            return {
                "jsonrpc": jsonrpc,
                "id": request_id,
                "result": {"content": [{"type": "text", "text": result[0].text}]},
            }
        except McpError as e:
            return {
                "jsonrpc": jsonrpc,
                "id": request_id,
                "error": {"code": e.error.code, "message": e.error.message},
            }
        except Exception as e:
            logger.exception(f"Error handling tool {tool_name}")
            return {
                "jsonrpc": jsonrpc,
                "id": request_id,
                "error": {"code": -32603, "message": f"Internal error: {str(e)}"},
            }
    elif method in ("prompts/list", "resources/list"):
        key = method.split("/")[0]
        return {"jsonrpc": jsonrpc, "id": request_id, "result": {key: []}}
    else:
        return {
            "jsonrpc": jsonrpc,
            "id": request_id,
            "error": {"code": -32601, "message": f"Method not found: {method}"},
        }


def _sse(payload: Dict[str, Any]) -> str:
    return f"data: {json.dumps(payload)}\n\n"


@app.post("/mcp/sse")
async def mcp_sse_post(request: dict = Body(...)):
    """Server-Sent Events endpoint for MCP (POST)."""
    result = await handle_jsonrpc_request(request)
    return StreamingResponse(content=iter([_sse(result)]), media_type="text/event-stream")


@app.get("/mcp/sse")
async def mcp_sse_get():
    """Server-Sent Events endpoint for MCP (GET): sends initialize and tools/list once."""

    async def generate_sse_stream():
        for request_id, method in enumerate(("initialize", "tools/list"), start=1):
            response = await handle_jsonrpc_request(
                {"jsonrpc": "2.0", "id": request_id, "method": method, "params": {}}
            )
            yield _sse(response)

    return StreamingResponse(
        generate_sse_stream(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "order-o-matic"}


def run() -> None:
    """Console script entry point."""
    import uvicorn

    from orderomatic.config import configure_logging

    configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=8005)


if __name__ == "__main__":
    run()
