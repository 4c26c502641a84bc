"""Integration tests for the HTTP JSON-RPC endpoint."""

import json

import pytest

pytestmark = pytest.mark.integration

from fastapi.testclient import TestClient

from orderomatic import http_api


@pytest.fixture
def client(temp_db, monkeypatch):
    monkeypatch.setattr(http_api, "get_db", lambda: temp_db)
    return TestClient(http_api.app)


def rpc(client, method, params=None, request_id=1):
    response = client.post(
        "/mcp/sse",
        json={"jsonrpc": "2.0", "id": request_id, "method": method, "params": params or {}},
    )
    assert response.status_code == 200
    assert response.text.startswith("data: ")
    return json.loads(response.text[len("data: "):])


class TestHttpApi:
    """Tests for the FastAPI app."""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "service": "order-o-matic"}

    def test_initialize(self, client):
        result = rpc(client, "initialize")
        assert result["result"]["serverInfo"]["name"] == "order-o-matic"

    def test_tools_list(self, client):
        tools = rpc(client, "tools/list")["result"]["tools"]
        assert len(tools) == 10
        assert "move_widget" in {t["name"] for t in tools}

    def test_tools_call(self, client):
        rpc(client, "tools/call", {"name": "create_dashboard", "arguments": {"name": "Ops", "dashboard_id": "ops"}})
        result = rpc(client, "tools/call", {"name": "list_dashboards", "arguments": {}})
        payload = json.loads(result["result"]["content"][0]["text"])
        assert [d["id"] for d in payload["dashboards"]] == ["ops"]

    def test_tool_error_is_reported(self, client):
        result = rpc(client, "tools/call", {"name": "get_dashboard", "arguments": {"dashboard_id": "nope"}})
        assert result["error"]["code"] == -32001

    def test_unknown_method(self, client):
        result = rpc(client, "sampling/createMessage")
        assert result["error"]["code"] == -32601

    def test_sse_discovery(self, client):
        response = client.get("/mcp/sse")
        events = [json.loads(chunk[len("data: "):]) for chunk in response.text.split("\n\n") if chunk]
        assert [e["id"] for e in events] == [1, 2]
        assert len(events[1]["result"]["tools"]) == 10
