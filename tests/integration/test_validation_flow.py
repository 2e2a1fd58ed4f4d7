"""検証フローのMCPプロトコル経由統合テスト。"""

import json
from pathlib import Path

import pytest
import yaml
from fastmcp import Client

from bosun.config import ServerConfig
from bosun.server import create_server


@pytest.fixture
def mcp_server() -> object:
    """テスト用MCPサーバー。"""
    config = ServerConfig(config_dir=Path(__file__).parent.parent.parent / "config")
    return create_server(config)


def parse_tool_result(result: object) -> dict:
    """CallToolResultからJSONデータを抽出する。"""
    content = result.content  # type: ignore[union-attr]
    assert len(content) > 0
    return json.loads(content[0].text)  # type: ignore[union-attr]


_WIDGETS = {
    "paths": {
        "/widgets": {
            "get": {"operationId": "fetchWidgets"},
            "post": {"operationId": "createWidget"},
        },
        "/widgets/{id}": {
            "get": {"operationId": "getWidget"},
            "delete": {"operationId": "getWidget"},
        },
    }
}


class TestValidationFlowViaMCP:
    async def test_validate_document_via_mcp(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("validate_document", {"document": _WIDGETS})
            data = parse_tool_result(result)
            assert data["exit_code"] == 1
            assert data["errors"] == [
                {
                    "locator": "paths./widgets/{id}.delete.operationId",
                    "message": "operationIds must be unique",
                    "severity": "error",
                }
            ]
            assert [w["locator"] for w in data["warnings"]] == ["paths./widgets.get.operationId"]

    async def test_rules_override_via_mcp(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool(
                "validate_document",
                {
                    "document": _WIDGETS,
                    "rules": {"operations": {"operation_id_naming_convention": "off"}},
                    "report_statistics": True,
                },
            )
            data = parse_tool_result(result)
            assert data["warnings"] == []
            assert data["statistics"] == {"operationIds must be unique": 1}

    async def test_print_validator_modules_via_mcp(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool(
                "validate_document",
                {"document": _WIDGETS, "print_validator_modules": True},
            )
            data = parse_tool_result(result)
            assert [e["validator"] for e in data["errors"]] == ["operation-ids"]
            assert [w["validator"] for w in data["warnings"]] == ["operation-ids"]

    async def test_validate_file_via_mcp(self, mcp_server: object, tmp_path: Path) -> None:
        doc_file = tmp_path / "api.yaml"
        doc_file.write_text(yaml.safe_dump(_WIDGETS), encoding="utf-8")
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("validate_file", {"file_path": str(doc_file)})
            data = parse_tool_result(result)
            assert len(data["errors"]) == 1
            assert len(data["warnings"]) == 1

    async def test_validate_missing_file_via_mcp(self, mcp_server: object, tmp_path: Path) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("validate_file", {"file_path": str(tmp_path / "missing.yaml")})
            data = parse_tool_result(result)
            assert data["error"] == "DocumentNotFoundError"
            assert data["exit_code"] == 2

    async def test_conventions_resource(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            contents = await client.read_resource("bosun://rules/conventions")
            data = yaml.safe_load(contents[0].text)  # type: ignore[union-attr]
            assert data["collection"]["post"] == ["add", "create"]
            assert data["member"]["put"] == ["replace"]

    async def test_default_rules_resource(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            contents = await client.read_resource("bosun://rules/default")
            data = yaml.safe_load(contents[0].text)  # type: ignore[union-attr]
            assert data["operations"]["operation_id_naming_convention"] == "warning"
