"""FastMCPベースのMCPサーバーエントリポイント。"""

import logging

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from bosun.config import ServerConfig
from bosun.resources.rules import register_rules_resources
from bosun.services.validation import ValidationService
from bosun.tools.validation import register_validation_tools

logger = logging.getLogger(__name__)


def create_server(config: ServerConfig | None = None) -> FastMCP:
    """Bosun MCPサーバーを作成し、ツール・リソースを登録する。

    Args:
        config: サーバー設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = ServerConfig()

    mcp = FastMCP("bosun")

    # サービス層
    validation_service = ValidationService(config_dir=config.config_dir, rules_file=config.rules_file)

    # MCPインターフェース登録
    register_validation_tools(mcp, validation_service)
    register_rules_resources(mcp, config.config_dir)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    logger.debug("bosun server created with config_dir=%s", config.config_dir)
    return mcp
