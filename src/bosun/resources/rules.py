"""ルール関連のMCPリソース定義。"""

from pathlib import Path

import yaml
from fastmcp import FastMCP

from bosun.services.rules import DEFAULT_RULES_FILE
from bosun.validators.conventions import COLLECTION_PREFIXES, MEMBER_PREFIXES


def register_rules_resources(mcp: FastMCP, config_dir: Path) -> None:
    """ルール関連のMCPリソースを登録する。"""

    @mcp.resource("bosun://rules/default")
    async def default_rules() -> str:
        """デフォルトのルール重大度設定を取得する。"""
        rules_file = config_dir / DEFAULT_RULES_FILE
        data = {}
        if rules_file.exists():
            with open(rules_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        return yaml.dump(data, allow_unicode=True, default_flow_style=False)

    @mcp.resource("bosun://rules/conventions")
    async def naming_conventions() -> str:
        """operationIdの命名規約テーブルを取得する。

        collection はパラメータで終わらないパス、member はパラメータで終わるパスに適用されます。
        """
        data = {
            "collection": {verb: list(prefixes) for verb, prefixes in COLLECTION_PREFIXES.items()},
            "member": {verb: list(prefixes) for verb, prefixes in MEMBER_PREFIXES.items()},
        }
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)
