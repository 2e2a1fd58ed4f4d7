"""検証のMCPツール定義。"""

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from bosun.models.errors import BosunError
from bosun.services.validation import EXIT_FAILURE, ValidationService


def register_validation_tools(mcp: FastMCP, validation_service: ValidationService) -> None:
    """検証関連のMCPツールを登録する。"""

    @mcp.tool()
    async def validate_document(
        document: dict[str, Any],
        rules: dict[str, Any] | None = None,
        report_statistics: bool = False,
        print_validator_modules: bool = False,
        default_mode: bool = False,
    ) -> dict[str, Any]:
        """OpenAPI/Swagger定義を検証する。

        operationIdの一意性と命名規約をチェックし、検出結果を
        errors / warnings / infos に分類して返します。

        Args:
            document: API定義オブジェクト。ローカルの$refは自動的に展開されます。
            rules: ルール重大度の上書き（例: {"operations": {"operation_id_naming_convention": "error"}}）。
            report_statistics: Trueの場合、メッセージごとの件数を含めます。
            print_validator_modules: Trueの場合、各検出結果に検出したルール名（validator）を含めます。
            default_mode: Trueの場合、ユーザー設定を無視してデフォルト設定で検証します。
        """
        try:
            rules_config = validation_service.load_rules(rules, default_mode=default_mode)
            report = validation_service.validate(
                document,
                rules_config,
                report_statistics=report_statistics,
                print_validator_modules=print_validator_modules,
            )
            return report.model_dump(mode="json", exclude_none=True)
        except BosunError as e:
            return {"error": type(e).__name__, "message": str(e), "exit_code": EXIT_FAILURE}

    @mcp.tool()
    async def validate_file(
        file_path: str,
        rules: dict[str, Any] | None = None,
        report_statistics: bool = False,
        print_validator_modules: bool = False,
        default_mode: bool = False,
    ) -> dict[str, Any]:
        """JSON/YAMLファイルのAPI定義を検証する。

        Args:
            file_path: 検証するファイルのパス。
            rules: ルール重大度の上書き。
            report_statistics: Trueの場合、メッセージごとの件数を含めます。
            print_validator_modules: Trueの場合、各検出結果に検出したルール名（validator）を含めます。
            default_mode: Trueの場合、ユーザー設定を無視してデフォルト設定で検証します。
        """
        try:
            rules_config = validation_service.load_rules(rules, default_mode=default_mode)
            report = validation_service.validate_file(
                Path(file_path),
                rules_config,
                report_statistics=report_statistics,
                print_validator_modules=print_validator_modules,
            )
            return report.model_dump(mode="json", exclude_none=True)
        except BosunError as e:
            return {"error": type(e).__name__, "message": str(e), "exit_code": EXIT_FAILURE}
