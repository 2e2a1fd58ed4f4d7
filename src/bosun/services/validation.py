"""ルール群を実行して検証レポートを作るサービス。"""

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Protocol

from bosun.models.diagnostic import Diagnostic, ReportEntry, Severity, ValidationReport
from bosun.models.rules import RulesConfig
from bosun.services.documents import load_document, resolve_refs
from bosun.services.rules import RulesLoader
from bosun.validators.operation_ids import OperationIdValidator

logger = logging.getLogger(__name__)

# 終了コード
EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_FAILURE = 2


class RuleValidator(Protocol):
    name: str

    def evaluate(self, resolved_spec: Any, config: RulesConfig) -> list[Diagnostic]: ...


class ValidationService:
    """API定義の読み込み、参照展開、ルール評価、集計を行う。"""

    def __init__(
        self,
        config_dir: Path,
        rules_file: Path | None = None,
        validators: list[RuleValidator] | None = None,
    ) -> None:
        self._rules_loader = RulesLoader(config_dir=config_dir, rules_file=rules_file)
        self._validators: list[RuleValidator] = (
            validators if validators is not None else [OperationIdValidator()]
        )

    def load_rules(self, overrides: dict[str, Any] | None = None, default_mode: bool = False) -> RulesConfig:
        return self._rules_loader.load(overrides, default_mode=default_mode)

    def validate(
        self,
        document: dict[str, Any],
        rules: RulesConfig,
        report_statistics: bool = False,
        print_validator_modules: bool = False,
    ) -> ValidationReport:
        """ドキュメントに全ルールを適用してレポートを返す。

        Args:
            document: API定義。``$ref`` は未展開でもよい。
            rules: ルール設定。
            report_statistics: True の場合はメッセージごとの件数を含める。
            print_validator_modules: True の場合は各検出結果に検出したルール名を付ける。

        Returns:
            重大度ごとに分類した検証レポート。
        """
        resolved = resolve_refs(document)

        diagnostics: list[ReportEntry] = []
        for validator in self._validators:
            found = validator.evaluate(resolved, rules)
            logger.debug("rule %s produced %d diagnostics", validator.name, len(found))
            source = validator.name if print_validator_modules else None
            diagnostics.extend(ReportEntry(**d.model_dump(), validator=source) for d in found)

        errors = [d for d in diagnostics if d.severity == Severity.ERROR]
        warnings = [d for d in diagnostics if d.severity == Severity.WARNING]
        infos = [d for d in diagnostics if d.severity == Severity.INFO]

        statistics = None
        if report_statistics:
            statistics = dict(Counter(d.message for d in diagnostics))

        return ValidationReport(
            errors=errors,
            warnings=warnings,
            infos=infos,
            statistics=statistics,
            exit_code=EXIT_FINDINGS if errors or warnings else EXIT_CLEAN,
        )

    def validate_file(
        self,
        file_path: Path,
        rules: RulesConfig,
        report_statistics: bool = False,
        print_validator_modules: bool = False,
    ) -> ValidationReport:
        """ファイルからAPI定義を読み込んで検証する。

        Raises:
            DocumentNotFoundError: ファイルが存在しない場合。
            DocumentParseError: ファイルを解釈できない場合。
        """
        logger.debug("loading document %s", file_path)
        document = load_document(file_path)
        return self.validate(
            document,
            rules,
            report_statistics=report_statistics,
            print_validator_modules=print_validator_modules,
        )
