"""operationId の一意性と命名規約を検証するルール。

- operationId はドキュメント内で一意でなければならない。
- リソース指向のパスでは operationId が動詞ごとの命名規約に従うべき。
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from bosun.models.diagnostic import Diagnostic, Severity
from bosun.models.rules import OperationsRuleConfig, RulesConfig
from bosun.validators.conventions import check_operation_id, format_convention_message
from bosun.validators.message_carrier import MessageCarrier
from bosun.validators.operations import extract_operations
from bosun.validators.resources import ResourceIndex, path_ends_with_param

UNIQUE_MESSAGE = "operationIds must be unique"

RuleConfigInput = OperationsRuleConfig | RulesConfig | Mapping[str, Any] | None


def _convention_severity(config: RuleConfigInput) -> Severity:
    """命名規約違反の重大度を設定から取り出す。解釈できない設定は ``off``。"""
    if isinstance(config, RulesConfig):
        config = config.operations
    elif isinstance(config, Mapping):
        operations = config.get("operations", config)
        try:
            config = OperationsRuleConfig.model_validate(operations)
        except ValidationError:
            return Severity.OFF
    if not isinstance(config, OperationsRuleConfig):
        return Severity.OFF
    return Severity.parse(config.operation_id_naming_convention)


class OperationIdValidator:
    """operationId ルールの評価器。

    評価ごとに既出IDの集合と MessageCarrier を新規に作るため、
    同じインスタンスを繰り返し・並行に使っても結果は干渉しない。
    """

    name = "operation-ids"

    def evaluate(self, resolved_spec: Any, config: RuleConfigInput) -> list[Diagnostic]:
        """resolved ドキュメントを検証する。

        Args:
            resolved_spec: 参照展開済みのドキュメント。
            config: 重大度設定。``RulesConfig`` や ``operations`` キーを持つマッピングの
                場合は ``operations`` を使う。``None`` は規約違反の出力抑止。

        Returns:
            検出結果のリスト。問題がない場合は空リスト。
        """
        paths = resolved_spec.get("paths") if isinstance(resolved_spec, Mapping) else None
        operations = extract_operations(paths)
        if not operations:
            return []

        resources = ResourceIndex(str(key) for key in paths)
        convention_severity = _convention_severity(config)
        messages = MessageCarrier()
        seen: set[str] = set()

        for op in operations:
            # operationId は必須ではない
            if not op.operation_id:
                continue

            locator = f"{op.path}.operationId"
            if op.operation_id in seen:
                messages.add_message(locator, UNIQUE_MESSAGE, Severity.ERROR)
                continue
            seen.add(op.operation_id)

            if not resources.is_resource_oriented(op.path_key):
                continue

            result = check_operation_id(
                op.op_key,
                op.operation_id,
                op.all_path_operations,
                path_ends_with_param(op.path_key),
            )
            if not result.check_passed:
                messages.add_message(
                    locator,
                    format_convention_message(result.allowed_prefixes),
                    convention_severity,
                )

        return messages.messages


def evaluate(resolved_spec: Any, config: RuleConfigInput) -> list[Diagnostic]:
    return OperationIdValidator().evaluate(resolved_spec, config)
