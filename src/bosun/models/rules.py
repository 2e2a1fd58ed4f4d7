"""ルール設定のデータモデル。"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from bosun.models.diagnostic import Severity


class OperationsRuleConfig(BaseModel):
    """operationId ルールの重大度設定。"""

    operation_id_naming_convention: Severity = Severity.WARNING

    @field_validator("operation_id_naming_convention", mode="before")
    @classmethod
    def _coerce_severity(cls, value: Any) -> Severity:
        # 未知の値はエラーにせず出力抑止として扱う
        return Severity.parse(value)


class RulesConfig(BaseModel):
    """全ルールの設定（YAMLから読み込み）。"""

    operations: OperationsRuleConfig = Field(default_factory=OperationsRuleConfig)
