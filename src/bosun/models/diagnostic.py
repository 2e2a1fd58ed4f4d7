"""診断結果関連のデータモデル。"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Severity(StrEnum):
    """診断の重大度。``off`` は出力抑止を表す。"""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    OFF = "off"

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """任意の値を重大度に変換する。認識できない値は ``off`` として扱う。"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return cls.OFF
        return cls.OFF


class Diagnostic(BaseModel):
    """ルール違反の個別検出結果。"""

    model_config = ConfigDict(frozen=True)

    locator: str
    message: str
    severity: Severity


class ReportEntry(Diagnostic):
    """レポートに載せる検出結果。必要に応じて検出したルール名を持つ。"""

    validator: str | None = None


class ValidationReport(BaseModel):
    """全ルールの検出結果を集約したレポート。"""

    errors: list[ReportEntry]
    warnings: list[ReportEntry]
    infos: list[ReportEntry]
    statistics: dict[str, int] | None = None
    exit_code: int
