"""検出結果の蓄積。"""

from collections.abc import Iterator
from typing import Any

from bosun.models.diagnostic import Diagnostic, Severity


class MessageCarrier:
    """ルール評価中に検出結果を追記していくコンテナ。"""

    def __init__(self) -> None:
        self._messages: list[Diagnostic] = []

    def add_message(self, locator: str, message: str, severity: Any) -> None:
        """検出結果を追加する。重大度が ``off`` の場合は何もしない。"""
        level = Severity.parse(severity)
        if level is Severity.OFF:
            return
        self._messages.append(Diagnostic(locator=locator, message=message, severity=level))

    @property
    def messages(self) -> list[Diagnostic]:
        return list(self._messages)

    @property
    def errors(self) -> list[Diagnostic]:
        return self._by_severity(Severity.ERROR)

    @property
    def warnings(self) -> list[Diagnostic]:
        return self._by_severity(Severity.WARNING)

    @property
    def infos(self) -> list[Diagnostic]:
        return self._by_severity(Severity.INFO)

    def _by_severity(self, severity: Severity) -> list[Diagnostic]:
        return [m for m in self._messages if m.severity == severity]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._messages))
