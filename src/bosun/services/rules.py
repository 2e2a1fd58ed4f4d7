"""ルール設定の読み込み。"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from bosun.models.errors import RulesConfigError
from bosun.models.rules import RulesConfig

DEFAULT_RULES_FILE = "rules/default.yaml"


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class RulesLoader:
    """デフォルト設定にユーザー設定を重ねてルール設定を組み立てる。"""

    def __init__(self, config_dir: Path, rules_file: Path | None = None) -> None:
        self._config_dir = config_dir
        self._rules_file = rules_file
        self._defaults: dict[str, Any] | None = None

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise RulesConfigError(str(path), str(e)) from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise RulesConfigError(str(path), "rules configuration must be a mapping")
        return data

    def defaults(self) -> dict[str, Any]:
        """デフォルトのルール設定を返す。ファイルが無い場合は空の設定。"""
        if self._defaults is None:
            default_file = self._config_dir / DEFAULT_RULES_FILE
            self._defaults = self._read_yaml(default_file) if default_file.exists() else {}
        return self._defaults

    def load(self, overrides: dict[str, Any] | None = None, default_mode: bool = False) -> RulesConfig:
        """ルール設定を読み込む。

        Args:
            overrides: 呼び出し側から渡される設定。デフォルトにマージされる。
            default_mode: True の場合はデフォルト設定のみを使う。

        Raises:
            RulesConfigError: 設定ファイルまたは設定値が不正な場合。
        """
        # 層ごとに検証し、不正な値を持ち込んだ層をエラーに含める
        data = self.defaults()
        config = self._validate(data, str(self._config_dir / DEFAULT_RULES_FILE))
        if default_mode:
            return config

        if self._rules_file is not None:
            data = _deep_merge(data, self._read_yaml(self._rules_file))
            config = self._validate(data, str(self._rules_file))
        if overrides:
            data = _deep_merge(data, overrides)
            config = self._validate(data, "overrides")
        return config

    @staticmethod
    def _validate(data: dict[str, Any], source: str) -> RulesConfig:
        try:
            return RulesConfig.model_validate(data)
        except ValidationError as e:
            raise RulesConfigError(source, str(e)) from e
