"""テスト共通フィクスチャ。"""

from pathlib import Path
from typing import Any

import pytest

from bosun.config import ServerConfig
from bosun.models.rules import OperationsRuleConfig
from bosun.services.validation import ValidationService


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def validation_service(config_dir: Path) -> ValidationService:
    """テスト用ValidationService。"""
    return ValidationService(config_dir=config_dir)


@pytest.fixture
def server_config(config_dir: Path) -> ServerConfig:
    """テスト用ServerConfig。"""
    return ServerConfig(config_dir=config_dir)


@pytest.fixture
def warning_config() -> OperationsRuleConfig:
    return OperationsRuleConfig(operation_id_naming_convention="warning")


@pytest.fixture
def widgets_spec() -> dict[str, Any]:
    """コレクション/メンバー対を持つ規約準拠のドキュメント。"""
    return {
        "swagger": "2.0",
        "paths": {
            "/widgets": {
                "get": {"operationId": "listWidgets"},
                "post": {"operationId": "createWidget"},
            },
            "/widgets/{id}": {
                "get": {"operationId": "getWidget"},
                "put": {"operationId": "replaceWidget"},
                "delete": {"operationId": "deleteWidget"},
            },
        },
    }
