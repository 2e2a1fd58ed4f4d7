"""Bosunサーバーの設定管理。"""

from pathlib import Path

from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent
_REPO_ROOT = _PACKAGE_ROOT.parent.parent


class ServerConfig(BaseSettings):
    """サーバー設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "BOSUN_"}

    config_dir: Path = _REPO_ROOT / "config"
    # ユーザー定義のルール設定（デフォルト設定に上書きマージ）
    rules_file: Path | None = None
    host: str = "0.0.0.0"
    port: int = 8000
    url_token: str = ""
    log_level: str = "INFO"
