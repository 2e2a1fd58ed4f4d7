"""Bosunのカスタム例外クラス。"""


class BosunError(Exception):
    """Bosunの基底例外クラス。"""


class DocumentNotFoundError(BosunError):
    """検証対象のドキュメントが見つからない場合の例外。"""

    def __init__(self, file_path: str) -> None:
        super().__init__(f"Document not found: {file_path}")
        self.file_path = file_path


class DocumentParseError(BosunError):
    """ドキュメントをJSON/YAMLとして解釈できない場合の例外。"""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(f"Could not parse document {file_path}: {reason}")
        self.file_path = file_path
        self.reason = reason


class RulesConfigError(BosunError):
    """ルール設定ファイルが読み込めない、または不正な場合の例外。"""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Invalid rules configuration in {source}: {reason}")
        self.source = source
        self.reason = reason
