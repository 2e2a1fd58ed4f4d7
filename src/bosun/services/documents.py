"""検証対象ドキュメントの読み込みとローカル参照の展開。"""

from pathlib import Path
from typing import Any

import yaml

from bosun.models.errors import DocumentNotFoundError, DocumentParseError


def load_document(file_path: Path) -> dict[str, Any]:
    """JSONまたはYAMLのAPI定義を読み込む。

    Raises:
        DocumentNotFoundError: ファイルが存在しない場合。
        DocumentParseError: 解釈できない、またはルートがオブジェクトでない場合。
    """
    if not file_path.is_file():
        raise DocumentNotFoundError(str(file_path))

    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise DocumentParseError(str(file_path), str(e)) from e

    if not isinstance(data, dict):
        raise DocumentParseError(str(file_path), "document root must be an object")
    return data


def _resolve_pointer(document: Any, pointer: str) -> tuple[bool, Any]:
    # RFC 6901 JSON Pointer（"#/a/b" 形式）
    if pointer == "#":
        return True, document
    if not pointer.startswith("#/"):
        return False, None

    node = document
    for raw in pointer[2:].split("/"):
        token = raw.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and token in node:
            node = node[token]
        elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
            node = node[int(token)]
        else:
            return False, None
    return True, node


def resolve_refs(document: dict[str, Any]) -> dict[str, Any]:
    """ドキュメント内の ``#/...`` 形式の ``$ref`` を展開したコピーを返す。

    外部参照、解決できない参照、循環参照はそのまま残す。
    同じノード（同じ参照先やYAMLエイリアス）は一度だけ展開し、
    展開結果を共有する。入力ドキュメントは変更しない。
    """
    expanded: dict[int, Any] = {}
    in_progress: set[int] = set()

    def expand(node: Any) -> Any:
        if not isinstance(node, dict | list):
            return node
        key = id(node)
        if key in expanded:
            return expanded[key]
        if key in in_progress:
            # 再帰的なYAMLエイリアス
            return node

        if isinstance(node, dict):
            ref = node.get("$ref")
            if isinstance(ref, str):
                found, target = _resolve_pointer(document, ref)
                if found:
                    if isinstance(target, dict | list) and id(target) in in_progress:
                        return node
                    in_progress.add(key)
                    try:
                        result = expand(target)
                    finally:
                        in_progress.discard(key)
                    expanded[key] = result
                    return result

        in_progress.add(key)
        try:
            if isinstance(node, dict):
                result = {k: expand(v) for k, v in node.items()}
            else:
                result = [expand(item) for item in node]
        finally:
            in_progress.discard(key)
        expanded[key] = result
        return result

    return expand(document)
