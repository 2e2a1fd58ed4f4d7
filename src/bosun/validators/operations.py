"""resolved ドキュメントからオペレーションを抽出する。"""

from collections.abc import Mapping
from typing import Any

from bosun.models.operation import Operation

HTTP_VERBS: tuple[str, ...] = (
    "get",
    "head",
    "post",
    "put",
    "patch",
    "delete",
    "options",
    "trace",
)


def extract_operations(paths: Any) -> list[Operation]:
    """パスマップをオペレーション単位のレコード列に展開する。

    順序はパスの宣言順、同一パス内では動詞の宣言順。
    ``paths`` がマッピングでない場合は空リストを返す。

    Args:
        paths: resolved ドキュメントの ``paths`` オブジェクト。

    Returns:
        抽出したオペレーションのリスト。
    """
    if not isinstance(paths, Mapping):
        return []

    operations: list[Operation] = []
    for path_key, path_item in paths.items():
        if not isinstance(path_item, Mapping):
            continue

        path_ops = {
            verb: op for verb, op in path_item.items() if verb in HTTP_VERBS and isinstance(op, Mapping)
        }
        all_path_operations = tuple(path_ops)

        for verb, op in path_ops.items():
            operation_id = op.get("operationId")
            operations.append(
                Operation(
                    path_key=str(path_key),
                    op_key=verb,
                    path=f"paths.{path_key}.{verb}",
                    all_path_operations=all_path_operations,
                    operation_id=operation_id if isinstance(operation_id, str) else None,
                )
            )

    return operations
