"""operationId の命名規約チェック。"""

from collections.abc import Collection, Mapping
from types import MappingProxyType
from typing import NamedTuple

# パラメータで終わらないパス（コレクション）の動詞 → 許容プレフィックス
COLLECTION_PREFIXES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "get": ("list",),
        "post": ("add", "create"),
    }
)

# パラメータで終わるパス（メンバー）の動詞 → 許容プレフィックス
MEMBER_PREFIXES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "get": ("get",),
        "delete": ("delete",),
        "patch": ("update",),
        # PATCH が同じパスに無い場合のみ適用
        "post": ("update",),
        "put": ("replace",),
    }
)

CONVENTION_MESSAGE = "operationIds should follow naming convention: operationId verb should be {prefixes}"


class ConventionResult(NamedTuple):
    check_passed: bool
    allowed_prefixes: tuple[str, ...]


def check_operation_id(
    verb: str,
    operation_id: str,
    all_path_operations: Collection[str],
    path_ends_with_param: bool,
) -> ConventionResult:
    """operationId が動詞ごとの命名規約に従っているか判定する。

    Args:
        verb: オペレーションのHTTP動詞（小文字）。
        operation_id: 検査対象の operationId。
        all_path_operations: 同一パスに定義されている動詞。
        path_ends_with_param: パスがパラメータセグメントで終わるか。

    Returns:
        判定結果。不合格の場合は許容プレフィックスを含む。
    """
    table = MEMBER_PREFIXES if path_ends_with_param else COLLECTION_PREFIXES
    prefixes = table.get(verb)
    if prefixes is None:
        return ConventionResult(True, ())

    if any(operation_id.startswith(prefix) for prefix in prefixes):
        return ConventionResult(True, ())

    # PATCH が存在するパスでは update 規約は PATCH 側が担う
    if path_ends_with_param and verb == "post" and "patch" in all_path_operations:
        return ConventionResult(True, ())

    return ConventionResult(False, prefixes)


def format_convention_message(prefixes: Collection[str]) -> str:
    return CONVENTION_MESSAGE.format(prefixes=" or ".join(prefixes))
