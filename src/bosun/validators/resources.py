"""リソース指向パス（コレクション/メンバー対）の判定。"""

from collections.abc import Iterable


def split_path(path_key: str) -> tuple[str, ...]:
    """パスを空でないセグメントに分割する。"""
    return tuple(segment for segment in path_key.split("/") if segment)


def is_param_segment(segment: str) -> bool:
    """``{id}`` のような波括弧で囲まれたパラメータセグメントか判定する。"""
    return len(segment) > 2 and segment.startswith("{") and segment.endswith("}")


def path_ends_with_param(path_key: str) -> bool:
    segments = split_path(path_key)
    return bool(segments) and is_param_segment(segments[-1])


class ResourceIndex:
    """ドキュメント内の全パスから作るコレクション/メンバー判定用の索引。

    パスの分割は構築時に一度だけ行い、判定は集合の参照のみで済ませる。
    """

    def __init__(self, path_keys: Iterable[str]) -> None:
        self._segments: set[tuple[str, ...]] = set()
        # パラメータで終わるパスの親（末尾セグメントを除いたもの）
        self._member_parents: set[tuple[str, ...]] = set()
        for key in path_keys:
            segments = split_path(key)
            self._segments.add(segments)
            if segments and is_param_segment(segments[-1]):
                self._member_parents.add(segments[:-1])

    def is_resource_oriented(self, path_key: str) -> bool:
        """パスがコレクション/メンバーの対を構成しているか判定する。

        パラメータで終わるパスは末尾セグメントを除いたパスが存在すれば、
        そうでないパスは末尾にパラメータを1つ足したパスが存在すれば
        リソース指向とみなす。比較はセグメント単位で行う。
        """
        segments = split_path(path_key)
        if segments and is_param_segment(segments[-1]):
            return segments[:-1] in self._segments
        return segments in self._member_parents


def is_resource_oriented(path_key: str, all_path_keys: Iterable[str]) -> bool:
    return ResourceIndex(all_path_keys).is_resource_oriented(path_key)
