"""パス配下のオペレーションを表すデータモデル。"""

from pydantic import BaseModel, ConfigDict


class Operation(BaseModel):
    """resolved ドキュメントから抽出した1オペレーション分のレコード。"""

    model_config = ConfigDict(frozen=True)

    path_key: str
    op_key: str
    path: str
    all_path_operations: tuple[str, ...]
    operation_id: str | None = None
