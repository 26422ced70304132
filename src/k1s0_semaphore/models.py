"""セマフォ設定モデル（pydantic BaseModel）"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_CAPACITY = 128


class SemaphoreConfig(BaseModel):
    """セマフォ設定。

    capacity: 同時に保持できる permit 数
    acquire_timeout: acquire のデフォルトタイムアウト（秒）。None または 0 は無期限待機。
    """

    capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    acquire_timeout: float | None = Field(
        default=None,
        ge=0.0,
        allow_inf_nan=False,
        description="Default acquire timeout in seconds (not milliseconds)",
    )
