"""設定ファイル読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import SemaphoreError, SemaphoreErrorCodes
from .models import SemaphoreConfig

_SECTION = "semaphore"


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SemaphoreError(
            code=SemaphoreErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise SemaphoreError(
            code=SemaphoreErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise SemaphoreError(
            code=SemaphoreErrorCodes.PARSE_YAML,
            message=f"Config root must be a mapping: {path}",
        )
    return data


def load_config(path: Path) -> SemaphoreConfig:
    """設定ファイルを読み込んで SemaphoreConfig を返す。

    path: YAML ファイルパス。`semaphore:` セクションがあればそれを使い、
    なければトップレベルをそのまま設定とみなす。
    """
    data = _read_yaml(path)
    section = data.get(_SECTION, data)
    if section is None:
        section = {}
    try:
        return SemaphoreConfig.model_validate(section)
    except ValidationError as e:
        raise SemaphoreError(
            code=SemaphoreErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
