# state.py
"""마지막으로 본 공지 번호(last_index)를 관리하는 모듈."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER = logging.getLogger(__name__)

LAST_INDEX_FILENAME = "last_index"


def default_last_index_path() -> Path:
    """Return the ``last_index`` file next to the running executable."""
    return Path(sys.argv[0]).resolve().parent / LAST_INDEX_FILENAME


def load_last_index(path: str | Path | None = None) -> Optional[int]:
    """last_index 파일에서 번호를 읽어옵니다. 없거나 깨졌으면 None."""
    index_path = Path(path) if path is not None else default_last_index_path()
    try:
        raw = index_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        LOGGER.info("last_index 없음: %s", index_path)
        return None

    try:
        return int(raw.strip())
    except ValueError:
        LOGGER.warning("last_index 파싱 실패: %r", raw)
        return None


def save_last_index(value: int, path: str | Path | None = None) -> Path:
    """Overwrite the watermark file with the bare decimal ``value``.

    OSError propagates to the caller.
    """
    index_path = Path(path) if path is not None else default_last_index_path()
    index_path.write_text(str(value), encoding="utf-8")
    LOGGER.info("last_index 저장 완료: %d -> %s", value, index_path)
    return index_path
