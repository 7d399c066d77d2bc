"""콘텐츠 로드 에러 분류"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ContentLoadError(Exception):
    """카테고리 파일 로드 실패."""

    def __init__(self, path: str | Path, detail: str) -> None:
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = str(path)
        self.detail = detail


class FileUnavailableError(ContentLoadError):
    """파일 없음 / 읽기 불가."""


class MalformedJsonError(ContentLoadError):
    """JSON 파싱 실패 또는 최상위가 배열이 아님."""


class MissingFieldError(ContentLoadError):
    """요소의 필수 필드 누락 (또는 정수 변환 불가)."""

    def __init__(
        self, path: str | Path, detail: str, item_id: Optional[str] = None
    ) -> None:
        super().__init__(path, detail)
        self.item_id = item_id
