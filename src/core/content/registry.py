"""콘텐츠 저장소 — 카테고리별 JSON 로드 + id 조회"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping, Optional

from .errors import (
    ContentLoadError,
    FileUnavailableError,
    MalformedJsonError,
    MissingFieldError,
)
from .models import (
    LOAD_ORDER,
    Building,
    Category,
    Component,
    ContentRecord,
    Crop,
    Food,
    Resource,
)
from .parsers import ElementParser, T, get_parser

if TYPE_CHECKING:
    from src.config import Settings

logger = logging.getLogger(__name__)


def _read_array(path: Path) -> list[Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise FileUnavailableError(path, str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedJsonError(path, str(e)) from e

    if not isinstance(raw, list):
        raise MalformedJsonError(
            path, f"expected a JSON array, got {type(raw).__name__}"
        )
    return raw


def load_category(
    path: str | Path, parser: ElementParser[T], *, strict: bool = False
) -> dict[str, T]:
    """카테고리 파일 하나 로드. 반환: {id: record}.

    - 파일 없음/JSON 오류: 에러 로그 후 빈 dict (strict면 raise).
    - 필수 필드 누락 요소: 경고 로그 후 건너뜀 (strict면 raise).
    - 같은 id 중복: 나중 요소가 덮어쓴다.
    """
    path = Path(path)
    try:
        raw_list = _read_array(path)
    except ContentLoadError as e:
        if strict:
            raise
        logger.error("%s", e)
        return {}

    records: dict[str, T] = {}
    for index, raw in enumerate(raw_list):
        raw_id = raw.get("id", "?") if isinstance(raw, dict) else "?"
        try:
            if not isinstance(raw, dict):
                raise TypeError(f"element is {type(raw).__name__}, not an object")
            record = parser(raw)
        except (KeyError, ValueError, TypeError, OverflowError) as e:
            detail = f"element #{index} ({raw_id}): {e!r}"
            if strict:
                raise MissingFieldError(
                    path, detail, item_id=raw_id if raw_id != "?" else None
                ) from e
            logger.warning("Skipping malformed element in %s — %s", path, detail)
            continue

        if record.id in records:
            logger.warning("Duplicate id %r in %s, later entry wins", record.id, path)
        records[record.id] = record

    logger.info("Loaded %d records from %s", len(records), path)
    return records


class ContentRegistry:
    """
    게임 콘텐츠 저장소.
    Building / Resource / Component / Food / Crop 다섯 카테고리를
    첫 사용 시(또는 initialize()) 한 번만 로드하고, 이후엔 읽기 전용.
    """

    def __init__(
        self,
        content_dir: str | Path,
        *,
        files: Optional[Mapping[Category, str | Path]] = None,
        strict: bool = False,
    ) -> None:
        """files: 카테고리별 경로 덮어쓰기. 상대 경로는 content_dir 기준."""
        self._content_dir = Path(content_dir)
        self._strict = strict
        self._paths: dict[Category, Path] = {
            c: self._content_dir / c.default_filename for c in LOAD_ORDER
        }
        for category, path in (files or {}).items():
            self._paths[Category(category)] = self._content_dir / Path(path)

        self._stores: dict[Category, dict[str, ContentRecord]] = {
            c: {} for c in LOAD_ORDER
        }
        self._loaded = False
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> ContentRegistry:
        """Settings(CONTENT_DIR, *_FILE, CONTENT_STRICT) 기반 생성."""
        return cls(
            settings.CONTENT_DIR,
            files=settings.category_files(),
            strict=settings.CONTENT_STRICT,
        )

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def path_for(self, category: Category) -> Path:
        return self._paths[Category(category)]

    def initialize(self) -> None:
        """다섯 카테고리 로드. 이미 로드됐으면 no-op.

        카테고리 하나의 실패가 다른 카테고리 로드를 막지 않는다.
        strict 모드에선 첫 에러가 전파되고 unloaded 상태 유지.
        """
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            stores: dict[Category, dict[str, ContentRecord]] = {}
            for category in LOAD_ORDER:
                stores[category] = load_category(
                    self._paths[category], get_parser(category), strict=self._strict
                )
            self._stores = stores
            self._loaded = True

        logger.info(
            "Content registry initialized: %s",
            ", ".join(f"{c.value}={len(self._stores[c])}" for c in LOAD_ORDER),
        )

    def _store(self, category: Category) -> dict[str, ContentRecord]:
        self.initialize()
        return self._stores[Category(category)]

    # === 카테고리별 조회 ===

    def get_building(self, item_id: str) -> Optional[Building]:
        return self._store(Category.BUILDING).get(item_id)

    def get_resource(self, item_id: str) -> Optional[Resource]:
        return self._store(Category.RESOURCE).get(item_id)

    def get_component(self, item_id: str) -> Optional[Component]:
        return self._store(Category.COMPONENT).get(item_id)

    def get_food(self, item_id: str) -> Optional[Food]:
        return self._store(Category.FOOD).get(item_id)

    def get_crop(self, item_id: str) -> Optional[Crop]:
        return self._store(Category.CROP).get(item_id)

    # === 범용 ===

    def get(self, category: Category, item_id: str) -> Optional[ContentRecord]:
        """O(1) 조회. 없으면 None."""
        return self._store(category).get(item_id)

    def get_all(self, category: Category) -> list[ContentRecord]:
        return list(self._store(category).values())

    def ids(self, category: Category) -> list[str]:
        return list(self._store(category).keys())

    def count(self, category: Category) -> int:
        return len(self._store(category))


_default_registry: Optional[ContentRegistry] = None
_default_lock = threading.Lock()


def get_registry() -> ContentRegistry:
    """프로세스 공용 인스턴스 (settings 기준). 첫 호출 시 생성 + 로드."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            from src.config import settings

            _default_registry = ContentRegistry.from_settings(settings)
        registry = _default_registry
    registry.initialize()
    return registry


def reset_registry() -> None:
    """공용 인스턴스 폐기 (테스트용)."""
    global _default_registry
    with _default_lock:
        _default_registry = None
