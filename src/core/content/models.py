"""콘텐츠 도메인 모델 — 불변 레코드 (파일 I/O 무관)"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Mapping, Union


class Category(str, Enum):
    BUILDING = "building"
    RESOURCE = "resource"
    COMPONENT = "component"
    FOOD = "food"
    CROP = "crop"

    @property
    def default_filename(self) -> str:
        return _DEFAULT_FILENAMES[self]


_DEFAULT_FILENAMES: dict[Category, str] = {
    Category.BUILDING: "building.json",
    Category.RESOURCE: "resources.json",
    Category.COMPONENT: "components.json",
    Category.FOOD: "foods.json",
    Category.CROP: "crops.json",
}

# 로드 순서
LOAD_ORDER: tuple[Category, ...] = (
    Category.BUILDING,
    Category.RESOURCE,
    Category.COMPONENT,
    Category.FOOD,
    Category.CROP,
)


def freeze_requirements(requirements: Mapping[str, int] | None = None) -> Mapping[str, int]:
    """requirements dict → 읽기 전용 view. None이면 빈 매핑."""
    return MappingProxyType(dict(requirements or {}))


@dataclass(frozen=True)
class Item:
    """모든 콘텐츠 레코드의 공통 필드."""

    category: ClassVar[Category]

    id: str  # "iron", "wall"
    name: str
    description: str
    type: str  # 자유 형식 태그
    value: int
    stack_size: int

    def _extra_fields(self) -> list[str]:
        return []

    def describe(self) -> str:
        """한 줄 요약 (데모 출력용)."""
        parts = [
            f"id={self.id!r}",
            f"name={self.name!r}",
            f"description={self.description!r}",
            f"type={self.type!r}",
            f"value={self.value}",
            f"stackSize={self.stack_size}",
        ]
        parts.extend(self._extra_fields())
        return f"{type(self).__name__}{{{', '.join(parts)}}}"


def _format_requirements(requirements: Mapping[str, int]) -> str:
    inner = ", ".join(f"{k}={v}" for k, v in requirements.items())
    return f"requirements={{{inner}}}"


@dataclass(frozen=True)
class Resource(Item):
    category: ClassVar[Category] = Category.RESOURCE


@dataclass(frozen=True)
class Component(Item):
    category: ClassVar[Category] = Category.COMPONENT

    requirements: Mapping[str, int] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "requirements", freeze_requirements(self.requirements))

    def _extra_fields(self) -> list[str]:
        return [_format_requirements(self.requirements)]


@dataclass(frozen=True)
class Food(Item):
    category: ClassVar[Category] = Category.FOOD

    hunger_restore: int
    cook_time: int  # 조리 시간
    requirements: Mapping[str, int] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "requirements", freeze_requirements(self.requirements))

    def _extra_fields(self) -> list[str]:
        return [
            f"hungerRestore={self.hunger_restore}",
            f"cookTime={self.cook_time}",
            _format_requirements(self.requirements),
        ]


@dataclass(frozen=True)
class Crop(Item):
    category: ClassVar[Category] = Category.CROP

    grow_time: int
    yield_: int  # JSON key "yield"

    @property
    def crop_yield(self) -> int:
        return self.yield_

    def _extra_fields(self) -> list[str]:
        return [f"growTime={self.grow_time}", f"yield={self.yield_}"]


@dataclass(frozen=True)
class Building(Item):
    category: ClassVar[Category] = Category.BUILDING

    health: int
    armor: int
    requirements: Mapping[str, int] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "requirements", freeze_requirements(self.requirements))

    def _extra_fields(self) -> list[str]:
        return [
            f"health={self.health}",
            f"armor={self.armor}",
            _format_requirements(self.requirements),
        ]


ContentRecord = Union[Resource, Component, Food, Crop, Building]

RECORD_TYPES: dict[Category, type[Item]] = {
    Category.BUILDING: Building,
    Category.RESOURCE: Resource,
    Category.COMPONENT: Component,
    Category.FOOD: Food,
    Category.CROP: Crop,
}
