"""카테고리별 요소 파서 — JSON 객체(dict) → 불변 레코드

각 파서는 필수 필드 누락 시 KeyError, 값 변환 실패 시 ValueError/TypeError를 던진다.
경로 정보와 에러 래핑은 registry.load_category 담당.
"""

from __future__ import annotations

import math
from typing import Any, Callable, TypeVar

from .models import Building, Category, Component, Crop, Food, Item, Resource

T = TypeVar("T", bound=Item)

ElementParser = Callable[[dict[str, Any]], T]


def as_int(raw: dict[str, Any], key: str) -> int:
    """정수 필드 추출. bool, 소수부가 있는 값, inf/nan, 숫자 아닌 값은 ValueError.

    3.0 같은 정수값 float는 허용.
    """
    value = raw[key]
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    raise ValueError(f"{key} must be an integer, got {value!r}")


def parse_common(raw: dict[str, Any]) -> dict[str, Any]:
    """공통 필드 추출. 반환: Item 생성자 kwargs."""
    item_id = raw["id"]
    if not isinstance(item_id, str) or not item_id:
        raise ValueError(f"invalid id: {item_id!r}")
    return {
        "id": item_id,
        "name": raw["name"],
        "description": raw["description"],
        "type": raw["type"],
        "value": as_int(raw, "value"),
        "stack_size": as_int(raw, "stackSize"),
    }


def parse_requirements(raw: dict[str, Any]) -> dict[str, int]:
    """requirements 배열 [{id, amount}, ...] → {id: amount}.

    키 자체가 없으면 KeyError. [] 또는 null은 빈 dict.
    같은 id가 반복되면 마지막 값.
    """
    entries = raw["requirements"]
    if entries is None:
        return {}
    if not isinstance(entries, list):
        raise ValueError(
            f"requirements must be an array, got {type(entries).__name__}"
        )
    return {entry["id"]: as_int(entry, "amount") for entry in entries}


def parse_resource(raw: dict[str, Any]) -> Resource:
    return Resource(**parse_common(raw))


def parse_component(raw: dict[str, Any]) -> Component:
    return Component(**parse_common(raw), requirements=parse_requirements(raw))


def parse_food(raw: dict[str, Any]) -> Food:
    return Food(
        **parse_common(raw),
        hunger_restore=as_int(raw, "hungerRestore"),
        cook_time=as_int(raw, "cookTime"),
        requirements=parse_requirements(raw),
    )


def parse_crop(raw: dict[str, Any]) -> Crop:
    return Crop(
        **parse_common(raw),
        grow_time=as_int(raw, "growTime"),
        yield_=as_int(raw, "yield"),
    )


def parse_building(raw: dict[str, Any]) -> Building:
    return Building(
        **parse_common(raw),
        health=as_int(raw, "health"),
        armor=as_int(raw, "armor"),
        requirements=parse_requirements(raw),
    )


PARSERS: dict[Category, ElementParser] = {
    Category.BUILDING: parse_building,
    Category.RESOURCE: parse_resource,
    Category.COMPONENT: parse_component,
    Category.FOOD: parse_food,
    Category.CROP: parse_crop,
}


def get_parser(category: Category) -> ElementParser:
    """카테고리 → 파서. 카테고리가 변형을 결정한다."""
    return PARSERS[category]
