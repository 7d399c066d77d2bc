"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from src.core.content.models import Category
from src.core.content.registry import reset_registry

BUNDLED_DATA_DIR = Path(__file__).resolve().parents[1] / "src" / "data"

SAMPLE_CONTENT: dict[Category, list[dict[str, Any]]] = {
    Category.BUILDING: [
        {
            "id": "wall",
            "name": "Wall",
            "description": "Stops things",
            "type": "defense",
            "value": 20,
            "stackSize": 10,
            "health": 250,
            "armor": 5,
            "requirements": [{"id": "wood", "amount": 4}],
        },
    ],
    Category.RESOURCE: [
        {
            "id": "iron",
            "name": "Iron",
            "description": "Ore",
            "type": "ore",
            "value": 5,
            "stackSize": 50,
        },
        {
            "id": "wood",
            "name": "Wood",
            "description": "Logs",
            "type": "material",
            "value": 1,
            "stackSize": 100,
        },
    ],
    Category.COMPONENT: [
        {
            "id": "iron_plate",
            "name": "Iron Plate",
            "description": "Flat iron",
            "type": "crafted",
            "value": 15,
            "stackSize": 25,
            "requirements": [
                {"id": "iron", "amount": 3},
                {"id": "wood", "amount": 2},
            ],
        },
    ],
    Category.FOOD: [
        {
            "id": "berries",
            "name": "Berries",
            "description": "Raw",
            "type": "raw",
            "value": 2,
            "stackSize": 30,
            "hungerRestore": 5,
            "cookTime": 0,
            "requirements": [],
        },
    ],
    Category.CROP: [
        {
            "id": "potato",
            "name": "Potato",
            "description": "Tuber",
            "type": "vegetable",
            "value": 3,
            "stackSize": 50,
            "growTime": 120,
            "yield": 4,
        },
    ],
}


@pytest.fixture(autouse=True)
def _reset_default_registry():
    """프로세스 공용 레지스트리를 테스트마다 초기화."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture()
def write_content(tmp_path: Path) -> Callable[..., Path]:
    """카테고리 파일 작성 헬퍼. data가 str이면 그대로 기록."""

    def _write(category: Category, data: Any, directory: Path = tmp_path) -> Path:
        path = directory / category.default_filename
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def content_dir(tmp_path: Path, write_content: Callable[..., Path]) -> Path:
    """다섯 카테고리가 모두 정상인 콘텐츠 디렉토리."""
    for category, elements in SAMPLE_CONTENT.items():
        write_content(category, elements)
    return tmp_path


@pytest.fixture()
def bundled_data_dir() -> Path:
    return BUNDLED_DATA_DIR


@pytest.fixture()
def sample_content() -> dict[Category, list[dict[str, Any]]]:
    return SAMPLE_CONTENT
