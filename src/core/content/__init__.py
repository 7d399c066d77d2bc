"""콘텐츠 레지스트리 Core — 순수 Python, JSON 파일만 의존"""

from .errors import (
    ContentLoadError,
    FileUnavailableError,
    MalformedJsonError,
    MissingFieldError,
)
from .models import (
    Building,
    Category,
    Component,
    ContentRecord,
    Crop,
    Food,
    Item,
    Resource,
)
from .parsers import get_parser
from .registry import ContentRegistry, get_registry, load_category, reset_registry

__all__ = [
    "Category",
    "Item",
    "Resource",
    "Component",
    "Food",
    "Crop",
    "Building",
    "ContentRecord",
    "ContentLoadError",
    "FileUnavailableError",
    "MalformedJsonError",
    "MissingFieldError",
    "get_parser",
    "load_category",
    "ContentRegistry",
    "get_registry",
    "reset_registry",
]
