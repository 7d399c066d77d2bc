"""Game Content Registry Core"""
__version__ = "0.1.0"

from src.core.content import (
    Building,
    Category,
    Component,
    ContentRegistry,
    Crop,
    Food,
    Item,
    Resource,
)

__all__ = [
    "Category",
    "Item",
    "Resource",
    "Component",
    "Food",
    "Crop",
    "Building",
    "ContentRegistry",
]
