"""Demonstration entrypoint: load the content registry and print a few records."""

import argparse
import sys
from typing import Optional, Sequence

from src.config import settings
from src.core.content import Category, ContentLoadError, ContentRegistry
from src.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

# (카테고리, id) — 데모 조회 대상
DEMO_LOOKUPS: tuple[tuple[Category, str], ...] = (
    (Category.BUILDING, "wall"),
    (Category.RESOURCE, "iron"),
    (Category.COMPONENT, "glass"),
    (Category.FOOD, "french_fries"),
    (Category.CROP, "potato"),
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Load game content and print sample records",
    )
    parser.add_argument(
        "--content-dir", default=None,
        help=f"Directory holding the content JSON files (default: {settings.CONTENT_DIR})",
    )
    parser.add_argument(
        "--strict", action=argparse.BooleanOptionalAction,
        default=settings.CONTENT_STRICT,
        help="Fail on missing files, bad JSON or malformed elements",
    )
    parser.add_argument(
        "--log-level", default=settings.LOG_LEVEL,
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def build_registry(args: argparse.Namespace) -> ContentRegistry:
    """CLI 인자 > settings 순으로 레지스트리 구성."""
    return ContentRegistry(
        args.content_dir or settings.CONTENT_DIR,
        files=settings.category_files(),
        strict=args.strict,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    registry = build_registry(args)
    try:
        registry.initialize()
    except ContentLoadError as e:
        logger.error("Content load aborted: %s", e)
        return 1

    for category, item_id in DEMO_LOOKUPS:
        record = registry.get(category, item_id)
        if record is None:
            print(f"{category.value} {item_id!r}: not found")
        else:
            print(record.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())
