"""Application configuration loaded from environment variables and .env file."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.content.models import Category

DEFAULT_CONTENT_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"

    # Content files
    CONTENT_DIR: Path = DEFAULT_CONTENT_DIR
    BUILDING_FILE: str = Category.BUILDING.default_filename
    RESOURCES_FILE: str = Category.RESOURCE.default_filename
    COMPONENTS_FILE: str = Category.COMPONENT.default_filename
    FOODS_FILE: str = Category.FOOD.default_filename
    CROPS_FILE: str = Category.CROP.default_filename

    # True: malformed files/elements raise instead of being logged and skipped
    CONTENT_STRICT: bool = False

    def category_files(self) -> dict[Category, str]:
        """Category -> file name (relative to CONTENT_DIR unless absolute)."""
        return {
            Category.BUILDING: self.BUILDING_FILE,
            Category.RESOURCE: self.RESOURCES_FILE,
            Category.COMPONENT: self.COMPONENTS_FILE,
            Category.FOOD: self.FOODS_FILE,
            Category.CROP: self.CROPS_FILE,
        }


settings = Settings()
