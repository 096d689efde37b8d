from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content/blog"
    CONTENT_EXTENSIONS: List[str] = [".mdx", ".md"]
    POSTS_PAGE_SIZE: int = 6
    POSTS_CACHE_ENABLED: bool = False

    # Site
    SITE_URL: str = "http://localhost:3000"
    SITE_LAUNCH_DATE: str = "2025-05-01"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    BLOG_API_KEY: str = ""

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def sitemap_url(self) -> str:
        return f"{self.SITE_URL.rstrip('/')}/sitemap.xml"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
