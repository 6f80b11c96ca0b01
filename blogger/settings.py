from pathlib import Path
from typing import Optional

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

    # Where the JSON documents live. BLOG_BASE_URL wins over BLOG_ROOT when set.
    BLOG_ROOT: str = "."
    BLOG_BASE_URL: str = ""
    BLOG_DIRECTORY: str = "blog/"
    BLOG_METADATA_FILE: str = "posts.json"

    # None means wait forever
    FETCH_TIMEOUT_SECONDS: Optional[float] = None

    # Rendering
    DISPLAY_TIMEZONE: str = "UTC"
    ESCAPE_HTML: bool = True
    READ_MORE_PAGE: str = "blog.html"
    LATEST_MAX_CHARS: int = -1

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def fetches_over_http(self) -> bool:
        return bool(self.BLOG_BASE_URL)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
