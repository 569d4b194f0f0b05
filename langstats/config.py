from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Optional

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings

# markup and style languages never counted towards the totals
DEFAULT_EXCLUDED_LANGUAGES: FrozenSet[str] = frozenset({"HTML", "CSS", "SCSS"})


class Settings(BaseSettings):
    github_token: Optional[str] = Field(default=None, alias="GH_TOKEN")
    github_base_url: HttpUrl = Field(
        default="https://api.github.com", alias="GITHUB_BASE_URL"
    )
    github_proxy: Optional[str] = Field(default=None, alias="GITHUB_PROXY")
    user_agent: str = Field(default="langstats", alias="LANGSTATS_USER_AGENT")
    request_timeout: float = Field(default=20.0, alias="LANGSTATS_REQUEST_TIMEOUT")
    page_size: int = Field(default=100, alias="LANGSTATS_PAGE_SIZE")
    languages_per_repo: int = Field(default=10, alias="LANGSTATS_LANGUAGES_PER_REPO")
    excluded_languages: FrozenSet[str] = Field(
        default=DEFAULT_EXCLUDED_LANGUAGES, alias="LANGSTATS_EXCLUDED_LANGUAGES"
    )
    top_n: int = Field(default=10, ge=1, le=10, alias="LANGSTATS_TOP_N")
    terminal_title: Optional[str] = Field(default=None, alias="LANGSTATS_TERMINAL_TITLE")
    output_dir: Path = Field(default=Path("dist"), alias="LANGSTATS_OUTPUT_DIR")
    output_filename: str = Field(
        default="language-stats.svg", alias="LANGSTATS_OUTPUT_FILENAME"
    )
    log_level: str = Field(default="INFO", alias="LANGSTATS_LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # ignore unrelated env vars to avoid validation errors

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_filename


@lru_cache
def get_settings() -> Settings:
    return Settings()
