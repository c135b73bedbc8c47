from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TableViewSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TABLEVIEW_", env_file=".env", extra="ignore")

    default_page_size: int = Field(default=10, ge=1)
    max_visible_pages: int = Field(default=5, ge=1)
    empty_value: str = "—"
    export_dir: str = "./out/exports"
    log_level: str = "INFO"


def load_settings(env_file: str | None = ".env") -> TableViewSettings:
    """Read settings from the environment with an optional .env override."""
    return TableViewSettings(_env_file=env_file)


settings = TableViewSettings()
