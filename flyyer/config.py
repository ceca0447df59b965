"""Library configuration powered by environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CDN_BASE = "https://cdn.flyyer.io"


class Settings(BaseSettings):
    """Central settings backed by environment variables."""

    cdn_base: str = Field(default=DEFAULT_CDN_BASE, alias="FLYYER_CDN_BASE")
    log_level: str = Field(default="INFO", alias="FLYYER_LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")

    def model_post_init(self, __context: Any) -> None:
        """Normalize the CDN base so builders can append paths directly."""
        self.cdn_base = (self.cdn_base.strip() or DEFAULT_CDN_BASE).rstrip("/")
        self.log_level = self.log_level.strip().upper() or "INFO"

    @property
    def render_base(self) -> str:
        """Prefix for direct-render URLs (tenant/deck/template)."""
        return f"{self.cdn_base}/r/v2"

    @property
    def project_base(self) -> str:
        """Prefix for routed URLs (project/path)."""
        return f"{self.cdn_base}/v2"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
