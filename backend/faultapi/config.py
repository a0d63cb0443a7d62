"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - enabled_issues is fixed for the process lifetime (read once at startup)
    - Unknown issue tags fail validation instead of being ignored
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - ENABLED_ISSUES accepts a JSON list or a comma-separated string; NoDecode
      hands the raw env value to split_issue_list instead of forcing JSON
    - Defaults serve the built-in charges resource with only invalid_payload enabled
"""

import json
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from faultapi.core.domain_types import IssueCategory


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Fault injection
    enabled_issues: Annotated[list[IssueCategory], NoDecode] = [
        IssueCategory.INVALID_PAYLOAD,
    ]

    @field_validator("enabled_issues", mode="before")
    @classmethod
    def split_issue_list(cls, v):
        """Accept "a,b" as well as '["a", "b"]'."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [tag.strip() for tag in v.split(",") if tag.strip()]
        return v

    # Resources
    resources_file: str | None = None

    # API
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
