from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the skill.

    Values are loaded from ``SIGNALWIRE_SKILL_*`` environment variables by
    default and may be overridden via CLI flags.
    """

    # Content
    # ``None`` selects the bundle shipped inside the package.
    content_root: Path | None = None

    # Activation
    extra_triggers: list[str] = Field(default_factory=list)
    min_confidence: float = Field(default=0.0, ge=0.0, le=1.0)

    # Routing
    max_documents: PositiveInt = 5

    # Privacy
    redact_requests: bool = True

    model_config = SettingsConfigDict(
        env_prefix="SIGNALWIRE_SKILL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
