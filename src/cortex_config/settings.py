"""Cortex configuration.

Values come from the process environment first, then from the first env file
that exists among:

- the path in ``CORTEX_ENV_FILE`` (relative paths resolve from the repo root)
- ``config/.env.dev``
- ``config/.env``

Nothing is required: without an AI key the service runs on keyword scoring.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AI_MODELS = "llama-3.3-70b-versatile,llama-3.1-8b-instant,mixtral-8x7b-32768"
ENV_FILE_VARIABLE = "CORTEX_ENV_FILE"


def _repo_root() -> Path:
    """Closest ancestor holding ``config/`` or ``.git``; ``/app`` inside Docker."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / ".git").is_dir():
            return candidate
        if candidate == Path("/app"):
            return candidate
    return Path(__file__).resolve().parents[2]


def _env_file() -> Path | None:
    root = _repo_root()
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else root / path)

    candidates += [root / "config" / ".env.dev", root / "config" / ".env"]
    return next((path for path in candidates if path.exists()), None)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Typed view over the environment. Field names map to upper-case variables."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "Cortex"
    brain_name: str = "Cortex – AI Second Brain"

    database_url: str = "sqlite+aiosqlite:///./data/cortex.db"

    # HTTP server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # comma-separated; empty disables CORS

    # Completion backend; GROQ_API_KEY is accepted as well
    ai_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AI_API_KEY", "GROQ_API_KEY"),
    )
    ai_base_url: str = "https://api.groq.com/openai/v1"
    ai_models: str = DEFAULT_AI_MODELS  # fallback order
    ai_timeout: float = 30.0
    ai_temperature: float = 0.3
    ai_analysis_max_tokens: int = 500
    ai_query_max_tokens: int = 1000

    query_context_size: int = 20
    query_public_fetch_limit: int = 100
    public_feed_limit: int = 10

    rate_limit_enabled: bool = True
    rate_limit_sweep_interval: float = 300.0

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origin_list(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return _split_csv(self.api_cors_origins)

    @property
    def ai_model_list(self) -> list[str]:
        return _split_csv(self.ai_models)

    @property
    def ai_enabled(self) -> bool:
        return self.ai_api_key is not None and bool(self.ai_api_key.get_secret_value())


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
