# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for deployment-specific settings. Values reach the
resolver, cache gateway and search job through constructor arguments; no
component reads the environment on its own.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from readmekit.config.durations import parse_duration


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


def _split_csv(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === README resolution ===
    readme_file_names: str = ""
    readme_cache_ttl: str = "1h"
    symlink_max_length: int = 256

    # === Cache ===
    cache_backend: Literal["memory", "json", "redis"] = "memory"
    cache_root: Path = Path("~/.readmekit/cache")
    cache_redis_url: str = ""

    # === Catalog ===
    catalog_base_url: str = "http://localhost:7007/api/catalog"
    catalog_timeout: float = 30.0

    # === SCM ===
    http_timeout: float = 30.0
    scm_github_hosts: str = "github.com"
    scm_gitlab_hosts: str = "gitlab.com"

    # === Search indexing ===
    search_kinds: str = "component,api,system"
    search_frequency: str = "1h"
    search_timeout: str = "1h"
    search_initial_delay: str = "3s"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("symlink_max_length")
    @classmethod
    def validate_symlink_max_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("symlink_max_length must be > 0")
        return v

    @field_validator(
        "readme_cache_ttl", "search_frequency", "search_timeout", "search_initial_delay"
    )
    @classmethod
    def validate_duration(cls, v: str) -> str:
        parse_duration(v)
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.cache_ttl_seconds <= 0:
            errors.append("README_CACHE_TTL must be positive")

        if parse_duration(self.search_frequency) <= 0:
            errors.append("SEARCH_FREQUENCY must be positive")

        if self.cache_backend == "redis" and not self.cache_redis_url:
            errors.append("CACHE_REDIS_URL must be set when CACHE_BACKEND=redis")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def readme_file_names_list(self) -> list[str]:
        """Parse comma-separated README file names (empty = defaults)."""
        return _split_csv(self.readme_file_names)

    @property
    def cache_ttl_seconds(self) -> float:
        return parse_duration(self.readme_cache_ttl)

    @property
    def scm_github_hosts_list(self) -> list[str]:
        return _split_csv(self.scm_github_hosts)

    @property
    def scm_gitlab_hosts_list(self) -> list[str]:
        return _split_csv(self.scm_gitlab_hosts)

    @property
    def search_kinds_list(self) -> list[str]:
        return _split_csv(self.search_kinds)


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or CLI flags).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
