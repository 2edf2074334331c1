"""Configuration loading utilities for deconfig."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .paths import project_config_path, runtime_config_dir
from .utils.validation import resolve_and_check_path


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class StorageConfig(BaseModel):
    sync_dir: Path = Field(default=Path("config/sync"), description="Exported, redacted configuration")
    active_dir: Path = Field(default=Path("config/active"), description="Live configuration")

    @field_validator("sync_dir", "active_dir")
    @classmethod
    def _validate_dir(cls, value: Path) -> Path:
        return resolve_and_check_path(value)


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield project_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return AppConfig()


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    defaults = {
        "logging": LoggingConfig().model_dump(mode="json"),
        "storage": {"sync_dir": "config/sync", "active_dir": "config/active"},
    }
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(defaults, handle, sort_keys=False)
