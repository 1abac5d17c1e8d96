from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.observations import Width


class RuntimeConfig(BaseModel):
    default_width: Width = Field(
        Width.FLOAT64, description="Source width assumed for CLI values"
    )
    moment_orders: List[int] = Field(
        default_factory=lambda: [1, 2, 3, 4],
        description="Raw moment orders reported by 'describe'",
    )
    precision: int = Field(6, ge=0, description="Digits after the decimal point in CLI output")

    @field_validator("moment_orders")
    @classmethod
    def _positive_orders(cls, v: List[int]) -> List[int]:
        bad = [k for k in v if k < 1]
        if bad:
            raise ValueError(f"moment orders must be >= 1, got {bad}")
        return v


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"
    # When set, CLI results are also appended to this timestamped text log
    TXT_LOG_PATH: Optional[Path] = None


class AppConfig(BaseModel):
    env: EnvSettings
    runtime: RuntimeConfig

    @field_validator("env", mode="before")
    @classmethod
    def _coerce_env(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, dict):
            return EnvSettings(**v)
        return v

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "AppConfig":
        env = EnvSettings()  # loads from environment and .env

        runtime = RuntimeConfig()
        if config_path is None:
            default_path = Path("config.yaml")
            config_path = default_path if default_path.exists() else None

        if config_path and Path(config_path).exists():
            with open(config_path, "r", encoding="utf-8") as fh:
                try:
                    raw = yaml.safe_load(fh) or {}
                except yaml.YAMLError as ye:
                    raise ValueError(f"Invalid {config_path}: {ye}") from ye
            if not isinstance(raw, dict):
                raise ValueError(
                    f"Invalid {config_path}: expected a mapping, got {type(raw).__name__}"
                )
            try:
                runtime = RuntimeConfig(**raw)
            except ValidationError as ve:
                raise ValueError(f"Invalid {config_path}: {ve}") from ve

        return AppConfig(env=env, runtime=runtime)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load merged configuration from environment and optional YAML."""

    return AppConfig.load(config_path)
