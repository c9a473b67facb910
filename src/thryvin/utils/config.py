"""Configuration management for thryvin."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Applied in order; later files override earlier ones key by key.
CONFIG_FILES = ("config.user.yaml", "config.runtime.yaml")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Config(BaseModel):
    """
    Settings for one onboarding workspace (~/.thryvin/ by default).

    Every setting is a flat key. ``config.user.yaml`` holds what the user
    chose; ``config.runtime.yaml`` is written by tooling and wins on
    conflicts. Unknown keys are rejected so a misspelt setting fails loudly
    instead of silently keeping its default.
    """

    model_config = ConfigDict(extra="forbid")

    workspace: Path
    min_age: int = Field(default=16, ge=0)
    schedule_window_days: int = Field(default=21, gt=0)
    catalog_path: Path | None = None
    profile_path: Path = Field(default=Path("profile.yaml"))
    coach_seed: int | None = None
    logging_path: Path = Field(default=Path(".logs"))
    log_level: LogLevel = "INFO"
    console_log_level: LogLevel = "WARNING"

    @model_validator(mode="after")
    def resolve_paths(self) -> "Config":
        """Resolve workspace-relative paths; absolute ones are rejected."""
        for field_name in ("catalog_path", "logging_path", "profile_path"):
            path = getattr(self, field_name)
            if path is None:
                continue
            if path.is_absolute():
                raise ValueError(f"{field_name} must be relative, got: {path}")
            setattr(self, field_name, self.workspace / path)
        return self

    @classmethod
    def load(cls, workspace_dir: Path) -> "Config":
        """
        Load configuration from a workspace directory.

        Args:
            workspace_dir: Path to the workspace directory

        Returns:
            Config instance with all settings loaded and validated

        Raises:
            ValidationError: If a setting is unknown or invalid
            ValueError: If a config file is not a mapping
        """
        settings: dict[str, Any] = {}
        for name in CONFIG_FILES:
            settings.update(cls._read_layer(workspace_dir / name))
        return cls.model_validate({**settings, "workspace": workspace_dir})

    @staticmethod
    def _read_layer(path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path.name} must contain a mapping of settings")
        return data
