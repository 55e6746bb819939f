from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunnerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RUNNER_", case_sensitive=False)

    temp: Path | None = None
    debug: bool = False
    github_output: Path | None = Field(default=None, validation_alias="GITHUB_OUTPUT")

    @field_validator("temp", "github_output", mode="before")
    @classmethod
    def _blank_as_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ToolSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="K8SBAKE_", case_sensitive=False)

    helm_path: Path | None = None
    kompose_path: Path | None = None
    kubectl_path: Path | None = None
