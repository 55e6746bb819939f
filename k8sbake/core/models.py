"""Domain models for render configuration and tool metadata."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LEADING_INT = re.compile(r"^\s*(\d+)")


class EngineKind(str, Enum):
    """Supported render backends, keyed by their input value."""

    HELM = "helm2"
    KOMPOSE = "kompose"
    KUSTOMIZE = "kustomize"


class OverridePair(BaseModel):
    """A single ``--set`` override for helm."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = ""

    @classmethod
    def parse(cls, token: str) -> OverridePair:
        """Split ``key:value`` on the first colon; the value may hold more colons."""
        name, _, value = token.partition(":")
        return cls(name=name, value=value)

    def as_set_argument(self) -> str:
        return f"{self.name}={self.value}"


class HelmConfig(BaseModel):
    """Inputs consumed by the helm engine."""

    model_config = ConfigDict(frozen=True)

    chart_path: str = Field(..., min_length=1, description="Chart directory or reference")
    release_name: str | None = Field(default=None, description="Release name")
    override_files: tuple[str, ...] = Field(default=(), description="Values files")
    overrides: tuple[OverridePair, ...] = Field(default=(), description="--set pairs")


class KomposeConfig(BaseModel):
    """Inputs consumed by the kompose engine."""

    model_config = ConfigDict(frozen=True)

    compose_file: Path = Field(..., description="docker-compose file path")


class KustomizeConfig(BaseModel):
    """Inputs consumed by the kustomize engine."""

    model_config = ConfigDict(frozen=True)

    kustomization_path: Path = Field(..., description="Kustomization directory")


class VersionInfo(BaseModel):
    """Client version as reported by ``kubectl version``."""

    major: int
    minor: int

    @field_validator("major", "minor", mode="before")
    @classmethod
    def _leading_integer(cls, value: Any) -> Any:
        # kubectl on some distributions reports minors such as "14+"
        if isinstance(value, str):
            match = _LEADING_INT.match(value)
            if match is None:
                raise ValueError(f"not a version number: {value!r}")
            return int(match.group(1))
        return value

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}"
