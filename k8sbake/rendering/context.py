"""Collaborators shared by the render engines."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Protocol

from ..actions.commands import set_output
from ..actions.inputs import get_input
from ..tooling.process import ToolRunner, run_tool
from ..tooling.resolve import resolve_executable
from .paths import TemplatePathProvider, default_provider


class InputGetter(Protocol):
    def __call__(self, name: str, *, required: bool = False) -> str: ...


class RenderEngine(Protocol):
    """Anything that can bake a manifest and return where it was written."""

    def bake(self) -> Path: ...


@dataclass(frozen=True)
class BakeContext:
    get_input: InputGetter = get_input
    run: ToolRunner = run_tool
    resolve: Callable[[str], Path] = resolve_executable
    template_paths: TemplatePathProvider = field(default_factory=default_provider)
    set_output: Callable[[str, str], None] = set_output
