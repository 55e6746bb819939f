"""Mapping from the ``renderEngine`` input to an engine implementation."""

from __future__ import annotations

from typing import Callable

from ..core.errors import UnknownEngineError
from ..core.models import EngineKind
from .context import BakeContext, RenderEngine
from .helm import HelmRenderEngine
from .kompose import KomposeRenderEngine
from .kustomize import KustomizeRenderEngine

ENGINES: dict[EngineKind, Callable[[BakeContext], RenderEngine]] = {
    EngineKind.HELM: HelmRenderEngine,
    EngineKind.KOMPOSE: KomposeRenderEngine,
    EngineKind.KUSTOMIZE: KustomizeRenderEngine,
}


def select_engine(name: str, context: BakeContext | None = None) -> RenderEngine:
    try:
        kind = EngineKind(name)
    except ValueError as exc:
        raise UnknownEngineError(name) from exc
    return ENGINES[kind](context or BakeContext())
