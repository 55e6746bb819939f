"""Top-level bake run: select an engine, bake, publish the manifest path."""

from __future__ import annotations

import logging
from pathlib import Path

from .core.errors import BakeActionError
from .rendering.context import BakeContext
from .rendering.selector import select_engine

logger = logging.getLogger(__name__)

ENGINE_INPUT = "renderEngine"
MANIFEST_OUTPUT = "manifestsBundle"


def run(context: BakeContext | None = None) -> Path:
    """Bake the manifest described by the action inputs.

    Engine selection errors surface unchanged; anything raised while baking
    is reported as a single BakeActionError. The output is set only on success.
    """
    context = context or BakeContext()
    engine_name = context.get_input(ENGINE_INPUT, required=True)
    engine = select_engine(engine_name, context)
    logger.debug(f"Selected {type(engine).__name__} for {engine_name!r}")

    try:
        manifest = engine.bake()
    except Exception as exc:
        raise BakeActionError(f"Failed to run bake action. Error: {exc}") from exc

    context.set_output(MANIFEST_OUTPUT, str(manifest))
    return manifest
