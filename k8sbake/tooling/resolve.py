"""Locating renderer executables on the runner."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..actions.settings import ToolSettings
from ..core.errors import ToolNotFoundError

logger = logging.getLogger(__name__)

KNOWN_TOOLS = ("helm", "kompose", "kubectl")


def resolve_executable(name: str, *, settings: ToolSettings | None = None) -> Path:
    """Return the path of a renderer executable.

    An explicit ``K8SBAKE_<NAME>_PATH`` setting wins; otherwise PATH is searched.
    """
    if name not in KNOWN_TOOLS:
        raise ToolNotFoundError(f"Unsupported tool: {name}")

    settings = settings or ToolSettings()
    configured: Path | None = getattr(settings, f"{name}_path")
    if configured is not None:
        if not configured.is_file():
            raise ToolNotFoundError(
                f"Configured {name} path {configured} does not exist"
            )
        logger.debug(f"Using configured {name}: {configured}")
        return configured

    found = shutil.which(name)
    if found is None:
        raise ToolNotFoundError(f"missing dependency: {name} was not found on PATH")
    logger.debug(f"Resolved {name} to {found}")
    return Path(found)
