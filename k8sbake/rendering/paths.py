"""Allocation of output paths for baked manifests."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from ..actions.settings import RunnerSettings
from ..core.errors import NoScratchDirectoryError

logger = logging.getLogger(__name__)

TEMPLATE_PREFIX = "baked-template-"
TEMPLATE_SUFFIX = ".yaml"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TemplatePathProvider:
    """Hands out unique ``baked-template-<ms>.yaml`` paths in the scratch directory.

    Stamps are epoch milliseconds; a call landing in the same millisecond as
    (or earlier than) the previous one gets the previous stamp plus one.
    """

    def __init__(self, scratch_dir: Path | None = None, clock=_now_ms) -> None:
        self._scratch_dir = scratch_dir
        self._clock = clock
        self._last_stamp = 0

    def scratch_dir(self) -> Path:
        if self._scratch_dir is not None:
            return self._scratch_dir
        temp = RunnerSettings().temp
        if temp is None:
            raise NoScratchDirectoryError(
                "Unable to create temp directory: RUNNER_TEMP is not set"
            )
        return temp

    def _next_stamp(self) -> int:
        stamp = max(self._clock(), self._last_stamp + 1)
        self._last_stamp = stamp
        return stamp

    def get_template_path(self) -> Path:
        directory = self.scratch_dir().resolve()
        path = directory / f"{TEMPLATE_PREFIX}{self._next_stamp()}{TEMPLATE_SUFFIX}"
        logger.debug(f"Allocated manifest path {path}")
        return path


_default_provider = TemplatePathProvider()


def default_provider() -> TemplatePathProvider:
    return _default_provider


def get_template_path() -> Path:
    return _default_provider.get_template_path()
