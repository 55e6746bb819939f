from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import Protocol, Sequence

from ..core.errors import ExternalToolError

logger = logging.getLogger(__name__)


class ToolRunner(Protocol):
    def __call__(
        self, executable: Path | str, args: Sequence[str], *, silent: bool = False
    ) -> subprocess.CompletedProcess[str]: ...


def format_command(executable: Path | str, args: Sequence[str]) -> str:
    return " ".join([str(executable), *args])


def run_tool(
    executable: Path | str,
    args: Sequence[str],
    *,
    silent: bool = False,
) -> subprocess.CompletedProcess[str]:
    """
    Run a renderer, always capturing stdout/stderr.
    Unless silent, the command line is logged and output mirrored to the caller.
    Raises ExternalToolError when the process cannot start or exits non-zero.
    """
    cmd = [str(executable), *args]
    if silent:
        logger.debug(f"[command] {format_command(executable, args)}")
    else:
        logger.info(f"[command] {format_command(executable, args)}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as exc:
        raise ExternalToolError(f"Unable to run {executable}: {exc}") from exc

    if not silent:
        if result.stdout:
            sys.stdout.write(result.stdout)
        if result.stderr:
            sys.stderr.write(result.stderr)

    if result.returncode != 0:
        detail = result.stderr.strip() or result.stdout.strip()
        message = f"{Path(executable).name} exited with code {result.returncode}"
        if detail:
            message = f"{message}: {detail}"
        raise ExternalToolError(message, returncode=result.returncode, stderr=result.stderr)
    return result
