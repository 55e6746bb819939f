"""Workflow command output for the GitHub Actions runner."""

from __future__ import annotations

import logging
import sys
import uuid
from pathlib import Path

from .settings import RunnerSettings

logger = logging.getLogger(__name__)

_LEVEL_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue(command: str, message: str, **properties: str) -> None:
    props = ",".join(f"{key}={escape_data(val)}" for key, val in properties.items())
    head = f"::{command} {props}" if props else f"::{command}"
    sys.stdout.write(f"{head}::{escape_data(message)}\n")
    sys.stdout.flush()


class WorkflowCommandFormatter(logging.Formatter):
    """Render log records as workflow commands so the runner annotates them."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _LEVEL_COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


def configure_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(WorkflowCommandFormatter("%(message)s"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[handler],
        force=True,
    )


def set_output(name: str, value: str, *, settings: RunnerSettings | None = None) -> None:
    """Publish a step output.

    Appends to the ``GITHUB_OUTPUT`` file when the runner provides one and
    falls back to the legacy ``set-output`` command otherwise.
    """
    settings = settings or RunnerSettings()
    output_file: Path | None = settings.github_output
    if output_file is None:
        issue("set-output", value, name=name)
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError("Output value collides with the generated delimiter")
    with output_file.open("a", encoding="utf-8") as handle:
        handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    logger.debug(f"Set output {name}")


def set_failed(message: str) -> None:
    """Report the run's terminal failure; the caller sets the exit status."""
    issue("error", message)
