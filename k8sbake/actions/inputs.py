"""Action input access."""

from __future__ import annotations

import logging
import os
from typing import Mapping

from ..core.errors import RequiredInputMissingError

logger = logging.getLogger(__name__)


def input_env_name(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


class InputReader:
    """Reads named inputs, preferring explicit overrides over ``INPUT_*`` variables."""

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._overrides = dict(overrides or {})

    def __call__(self, name: str, *, required: bool = False) -> str:
        if name in self._overrides:
            value = self._overrides[name]
        else:
            value = os.environ.get(input_env_name(name), "")
        value = value.strip()
        if required and not value:
            raise RequiredInputMissingError(name)
        return value


def get_input(name: str, *, required: bool = False) -> str:
    """Read an input from the runner environment.

    Args:
        name: Input name as declared in action.yml
        required: Raise when the input is empty

    Returns:
        The whitespace-trimmed input value, or "" when unset
    """
    return InputReader()(name, required=required)


def split_lines(value: str) -> list[str]:
    """Split a multi-line input into its non-blank entries, in order."""
    return [line.strip() for line in value.splitlines() if line.strip()]
