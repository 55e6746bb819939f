"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_input(value: str) -> tuple[str, str]:
    """Parse an input argument in format NAME=VALUE."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be NAME=VALUE, got: {value!r}")
    name, raw = value.split("=", 1)
    if not name.strip():
        raise typer.BadParameter(f"Input name is empty: {value!r}")
    # Multi-line inputs can be passed with literal "\n" escapes
    return name.strip(), raw.replace("\\n", "\n")
