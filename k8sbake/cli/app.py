"""Main CLI application."""

from __future__ import annotations

import logging

import typer
from typing_extensions import Annotated

from .. import orchestrator
from ..actions.commands import configure_logging, set_failed
from ..actions.inputs import InputReader
from ..actions.settings import RunnerSettings
from ..rendering.context import BakeContext
from .parsers import parse_input

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="k8sbake",
    help="Bake Kubernetes manifests from helm charts, compose files or kustomizations.",
)


@app.command()
def bake(
    inputs: Annotated[
        list[str],
        typer.Option(
            "--input",
            "-i",
            help="Set action input NAME to VALUE, overriding INPUT_* variables. Repeatable.",
            metavar="NAME=VALUE",
        ),
    ] = [],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render one manifest bundle and publish its path as manifestsBundle."""
    configure_logging(verbose or RunnerSettings().debug)

    overrides = dict(map(parse_input, inputs))
    logger.debug(f"Input overrides: {sorted(overrides)}")
    context = BakeContext(get_input=InputReader(overrides))

    try:
        manifest = orchestrator.run(context)
    except Exception as exc:
        set_failed(str(exc))
        raise typer.Exit(code=1) from exc

    logger.debug(f"Manifest written to {manifest}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
