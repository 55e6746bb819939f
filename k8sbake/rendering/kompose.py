"""Kompose render engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..core.models import KomposeConfig
from .context import BakeContext, InputGetter

logger = logging.getLogger(__name__)


def read_kompose_config(get_input: InputGetter) -> KomposeConfig:
    compose_file = Path(get_input("dockerComposeFile", required=True))
    if not compose_file.exists():
        raise FileNotFoundError(
            f"Docker compose file path {compose_file} does not exist. "
            "Please check the path specified"
        )
    return KomposeConfig(compose_file=compose_file)


def build_convert_args(config: KomposeConfig, output: Path) -> list[str]:
    return ["convert", "-f", str(config.compose_file), "-o", str(output)]


@dataclass
class KomposeRenderEngine:
    context: BakeContext = field(default_factory=BakeContext)

    def bake(self) -> Path:
        # kompose writes the manifest itself, nothing is captured here
        config = read_kompose_config(self.context.get_input)
        kompose = self.context.resolve("kompose")
        manifest = self.context.template_paths.get_template_path()

        logger.debug("Running kompose command..")
        self.context.run(kompose, build_convert_args(config, manifest))
        return manifest
