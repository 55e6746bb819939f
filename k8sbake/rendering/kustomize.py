"""Kustomize render engine (via ``kubectl kustomize``)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..core.models import KustomizeConfig
from ..tooling.process import format_command
from .context import BakeContext, InputGetter
from .io import write_manifest
from .version_gate import ensure_kustomize_support

logger = logging.getLogger(__name__)


def read_kustomize_config(get_input: InputGetter) -> KustomizeConfig:
    kustomization_path = Path(get_input("kustomizationPath", required=True))
    if not kustomization_path.exists():
        raise FileNotFoundError(
            f"kustomizationPath {kustomization_path} does not exist. "
            "Please check whether file exists or not."
        )
    return KustomizeConfig(kustomization_path=kustomization_path)


@dataclass
class KustomizeRenderEngine:
    context: BakeContext = field(default_factory=BakeContext)

    def bake(self) -> Path:
        kubectl = self.context.resolve("kubectl")
        ensure_kustomize_support(kubectl, self.context.run)
        config = read_kustomize_config(self.context.get_input)

        args = ["kustomize", str(config.kustomization_path)]
        logger.info(f"[command] {format_command(kubectl, args)}")
        result = self.context.run(kubectl, args, silent=True)

        manifest = self.context.template_paths.get_template_path()
        write_manifest(manifest, result.stdout)
        logger.info(f"Baked kustomization into {manifest}")
        return manifest
