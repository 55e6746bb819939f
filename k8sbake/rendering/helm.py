"""Helm 2 render engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..actions.inputs import split_lines
from ..core.models import HelmConfig, OverridePair
from .context import BakeContext, InputGetter
from .io import write_manifest

logger = logging.getLogger(__name__)


def read_helm_config(get_input: InputGetter) -> HelmConfig:
    release_name = get_input("releaseName")
    chart_path = get_input("helmChart", required=True)
    return HelmConfig(
        chart_path=chart_path,
        release_name=release_name or None,
        override_files=tuple(split_lines(get_input("overrideFiles"))),
        overrides=tuple(
            OverridePair.parse(token) for token in split_lines(get_input("overrides"))
        ),
    )


def build_template_args(config: HelmConfig) -> list[str]:
    """Build the ``helm template`` argument list.

    Order is fixed: chart, release name, values files, then --set overrides,
    each group in input order.
    """
    args = ["template", config.chart_path]
    if config.release_name:
        args += ["--name", config.release_name]
    if config.override_files:
        logger.debug("Adding override file inputs")
        for override_file in config.override_files:
            args += ["-f", override_file]
    if config.overrides:
        logger.debug("Adding override inputs")
        for pair in config.overrides:
            args += ["--set", pair.as_set_argument()]
    return args


@dataclass
class HelmRenderEngine:
    context: BakeContext = field(default_factory=BakeContext)

    def bake(self) -> Path:
        helm = self.context.resolve("helm")
        logger.debug("Creating the template argument string..")
        args = build_template_args(read_helm_config(self.context.get_input))

        logger.debug("Running helm template command..")
        result = self.context.run(helm, args, silent=True)

        manifest = self.context.template_paths.get_template_path()
        write_manifest(manifest, result.stdout)
        logger.info(f"Baked helm chart into {manifest}")
        return manifest
