"""kubectl client version check for kustomize support."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..core.errors import UnsupportedClientVersionError
from ..core.models import VersionInfo
from ..tooling.process import ToolRunner

logger = logging.getLogger(__name__)

MINIMUM_KUSTOMIZE_VERSION = VersionInfo(major=1, minor=14)

VERSION_ARGS = ["version", "--client=true", "-o", "json"]


def parse_client_version(payload: str) -> VersionInfo:
    """Extract the client version from ``kubectl version -o json`` output."""
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise UnsupportedClientVersionError(
            f"Unable to parse kubectl version output: {exc}"
        ) from exc

    client = data.get("clientVersion") if isinstance(data, dict) else None
    if not isinstance(client, dict):
        raise UnsupportedClientVersionError(
            "kubectl version output does not contain clientVersion"
        )
    try:
        return VersionInfo.model_validate(client)
    except ValidationError as exc:
        raise UnsupportedClientVersionError(
            f"Unable to read kubectl client version: {exc}"
        ) from exc


def supports_kustomize(version: VersionInfo) -> bool:
    # Components are compared independently, so 2.0 does not pass.
    floor = MINIMUM_KUSTOMIZE_VERSION
    return version.major >= floor.major and version.minor >= floor.minor


def ensure_kustomize_support(kubectl: Path, run: ToolRunner) -> VersionInfo | None:
    """Fail unless kubectl reports a client version able to run kustomize.

    Returns the parsed version, or None when kubectl printed nothing.
    """
    result = run(kubectl, VERSION_ARGS)
    if not result.stdout.strip():
        logger.debug("kubectl printed no version information; skipping check")
        return None

    version = parse_client_version(result.stdout)
    if not supports_kustomize(version):
        raise UnsupportedClientVersionError(
            f"kubectl client version equal to {MINIMUM_KUSTOMIZE_VERSION} or higher "
            f"is required to use kustomize features (found {version})"
        )
    logger.debug(f"kubectl client {version} supports kustomize")
    return version
