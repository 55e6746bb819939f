"""Error types raised while baking manifests."""

from __future__ import annotations


class K8sBakeError(Exception):
    """Base class for bake failures."""


class UnknownEngineError(K8sBakeError):
    """Raised when the requested render engine is not supported."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown render engine: {name!r}")
        self.name = name


class NoScratchDirectoryError(K8sBakeError):
    """Raised when the runner does not expose a scratch directory."""


MissingScratchDirectoryError = NoScratchDirectoryError


class RequiredInputMissingError(K8sBakeError):
    """Raised when a required action input is empty or absent."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Input required and not supplied: {name}")
        self.name = name


class UnsupportedClientVersionError(K8sBakeError):
    """Raised when kubectl is too old to run kustomize."""


class ToolNotFoundError(K8sBakeError):
    """Raised when a renderer executable cannot be located."""


class ExternalToolError(K8sBakeError):
    """Raised when a renderer process fails to start or exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class BakeActionError(K8sBakeError):
    """Single terminal failure reported for a bake run."""
