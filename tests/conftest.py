from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from k8sbake.actions.inputs import InputReader
from k8sbake.rendering.context import BakeContext
from k8sbake.rendering.paths import TemplatePathProvider


class FakeRunner:
    """Records renderer invocations instead of spawning processes."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str], bool]] = []
        self.stdout: dict[str, str] = {}
        self.errors: dict[str, Exception] = {}

    def __call__(self, executable, args, *, silent=False):
        args = list(args)
        self.calls.append((str(executable), args, silent))
        if args[0] in self.errors:
            raise self.errors[args[0]]
        return subprocess.CompletedProcess(
            [str(executable), *args], 0, stdout=self.stdout.get(args[0], ""), stderr=""
        )


class RecordingOutputs:
    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def __call__(self, name: str, value: str) -> None:
        self.values[name] = value


@pytest.fixture(autouse=True)
def _clean_runner_env(monkeypatch):
    for key in ("RUNNER_TEMP", "RUNNER_DEBUG", "GITHUB_OUTPUT"):
        monkeypatch.delenv(key, raising=False)
    for tool in ("HELM", "KOMPOSE", "KUBECTL"):
        monkeypatch.delenv(f"K8SBAKE_{tool}_PATH", raising=False)


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    path = tmp_path / "runner-temp"
    path.mkdir()
    return path


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def outputs() -> RecordingOutputs:
    return RecordingOutputs()


@pytest.fixture
def make_context(scratch_dir, runner, outputs):
    def _make(**inputs: str) -> BakeContext:
        return BakeContext(
            get_input=InputReader(inputs),
            run=runner,
            resolve=lambda name: Path("/opt/tools") / name,
            template_paths=TemplatePathProvider(scratch_dir),
            set_output=outputs,
        )

    return _make
