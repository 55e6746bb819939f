import logging
import os
import stat
from pathlib import Path

import pytest
from typer.testing import CliRunner

from k8sbake.cli import app
from k8sbake.cli.parsers import parse_input

cli = CliRunner()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parse_input():
    assert parse_input("overrides=a:1\\nb:2") == ("overrides", "a:1\nb:2")
    assert parse_input("helmChart=./chart=x") == ("helmChart", "./chart=x")


@pytest.mark.parametrize("value", ["helmChart", "=./chart"])
def test_parse_input_rejects(value):
    import typer

    with pytest.raises(typer.BadParameter):
        parse_input(value)


@pytest.mark.skipif(os.name == "nt", reason="needs a POSIX shell")
def test_helm_bake(monkeypatch, tmp_path, scratch_dir):
    helm = tmp_path / "bin" / "helm"
    helm.parent.mkdir()
    helm.write_text("#!/bin/sh\nprintf 'kind: Service\\n# %s\\n' \"$*\"\n")
    helm.chmod(helm.stat().st_mode | stat.S_IXUSR)
    output_file = tmp_path / "github_output"

    monkeypatch.setenv("K8SBAKE_HELM_PATH", str(helm))
    monkeypatch.setenv("RUNNER_TEMP", str(scratch_dir))
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.setenv("INPUT_RENDERENGINE", "helm2")

    result = cli.invoke(
        app, ["--input", "helmChart=./chart", "--input", "overrides=key:val"]
    )

    assert result.exit_code == 0, result.output
    manifest = Path(output_file.read_text().splitlines()[1])
    assert manifest.parent == scratch_dir.resolve()
    assert manifest.read_text() == "kind: Service\n# template ./chart --set key=val\n"


def test_unknown_engine_fails(monkeypatch):
    monkeypatch.setenv("INPUT_RENDERENGINE", "helm3")
    result = cli.invoke(app, [])
    assert result.exit_code == 1
    assert "::error::Unknown render engine: 'helm3'" in result.output


def test_bake_failure_reported(monkeypatch, tmp_path, scratch_dir):
    monkeypatch.setenv("RUNNER_TEMP", str(scratch_dir))
    result = cli.invoke(
        app,
        [
            "-i",
            "renderEngine=kompose",
            "-i",
            f"dockerComposeFile={tmp_path / 'missing.yml'}",
        ],
    )
    assert result.exit_code == 1
    assert "::error::Failed to run bake action. Error: Docker compose file path" in result.output
    assert list(scratch_dir.iterdir()) == []
