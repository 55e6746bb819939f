from pathlib import Path

import pytest

from k8sbake.core.errors import MissingScratchDirectoryError, NoScratchDirectoryError
from k8sbake.rendering.paths import TemplatePathProvider


def test_path_layout(scratch_dir):
    provider = TemplatePathProvider(scratch_dir, clock=lambda: 1700000000123)
    path = provider.get_template_path()
    assert path == scratch_dir.resolve() / "baked-template-1700000000123.yaml"


def test_back_to_back_calls_are_distinct(scratch_dir):
    provider = TemplatePathProvider(scratch_dir)
    first = provider.get_template_path()
    second = provider.get_template_path()
    assert first != second
    assert first.parent == second.parent == scratch_dir.resolve()


def test_same_tick_bumps_stamp(scratch_dir):
    provider = TemplatePathProvider(scratch_dir, clock=lambda: 42)
    names = [provider.get_template_path().name for _ in range(3)]
    assert names == [
        "baked-template-42.yaml",
        "baked-template-43.yaml",
        "baked-template-44.yaml",
    ]


def test_clock_going_backwards(scratch_dir):
    ticks = iter([100, 90])
    provider = TemplatePathProvider(scratch_dir, clock=lambda: next(ticks))
    assert provider.get_template_path().name == "baked-template-100.yaml"
    assert provider.get_template_path().name == "baked-template-101.yaml"


def test_reads_runner_temp(monkeypatch, scratch_dir):
    monkeypatch.setenv("RUNNER_TEMP", str(scratch_dir))
    path = TemplatePathProvider().get_template_path()
    assert path.parent == scratch_dir.resolve()
    assert path.is_absolute()


@pytest.mark.parametrize("value", [None, "", "   "])
def test_missing_scratch_directory(monkeypatch, value):
    if value is not None:
        monkeypatch.setenv("RUNNER_TEMP", value)
    with pytest.raises(NoScratchDirectoryError):
        TemplatePathProvider().get_template_path()


def test_alias():
    assert MissingScratchDirectoryError is NoScratchDirectoryError


def test_does_not_create_file(scratch_dir):
    path = TemplatePathProvider(scratch_dir).get_template_path()
    assert not Path(path).exists()
