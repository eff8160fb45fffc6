"""Tests for the specimen command line."""

import json

import pytest
import yaml
from click.testing import CliRunner

from specimen_types.cli.commands import specimen


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_check(runner, fixtures_dir):
    result = runner.invoke(specimen, ["check", str(fixtures_dir / "specs.yaml")])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].split() == ["Field", "Type", "Title"]
    assert lines[2].split() == ["size", "Select", "Size"]
    assert "delivery" in result.output
    assert "Wysiwyg" in result.output


def test_check_invalid_spec(runner, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("bad:\n  type: Hologram\n")

    result = runner.invoke(specimen, ["check", str(path)])

    assert result.exit_code == 1
    assert "bad" in result.output


def test_check_empty_file(runner, tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    result = runner.invoke(specimen, ["check", str(path)])

    assert result.exit_code == 0
    assert "No specs found" in result.output


def test_color(runner):
    result = runner.invoke(specimen, ["color", "#ff0000", "--format", "rgba"])

    assert result.exit_code == 0, result.output
    assert "hexa  #ff0000ff" in result.output
    assert result.output.splitlines()[-1] == "rgba  rgba(255,0,0,1)"


def test_color_invalid(runner):
    result = runner.invoke(specimen, ["color", "not-a-colour"])
    assert result.exit_code == 1


def test_datetime(runner):
    result = runner.invoke(
        specimen,
        ["datetime", "DD/MM/YYYY", "--value", "28/10/2023", "--disabled", "weekend"],
    )

    assert result.exit_code == 0, result.output
    assert "iso          2023-10-28T00:00:00.000Z" in result.output
    assert "value        28/10/2023" in result.output
    assert "date needed  True" in result.output
    assert "time needed  False" in result.output
    assert "disabled     True" in result.output


def test_datetime_year_disabled(runner):
    result = runner.invoke(
        specimen,
        ["datetime", "YYYY-MM-DD", "--iso", "2023-10-23T00:00:00.000Z", "--disabled", "2022"],
    )

    assert result.exit_code == 0, result.output
    assert "value        2023-10-23" in result.output
    assert "disabled     False" in result.output


def test_render(runner, tmp_path, wysiwyg_tree):
    path = tmp_path / "body.json"
    path.write_text(json.dumps(wysiwyg_tree))

    result = runner.invoke(specimen, ["render", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == (
        "<p>Fish &amp; <strong>chips</strong></p><ul><li>&lt;salt&gt;</li></ul>"
    )


def test_render_bare_root(runner, tmp_path):
    path = tmp_path / "body.yaml"
    path.write_text("type: paragraph\nnodes:\n  - type: text\n    text: hi\n")

    result = runner.invoke(specimen, ["render", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "<p>hi</p>"


def test_render_not_a_document(runner, tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")

    result = runner.invoke(specimen, ["render", str(path)])
    assert result.exit_code == 1


class RecordingDebugger:
    """Stands in for ipdb, keeping the tracebacks it was handed."""

    def __init__(self):
        self.tracebacks = []

    def post_mortem(self, traceback):
        self.tracebacks.append(traceback)


@pytest.fixture
def debugger(monkeypatch) -> RecordingDebugger:
    recorder = RecordingDebugger()
    monkeypatch.setattr("specimen_types.cli.debugging._load_ipdb", lambda: recorder)
    monkeypatch.delenv("SPECIMEN_CLI_IPDB", raising=False)
    return recorder


@pytest.fixture
def broken_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("value: [unclosed\n")
    return path


def test_ipdb_flag_enters_debugger(runner, debugger, broken_yaml):
    result = runner.invoke(specimen, ["--ipdb", "render", str(broken_yaml)])

    assert result.exit_code == 1
    assert isinstance(result.exception, yaml.YAMLError)
    assert len(debugger.tracebacks) == 1
    assert debugger.tracebacks[0] is not None


def test_ipdb_env_enters_debugger(runner, debugger, broken_yaml):
    result = runner.invoke(
        specimen, ["render", str(broken_yaml)], env={"SPECIMEN_CLI_IPDB": "1"}
    )

    assert isinstance(result.exception, yaml.YAMLError)
    assert len(debugger.tracebacks) == 1


def test_crash_without_ipdb(runner, debugger, broken_yaml):
    result = runner.invoke(specimen, ["--no-ipdb", "render", str(broken_yaml)])

    assert isinstance(result.exception, yaml.YAMLError)
    assert debugger.tracebacks == []


def test_click_errors_bypass_debugger(runner, debugger):
    result = runner.invoke(specimen, ["--ipdb", "color", "not-a-colour"])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert debugger.tracebacks == []
