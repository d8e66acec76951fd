# tests/test_cli.py
"""Tests for the helperspec command line."""

import json
import pytest
from pathlib import Path
from click.testing import CliRunner

from helperspec import __version__
from helperspec.cli.interface import main_cli_group

HELPER_MODULE_SOURCE = '''
from helperspec import handlebars_helper

@handlebars_helper('name: str, {punct: str = "!"}')
def greet(name, punct):
    return "Hello, " + name + punct

@handlebars_helper("*words")
def shout(words):
    return " ".join(str(w) for w in words).upper()

NOT_A_HELPER = 3
'''

@pytest.fixture
def cli_project(tmp_path: Path, monkeypatch):
    """A working directory with a template, its data and a helper module."""
    proj_dir = tmp_path / "cli_proj"
    proj_dir.mkdir()
    (proj_dir / "cli_test_helpers.py").write_text(HELPER_MODULE_SOURCE)
    (proj_dir / "page.hbs").write_text("{{greet who}} {{shout a b}} {{lang_hint ext}}")
    (proj_dir / "data.json").write_text(json.dumps({"who": "Ada", "a": "x", "b": "y", "ext": "py"}))
    monkeypatch.chdir(proj_dir)
    monkeypatch.syspath_prepend(str(proj_dir))
    return proj_dir


class TestCheckCommand:

    def test_prints_parameter_table(self):
        runner = CliRunner()
        result = runner.invoke(main_cli_group, ["check", "x: u64, {compare: u64 = 10}, *rest", "--name", "is_above"])
        assert result.exit_code == 0
        assert "is_above" in result.output
        assert "compare" in result.output
        assert "u64" in result.output
        assert "*args" in result.output

    def test_trial_call_prints_bindings(self):
        runner = CliRunner()
        result = runner.invoke(main_cli_group, [
            "check", "x: u64, {compare: u64 = 10}, **kw", "--params", "[12]", "--hash", '{"z": 1, "compare": 20}',
        ])
        assert result.exit_code == 0
        assert '"x": 12' in result.output
        assert '"compare": 20' in result.output
        assert result.output.index('"compare": 20,') < result.output.index('"z": 1')

    def test_trial_call_failure(self):
        runner = CliRunner()
        result = runner.invoke(main_cli_group, ["check", "x: u64", "--hash", "{}"])
        assert result.exit_code == 1
        assert "Couldn't read parameter x" in result.output

    def test_invalid_signature(self):
        runner = CliRunner()
        result = runner.invoke(main_cli_group, ["check", "x: u64, {compare: u64}"])
        assert result.exit_code == 1
        assert "must declare a default" in result.output

    def test_params_must_be_json_array(self):
        runner = CliRunner()
        result = runner.invoke(main_cli_group, ["check", "x: u64", "--params", '{"x": 1}'])
        assert result.exit_code == 2
        assert "must be a JSON array" in result.output


class TestRenderCommand:

    def test_renders_with_loaded_module(self, cli_project: Path):
        runner = CliRunner()
        result = runner.invoke(main_cli_group, [
            "render", "page.hbs", "--data", "data.json", "--helpers", "cli_test_helpers",
        ])
        assert result.exit_code == 0, result.output
        assert "Hello, Ada! X Y python" in result.output

    def test_single_attribute_reference(self, cli_project: Path):
        (cli_project / "only_greet.hbs").write_text("{{greet who}}")
        runner = CliRunner()
        result = runner.invoke(main_cli_group, [
            "render", "only_greet.hbs", "-d", "data.json", "-H", "cli_test_helpers:greet", "--no-builtins",
        ])
        assert result.exit_code == 0, result.output
        assert "Hello, Ada!" in result.output

    def test_helpers_from_config_file(self, cli_project: Path):
        (cli_project / ".helperspec.toml").write_text('helper_modules = ["cli_test_helpers"]\n')
        runner = CliRunner()
        result = runner.invoke(main_cli_group, ["render", "page.hbs", "-d", "data.json"])
        assert result.exit_code == 0, result.output
        assert "Hello, Ada!" in result.output

    def test_output_file_and_summary(self, cli_project: Path):
        runner = CliRunner()
        result = runner.invoke(main_cli_group, [
            "render", "page.hbs", "-d", "data.json", "-H", "cli_test_helpers", "-o", "out.txt", "--summary",
        ])
        assert result.exit_code == 0, result.output
        assert (cli_project / "out.txt").read_text() == "Hello, Ada! X Y python"
        assert "render summary" in result.output

    def test_bad_attribute_reference(self, cli_project: Path):
        runner = CliRunner()
        result = runner.invoke(main_cli_group, ["render", "page.hbs", "-H", "cli_test_helpers:NOT_A_HELPER"])
        assert result.exit_code == 1
        assert "not a compiled helper" in result.output

    def test_helper_failure_reported(self, cli_project: Path):
        (cli_project / "bad.json").write_text(json.dumps({"who": 5}))
        (cli_project / "only_greet.hbs").write_text("{{greet who}}")
        runner = CliRunner()
        result = runner.invoke(main_cli_group, ["render", "only_greet.hbs", "-d", "bad.json", "-H", "cli_test_helpers"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_data_must_be_object(self, cli_project: Path):
        (cli_project / "list.json").write_text("[1, 2]")
        runner = CliRunner()
        result = runner.invoke(main_cli_group, ["render", "page.hbs", "-d", "list.json"])
        assert result.exit_code == 1
        assert "must be a JSON object" in result.output


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(main_cli_group, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
