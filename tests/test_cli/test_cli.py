"""Tests for the cssparts CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from cssparts import EngineFault
from cssparts.cli import commands
from cssparts.cli.main import cli


@pytest.fixture()
def css_file(tmp_path):
    path = tmp_path / "theme.css"
    path.write_text(
        ":root { --c: red; --bad; }\n"
        "a { color: var(--c); background: url('bg.png'); }\n",
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "parse" in result.output
        assert "module" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "cssparts" in result.output


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_outputs_json(self, css_file) -> None:
        result = CliRunner().invoke(cli, ["parse", str(css_file)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert {"type": 3, "value": {"name": "c", "value": "red"}} in data
        assert {"type": 1, "value": "a"} in data
        assert {"type": 4, "value": "bg.png"} in data

    def test_kind_filter(self, css_file) -> None:
        result = CliRunner().invoke(cli, ["parse", str(css_file), "--kind", "variable"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        parts = [d for d in data if isinstance(d, dict)]
        assert parts == [{"type": 2, "value": "c"}]

    def test_unknown_kind_rejected(self, css_file) -> None:
        result = CliRunner().invoke(cli, ["parse", str(css_file), "--kind", "color"])
        assert result.exit_code != 0

    def test_missing_file(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["parse", str(tmp_path / "nope.css")])
        assert result.exit_code != 0

    def test_engine_fault_exits_1(self, css_file, monkeypatch) -> None:
        def fail(*args, **kwargs):
            raise EngineFault("boom")

        monkeypatch.setattr(commands, "parse_with_diagnostics", fail)
        result = CliRunner().invoke(cli, ["parse", str(css_file)])
        assert result.exit_code == 1
        assert "Parse error: boom" in result.output


# ---------------------------------------------------------------------------
# module / inspect
# ---------------------------------------------------------------------------


class TestModuleCommand:
    def test_outputs_module(self, css_file) -> None:
        result = CliRunner().invoke(cli, ["module", str(css_file)])
        assert result.exit_code == 0
        assert result.output.startswith("module.exports = [")


class TestInspectCommand:
    def test_lists_parts_and_diagnostics(self, css_file) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(css_file)])
        assert result.exit_code == 0
        assert "File:     theme.css" in result.output
        assert "property  --c: red" in result.output
        assert "url       bg.png" in result.output
        assert "Diagnostics:" in result.output
        assert "--bad" in result.output
