"""
Unit tests for formatter operations (mocked subprocess).

Every test mocks subprocess.run so no real gofmt / terraform is needed.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from filegen import FormatterError
from filegen.core.services.format_ops import (
    command_formatter,
    default_formatters,
    formatter_available,
    go_format,
    terraform_format,
)

_RUN = "filegen.core.services.format_ops.subprocess.run"
_WHICH = "filegen.core.services.format_ops.shutil.which"


def _mock_result(stdout: str = "", stderr: str = "", rc: int = 0):
    """Create a mock subprocess.CompletedProcess."""
    return subprocess.CompletedProcess(
        args=["tool"], returncode=rc,
        stdout=stdout, stderr=stderr,
    )


# ═══════════════════════════════════════════════════════════════════
#  command_formatter
# ═══════════════════════════════════════════════════════════════════


class TestCommandFormatter:
    def test_substitutes_path(self, tmp_path: Path):
        target = tmp_path / "a.py"
        with patch(_RUN, return_value=_mock_result()) as run:
            command_formatter("ruff", "format", "{path}")(target)
        assert run.call_args.args[0] == ["ruff", "format", str(target)]

    def test_appends_path_without_placeholder(self, tmp_path: Path):
        target = tmp_path / "a.json"
        with patch(_RUN, return_value=_mock_result()) as run:
            command_formatter("prettier", "--write")(target)
        assert run.call_args.args[0] == ["prettier", "--write", str(target)]

    def test_passes_timeout(self, tmp_path: Path):
        with patch(_RUN, return_value=_mock_result()) as run:
            command_formatter("fmt", timeout=5)(tmp_path / "x")
        assert run.call_args.kwargs["timeout"] == 5

    def test_nonzero_exit(self, tmp_path: Path):
        with patch(_RUN, return_value=_mock_result(stderr="1:1: expected 'package'", rc=2)):
            with pytest.raises(FormatterError, match="expected 'package'"):
                command_formatter("gofmt", "-w")(tmp_path / "main.go")

    def test_missing_tool(self, tmp_path: Path):
        with patch(_RUN, side_effect=FileNotFoundError("gofmt")):
            with pytest.raises(FormatterError, match="gofmt not available"):
                command_formatter("gofmt", "-w")(tmp_path / "main.go")

    def test_timeout(self, tmp_path: Path):
        with patch(_RUN, side_effect=subprocess.TimeoutExpired(cmd="terraform", timeout=3)):
            with pytest.raises(FormatterError, match="timed out"):
                command_formatter("terraform", "fmt", timeout=3)(tmp_path / "main.tf")

    def test_requires_tool(self):
        with pytest.raises(ValueError):
            command_formatter()

    def test_exposes_tool(self):
        assert command_formatter("black", "-q").tool == "black"


# ═══════════════════════════════════════════════════════════════════
#  Built-ins
# ═══════════════════════════════════════════════════════════════════


class TestBuiltins:
    def test_default_table(self):
        assert default_formatters() == {".go": go_format, ".tf": terraform_format}

    def test_gofmt_command(self, tmp_path: Path):
        target = tmp_path / "main.go"
        with patch(_RUN, return_value=_mock_result()) as run:
            go_format(target)
        assert run.call_args.args[0] == ["gofmt", "-w", str(target)]

    def test_terraform_command(self, tmp_path: Path):
        target = tmp_path / "main.tf"
        with patch(_RUN, return_value=_mock_result()) as run:
            terraform_format(target)
        assert run.call_args.args[0] == ["terraform", "fmt", "-no-color", str(target)]


class TestFormatterAvailable:
    def test_unregistered(self):
        assert formatter_available(".txt", default_formatters()) is False

    def test_tool_on_path(self):
        with patch(_WHICH, return_value="/usr/bin/gofmt"):
            assert formatter_available(".go", default_formatters()) is True

    def test_tool_missing(self):
        with patch(_WHICH, return_value=None):
            assert formatter_available(".tf", default_formatters()) is False

    def test_plain_callable(self):
        assert formatter_available(".x", {".x": lambda path: None}) is True
