"""
Formatter operations — run external formatters on generated files.

A formatter is any callable ``(path: Path) -> None`` that rewrites the
file in place and raises ``FormatterError`` (or returns ``False``) on
failure. The built-ins shell out to the ecosystem tools:

    .go  →  gofmt -w <path>
    .tf  →  terraform fmt -no-color <path>

Extra formatters are usually built with ``command_formatter()``.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Mapping

from filegen.core.services.generators.errors import FormatterError

logger = logging.getLogger(__name__)

Formatter = Callable[[Path], None]

PATH_PLACEHOLDER = "{path}"


def _run(
    args: list[str],
    timeout: int = 60,
) -> subprocess.CompletedProcess[str]:
    """Run a command and return the result."""
    return subprocess.run(
        args,
        capture_output=True,
        text=True,
        timeout=timeout,
    )


def _build_args(argv: tuple[str, ...], path: Path) -> list[str]:
    if any(PATH_PLACEHOLDER in a for a in argv):
        return [a.replace(PATH_PLACEHOLDER, str(path)) for a in argv]
    return [*argv, str(path)]


# ═══════════════════════════════════════════════════════════════════
#  Factory
# ═══════════════════════════════════════════════════════════════════


def command_formatter(*argv: str, timeout: int = 60) -> Formatter:
    """Build a formatter that runs ``argv`` against the target file.

    ``{path}`` in any argument is replaced by the file path; if no
    argument carries the placeholder the path is appended.

    Raises (from the returned formatter):
        FormatterError: tool missing, timed out, or exited non-zero.
    """
    if not argv:
        raise ValueError("command_formatter() needs at least the tool name")

    tool = argv[0]

    def _format(path: Path) -> None:
        args = _build_args(argv, Path(path))
        logger.debug("Formatting %s with %s", path, " ".join(args))
        try:
            result = _run(args, timeout=timeout)
        except FileNotFoundError as e:
            raise FormatterError(f"{tool} not available") from e
        except subprocess.TimeoutExpired as e:
            raise FormatterError(f"{tool} timed out ({timeout}s)") from e

        if result.returncode != 0:
            detail = (result.stderr or result.stdout).strip()
            raise FormatterError(
                f"{tool} failed on {path} (exit {result.returncode})"
                + (f": {detail}" if detail else "")
            )

    _format.tool = tool  # type: ignore[attr-defined]
    _format.__name__ = f"{tool}_formatter"
    return _format


# ── Built-ins ───────────────────────────────────────────────────

go_format: Formatter = command_formatter("gofmt", "-w", PATH_PLACEHOLDER)
terraform_format: Formatter = command_formatter("terraform", "fmt", "-no-color", PATH_PLACEHOLDER)


def default_formatters() -> dict[str, Formatter]:
    """Fresh copy of the built-in extension → formatter table."""
    return {
        ".go": go_format,
        ".tf": terraform_format,
    }


def formatter_available(ext: str, formatters: Mapping[str, Formatter]) -> bool:
    """Whether a formatter exists for ``ext`` and its tool is on PATH.

    Formatters without a ``tool`` attribute (plain callables) count as
    available when registered.
    """
    formatter = formatters.get(ext)
    if formatter is None:
        return False
    tool = getattr(formatter, "tool", None)
    if tool is None:
        return True
    return shutil.which(tool) is not None
