"""
Generator configuration model — the validated shape of filegen.yml.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class GeneratorConfig(BaseModel):
    """Configuration loaded from filegen.yml.

    ``formatters`` maps an extension (with its leading dot) to the argv of
    an external formatter. ``{path}`` inside an argument is replaced by the
    output file path; without it the path is appended.

    ``templates_dir`` optionally names a directory of ``*.tmpl`` files
    that serves as the default template set.
    """

    formatters: dict[str, list[str]] = Field(default_factory=dict)
    formatter_timeout: int = Field(default=60, gt=0)
    templates_dir: Path | None = None

    @field_validator("formatters")
    @classmethod
    def _check_formatters(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for ext, argv in value.items():
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"formatter extension must start with '.': {ext!r}")
            if not argv:
                raise ValueError(f"formatter command for {ext} is empty")
        return value

    def template_set(self) -> dict[str, str]:
        """The default template set read from ``templates_dir`` (empty if unset)."""
        from filegen.core.services.template_sets import load_template_dir

        if self.templates_dir is None:
            return {}
        return load_template_dir(self.templates_dir)

    def formatter_options(self) -> list[Any]:
        """Generator options that install the configured formatters."""
        # services import models; keep this import local
        from filegen.core.services.format_ops import command_formatter
        from filegen.core.services.generators.generator import with_formatters

        if not self.formatters:
            return []
        return [
            with_formatters({
                ext: command_formatter(*argv, timeout=self.formatter_timeout)
                for ext, argv in self.formatters.items()
            })
        ]
