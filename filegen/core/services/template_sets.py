"""
Template sets — file name → template source mappings.

Generators ship a default set and let callers pass an override set;
``merge_template_sets`` lays the overrides on top, key by key.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from filegen.core.models.template import TemplateDefinition

logger = logging.getLogger(__name__)

# Suffix stripped from template files loaded from disk (main.go.tmpl → main.go)
TEMPLATE_SUFFIX = ".tmpl"


def merge_template_sets(
    default: Mapping[str, str] | None,
    override: Mapping[str, str] | None,
) -> dict[str, str]:
    """Union of two template sets; ``override`` wins on a shared file name.

    Neither input is modified. Contents are replaced wholesale, never merged.
    """
    merged: dict[str, str] = dict(default or {})
    merged.update(override or {})
    return merged


def definitions(templates: Mapping[str, str]) -> list[TemplateDefinition]:
    """Template set → definitions, in the set's iteration order."""
    return [
        TemplateDefinition(file_name=name, source=source)
        for name, source in templates.items()
    ]


def load_template_dir(directory: Path, *, suffix: str = TEMPLATE_SUFFIX) -> dict[str, str]:
    """Read every ``*<suffix>`` file in ``directory`` into a template set.

    Keys are the file names with ``suffix`` removed. Subdirectories are
    not searched: generated files land flat in one output directory.

    Raises:
        FileNotFoundError: If ``directory`` does not exist.
    """
    if not directory.is_dir():
        raise FileNotFoundError(f"Template directory not found: {directory}")

    templates: dict[str, str] = {}
    for path in sorted(directory.iterdir()):
        if not path.is_file() or not path.name.endswith(suffix):
            continue
        name = path.name[: -len(suffix)] if suffix else path.name
        if not name:
            continue
        templates[name] = path.read_text(encoding="utf-8")

    logger.debug("Loaded %d template(s) from %s", len(templates), directory)
    return templates
