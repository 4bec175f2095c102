"""
Configuration loader — reads filegen.yml into a GeneratorConfig.

The file is optional: generators work with the built-in helpers and
formatters alone. When present it adds formatter commands and a default
templates directory, e.g.

    formatters:
      .py: [ruff, format, "{path}"]
      .sh: [./tools/shfmt-wrapper, "{path}"]
    templates_dir: templates

Relative paths are anchored at the directory holding filegen.yml, so the
same config works no matter where the generator is run from.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from filegen.core.models.config import GeneratorConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "filegen.yml"


class ConfigError(Exception):
    """Raised when filegen.yml is missing, unreadable, or invalid."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Nearest filegen.yml in ``start_dir`` (default: cwd) or its parents."""
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load filegen.yml and anchor its relative paths at the file's directory.

    Args:
        path: Explicit config path. If None, searches upward from the cwd.

    Raises:
        ConfigError: Missing file, bad YAML, or failed validation.
    """
    path = path or find_config_file()
    if path is None:
        raise ConfigError(f"No {CONFIG_FILE} found.")

    try:
        config = GeneratorConfig.model_validate(_read_mapping(path))
    except ConfigError:
        raise
    except Exception as e:
        raise ConfigError(f"Invalid generator configuration in {path}: {e}") from e

    config = _anchor_paths(config, path.resolve().parent)
    logger.debug(
        "Config %s: %d formatter(s), templates_dir=%s",
        path, len(config.formatters), config.templates_dir,
    )
    return config


def _read_mapping(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # an empty file is an empty config
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data


def _anchor_paths(config: GeneratorConfig, base: Path) -> GeneratorConfig:
    formatters = {
        ext: [_anchor_tool(argv[0], base), *argv[1:]]
        for ext, argv in config.formatters.items()
    }
    templates_dir = config.templates_dir
    if templates_dir is not None and not templates_dir.is_absolute():
        templates_dir = base / templates_dir
    return config.model_copy(update={"formatters": formatters, "templates_dir": templates_dir})


def _anchor_tool(tool: str, base: Path) -> str:
    """``./fmt.sh`` → ``<base>/fmt.sh``; bare names stay PATH lookups."""
    if "/" not in tool or Path(tool).is_absolute():
        return tool
    return str(base / tool)
