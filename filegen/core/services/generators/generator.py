"""
Generator — render templates, write files, format by extension.

Channel-independent: no CLI, no HTTP. The caller owns the output
directory and the data; this module owns the policy:

    - template sets merge key by key, overrides winning
    - each file renders → writes → formats, in that order
    - a batch collects every failure instead of stopping at the first,
      and treats "no formatter for this extension" as success
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable

import jinja2

from filegen.core.models.config import GeneratorConfig
from filegen.core.models.template import extension_of, template_name_for
from filegen.core.services.case_ops import default_helpers
from filegen.core.services.format_ops import Formatter, default_formatters
from filegen.core.services.generators.errors import (
    BatchError,
    FormatterError,
    GeneratorError,
    TemplateError,
    UnsupportedFileTypeError,
)
from filegen.core.services.template_sets import definitions, merge_template_sets

logger = logging.getLogger(__name__)

Option = Callable[["Generator"], None]


# ── Options ─────────────────────────────────────────────────────


def with_helpers(helpers: Mapping[str, Callable[..., Any]]) -> Option:
    """Add template helper functions, replacing any with the same name."""
    helpers = dict(helpers)

    def _apply(gen: Generator) -> None:
        gen._helpers.update(helpers)

    return _apply


def with_formatters(formatters: Mapping[str, Formatter]) -> Option:
    """Add formatters by extension (``".py"``), replacing existing ones."""
    formatters = dict(formatters)

    def _apply(gen: Generator) -> None:
        gen._formatters.update(formatters)

    return _apply


# ═══════════════════════════════════════════════════════════════════
#  Generator
# ═══════════════════════════════════════════════════════════════════


class Generator:
    """Renders template sets into formatted files.

    Built-in helpers and formatters are installed first, then ``options``
    are applied in order, so later options win on a name or extension
    collision. The tables are not changed after construction.

    Helpers are available to templates both as functions and as filters:

        {{ ToCamel(name) }}   {{ name | ToCamel }}
    """

    def __init__(self, *options: Option):
        self._helpers: dict[str, Callable[..., Any]] = default_helpers()
        self._formatters: dict[str, Formatter] = default_formatters()

        for option in options:
            option(self)

        self._env = self._build_environment()

    @classmethod
    def from_config(cls, config: GeneratorConfig, *options: Option) -> Generator:
        """Build from a ``GeneratorConfig``; ``options`` apply after it."""
        return cls(*config.formatter_options(), *options)

    @property
    def helpers(self) -> dict[str, Callable[..., Any]]:
        return dict(self._helpers)

    @property
    def formatters(self) -> dict[str, Formatter]:
        return dict(self._formatters)

    def _build_environment(self) -> jinja2.Environment:
        env = jinja2.Environment(
            undefined=jinja2.Undefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        env.globals.update(self._helpers)
        env.filters.update(self._helpers)
        return env

    # ── Rendering ───────────────────────────────────────────────

    def render(self, data: Any, template_name: str, source: str) -> str:
        """Render ``source`` against ``data`` and return the text.

        Mapping data exposes its keys as template variables; other data
        exposes its public fields (dataclass fields, model or instance
        attributes). The value itself is always bound as ``data``.
        A missing field renders as the engine's undefined placeholder
        (empty string), not an error.

        Raises:
            TemplateError: Parse or render failure, engine message verbatim.
        """
        env = self._env.overlay(
            loader=jinja2.DictLoader({template_name: source}), cache_size=0,
        )
        try:
            template = env.get_template(template_name)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(str(e), template_name=template_name, lineno=e.lineno) from e
        except jinja2.TemplateError as e:
            raise TemplateError(str(e), template_name=template_name) from e

        try:
            return template.render(_context(data))
        except Exception as e:
            raise TemplateError(str(e), template_name=template_name) from e

    def _write(self, data: Any, template_name: str, source: str, output_path: Path) -> None:
        rendered = self.render(data, template_name, source)
        try:
            output_path.write_text(rendered, encoding="utf-8")
        except OSError as e:
            raise TemplateError(str(e), template_name=template_name) from e
        logger.debug("Wrote %s (%d bytes)", output_path, len(rendered))

    def format_file(self, file_name: str, output_path: Path) -> None:
        """Run the formatter registered for ``file_name``'s extension.

        Raises:
            UnsupportedFileTypeError: No formatter for the extension.
            FormatterError: The formatter failed.
        """
        ext = extension_of(file_name)
        formatter = self._formatters.get(ext)
        if formatter is None:
            raise UnsupportedFileTypeError(ext)

        try:
            ok = formatter(output_path)
        except GeneratorError:
            raise
        except Exception as e:
            raise FormatterError(f"{ext} formatter failed on {output_path}: {e}") from e
        if ok is False:
            raise FormatterError(f"{ext} formatter failed on {output_path}")
        logger.debug("Formatted %s (%s)", output_path, ext)

    # ── File generation ─────────────────────────────────────────

    def generate_file(
        self,
        templates: Mapping[str, str],
        file_name: str,
        output_path: Path,
        data: Any,
        *,
        template: str = "",
    ) -> None:
        """Render one file, write it to ``output_path``, then format it.

        Args:
            templates: Template set to look ``file_name`` up in.
            file_name: Template key; its extension picks the formatter.
            output_path: File to create or truncate.
            data: Render context.
            template: Inline source used instead of the lookup when non-empty.

        Raises:
            TemplateError: Missing template, render or write failure.
            UnsupportedFileTypeError: No formatter; the file is still written.
            FormatterError: The formatter failed; the file is left unformatted.
        """
        output_path = Path(output_path)
        template_name = template_name_for(file_name)

        if template:
            source = template
        else:
            try:
                source = templates[file_name]
            except KeyError:
                raise TemplateError(
                    f"no template for {file_name}", template_name=template_name,
                ) from None

        self._write(data, template_name, source, output_path)
        self.format_file(file_name, output_path)

    def generate_files(
        self,
        default_templates: Mapping[str, str] | None,
        override_templates: Mapping[str, str] | None,
        data: Any,
        output_dir: Path,
    ) -> list[Path]:
        """Generate every file of the merged template set into ``output_dir``.

        Overrides replace defaults with the same file name. Files without
        a registered formatter are written unformatted and not reported.
        ``output_dir`` must already exist.

        Returns:
            Sorted paths of the written files.

        Raises:
            BatchError: At least one file failed; ``.errors`` maps each
                failed file name to its error.
        """
        output_dir = Path(output_dir)
        merged = merge_template_sets(default_templates, override_templates)
        errors: dict[str, GeneratorError] = {}
        written: list[Path] = []

        for definition in definitions(merged):
            output_path = output_dir / definition.file_name

            try:
                self._write(data, definition.template_name, definition.source, output_path)
            except TemplateError as e:
                errors[definition.file_name] = e
                continue
            written.append(output_path)

            try:
                self.format_file(definition.file_name, output_path)
            except UnsupportedFileTypeError:
                logger.debug("No formatter for %s, left as rendered", definition.file_name)
            except GeneratorError as e:
                errors[definition.file_name] = e

        logger.debug(
            "Generated %d/%d file(s) in %s", len(merged) - len(errors), len(merged), output_dir,
        )

        if errors:
            raise BatchError(errors)
        return sorted(written)


def _context(data: Any) -> dict[str, Any]:
    context: dict[str, Any] = {"data": data}
    if isinstance(data, Mapping):
        context.update(data)
    else:
        context.update(_fields(data))
    return context


def _fields(data: Any) -> dict[str, Any]:
    """Public fields of an arbitrary object; empty for scalars."""
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
    if isinstance(data, tuple) and hasattr(data, "_asdict"):
        return dict(data._asdict())
    try:
        attrs = vars(data)
    except TypeError:
        return {}
    return {k: v for k, v in attrs.items() if not k.startswith("_")}
