"""
Generator errors.

Every failure reaches the caller as a ``GeneratorError`` subclass. Nothing
is logged and dropped on the way.
"""

from __future__ import annotations

from filegen.core.models.template import FileFailure


class GeneratorError(Exception):
    """Base class for every generator failure."""


class TemplateError(GeneratorError):
    """A template failed to parse, render, or be written.

    ``str(err)`` is the underlying engine (or OS) message, unchanged.
    ``template_name`` and ``lineno`` locate the failure when known.
    """

    def __init__(
        self,
        message: str,
        *,
        template_name: str | None = None,
        lineno: int | None = None,
    ):
        super().__init__(message)
        self.template_name = template_name
        self.lineno = lineno


class UnsupportedFileTypeError(GeneratorError):
    """No formatter is registered for the output file's extension."""

    def __init__(self, extension: str):
        super().__init__(f"unsupported file type: {extension or '(no extension)'}")
        self.extension = extension


class FormatterError(GeneratorError):
    """An external formatter reported a failure."""


class BatchError(GeneratorError):
    """One or more files in a batch failed.

    Attributes:
        errors: file name → the error raised for that file.
    """

    def __init__(self, errors: dict[str, GeneratorError]):
        self.errors = dict(errors)
        lines = [f"{name}: {err}" for name, err in sorted(self.errors.items())]
        super().__init__(
            f"{len(self.errors)} file(s) failed to generate:\n" + "\n".join(lines)
        )

    @property
    def failures(self) -> list[FileFailure]:
        """Per-file failures, sorted by file name."""
        return [
            FileFailure(
                file_name=name,
                error_type=type(err).__name__,
                message=str(err),
            )
            for name, err in sorted(self.errors.items())
        ]
