"""
Template models — what a generator renders and what a batch reports back.
"""

from __future__ import annotations

import posixpath

from pydantic import BaseModel


class TemplateDefinition(BaseModel):
    """A named template.

    Attributes:
        file_name: Output file name. Also the key in a template set and
                   the source of the formatter extension.
        source:    Jinja2 template text.
    """

    file_name: str
    source: str

    @property
    def extension(self) -> str:
        """Extension with its leading dot (``main.go`` → ``.go``)."""
        return extension_of(self.file_name)

    @property
    def template_name(self) -> str:
        """Engine-side template name, used in diagnostics."""
        return template_name_for(self.file_name)


class FileFailure(BaseModel):
    """One failed file inside a batch generation."""

    file_name: str
    error_type: str
    message: str


def extension_of(file_name: str) -> str:
    return posixpath.splitext(file_name)[1]


def template_name_for(file_name: str) -> str:
    """``main.go`` → ``main-go-template``."""
    return f"{file_name.replace('.', '-')}-template"
