"""
Domain models — Pydantic types for the generator.

    from filegen.core.models import TemplateDefinition, FileFailure, GeneratorConfig
"""

from filegen.core.models.config import GeneratorConfig
from filegen.core.models.template import (
    FileFailure,
    TemplateDefinition,
    extension_of,
    template_name_for,
)

__all__ = [
    "FileFailure",
    "GeneratorConfig",
    "TemplateDefinition",
    "extension_of",
    "template_name_for",
]
