"""
filegen — render templates into files and format them by extension.

Typical use from a code generator:

    from filegen import Generator

    gen = Generator()
    gen.generate_files(DEFAULT_TEMPLATES, overrides, data, Path("out"))
"""

__version__ = "0.1.0"

from filegen.core.services.generators.errors import (  # noqa: E402
    BatchError,
    FormatterError,
    GeneratorError,
    TemplateError,
    UnsupportedFileTypeError,
)
from filegen.core.services.generators.generator import (  # noqa: E402
    Generator,
    with_formatters,
    with_helpers,
)

__all__ = [
    "BatchError",
    "FormatterError",
    "Generator",
    "GeneratorError",
    "TemplateError",
    "UnsupportedFileTypeError",
    "__version__",
    "with_formatters",
    "with_helpers",
]
