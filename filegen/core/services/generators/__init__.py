"""
Generators — render template sets into formatted output files.

The ``Generator`` class in ``generator.py`` is the entry point. Errors are
defined in ``errors.py``.
"""
