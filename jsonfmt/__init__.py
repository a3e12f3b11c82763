"""
jsonfmt - Repair, validate and format JSON text.

Main modules:
- validator: Heuristic repairs and spec-profile checks
- formatter: Parsing, re-serialization and the format pipeline
- core: Configuration and spec profiles
- api: Request adapter for the web front end
- cli: Command-line interface
"""

from .formatter import (
    FormatPipeline,
    FormatRequest,
    FormatSuccess,
    FormatFailure,
    format_text,
)

__version__ = "1.0.0"

__all__ = [
    'FormatPipeline',
    'FormatRequest',
    'FormatSuccess',
    'FormatFailure',
    'format_text',
    '__version__',
]
