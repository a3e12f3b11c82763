"""
Formatter module - Parse and re-serialize JSON text.

Provides:
- Canonicalizer: Parse then pretty-print or compact
- FormatPipeline: Repair, validate and format in one request
"""

from .canonicalizer import (
    Canonicalizer,
    IndentStyle,
    JSONParseError,
    DEFAULT_STYLE,
    NESTING_ERROR,
    parse_json,
    format_number,
    format_value,
)
from .pipeline import (
    FormatPipeline,
    FormatRequest,
    FormatResult,
    FormatSuccess,
    FormatFailure,
    NO_DATA_ERROR,
    format_text,
    trim_input,
)

__all__ = [
    'Canonicalizer',
    'IndentStyle',
    'JSONParseError',
    'DEFAULT_STYLE',
    'NESTING_ERROR',
    'parse_json',
    'format_number',
    'format_value',
    'FormatPipeline',
    'FormatRequest',
    'FormatResult',
    'FormatSuccess',
    'FormatFailure',
    'NO_DATA_ERROR',
    'format_text',
    'trim_input',
]
