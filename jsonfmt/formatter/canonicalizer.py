"""
Canonicalizer - Parse JSON text and re-serialize it in a chosen style.

Parsing is delegated to the standard json module. Output follows
JavaScript's JSON.stringify where the two differ:
- NaN and Infinity are rejected as parse errors
- Floats use the shortest round-trip digits in Number.prototype.toString
  notation (1, 0.00001, 1e-7, 1e+21)
- Serialization walks containers with an explicit stack, so output depth
  is not bounded by the interpreter's recursion limit
"""

import json
import math
from enum import Enum
from typing import Any, List, Optional, Union


# Decimal exponent window rendered without exponent notation
_PLAIN_MIN_EXPONENT = -6
_PLAIN_MAX_EXPONENT = 21

NESTING_ERROR = "Maximum nesting depth exceeded while parsing JSON"

_END = object()


class JSONParseError(ValueError):
    """Raised when the input is not valid JSON."""


class IndentStyle(Enum):
    """Supported output templates."""
    COMPACT = "Compact"
    TWO_SPACES = "2 Space Tab"
    THREE_SPACES = "3 Space Tab"
    FOUR_SPACES = "4 Space Tab"
    TAB = "1 Tab"

    @property
    def indent(self) -> Optional[str]:
        """Indent unit for one nesting level, or None for compact output."""
        return _INDENTS[self]

    @classmethod
    def resolve(cls, name: Union[str, "IndentStyle", None]) -> "IndentStyle":
        """Map a template name to a style, falling back to three spaces."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return DEFAULT_STYLE

    @classmethod
    def names(cls) -> list:
        return [style.value for style in cls]


_INDENTS = {
    IndentStyle.COMPACT: None,
    IndentStyle.TWO_SPACES: "  ",
    IndentStyle.THREE_SPACES: "   ",
    IndentStyle.FOUR_SPACES: "    ",
    IndentStyle.TAB: "\t",
}

DEFAULT_STYLE = IndentStyle.THREE_SPACES


def _reject_constant(name: str):
    raise JSONParseError(f"Unexpected token {name} in JSON")


def _parse_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise JSONParseError(f"Number {literal} is out of range")
    return value


def parse_json(text: str) -> Any:
    """
    Parse JSON text.

    Args:
        text: JSON text

    Returns:
        Parsed value with object keys in document order

    Raises:
        JSONParseError: With the parser's message if the text is invalid,
            or NESTING_ERROR if it nests deeper than the parser can follow
    """
    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_float,
        )
    except JSONParseError:
        raise
    except json.JSONDecodeError as e:
        raise JSONParseError(str(e)) from e
    except RecursionError as e:
        raise JSONParseError(NESTING_ERROR) from e


def format_number(value: float) -> str:
    """
    Render a float the way Number.prototype.toString does.

    >>> format_number(1e-05), format_number(1e-07), format_number(1e21)
    ('0.00001', '1e-7', '1e+21')
    """
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_number(-value)

    # repr gives the shortest digits that round-trip
    mantissa, _, exponent = repr(value).partition("e")
    whole, _, fraction = mantissa.partition(".")
    digits = whole + fraction
    point = len(whole) + int(exponent or 0)

    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    count = len(digits)

    if count <= point <= _PLAIN_MAX_EXPONENT:
        return digits + "0" * (point - count)
    if 0 < point <= _PLAIN_MAX_EXPONENT:
        return f"{digits[:point]}.{digits[point:]}"
    if _PLAIN_MIN_EXPONENT < point <= 0:
        return "0." + "0" * -point + digits

    power = point - 1
    sign = "+" if power > 0 else "-"
    head = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{head}e{sign}{abs(power)}"


def _encode_scalar(value: Any, ensure_ascii: bool) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=ensure_ascii)
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return format_number(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_value(
    value: Any,
    style: Union[str, IndentStyle, None] = DEFAULT_STYLE,
    ensure_ascii: bool = False,
) -> str:
    """
    Serialize a parsed value.

    Args:
        value: Value returned by parse_json
        style: IndentStyle or template name; unknown names use three spaces
        ensure_ascii: Escape non-ASCII characters

    Returns:
        Serialized JSON text
    """
    indent = IndentStyle.resolve(style).indent
    key_separator = ":" if indent is None else ": "
    out: List[str] = []
    # Each frame: [item iterator, is object, closing bracket, first item pending]
    stack: List[list] = []

    def emit(item: Any) -> None:
        if isinstance(item, dict):
            if not item:
                out.append("{}")
            else:
                out.append("{")
                stack.append([iter(item.items()), True, "}", True])
        elif isinstance(item, (list, tuple)):
            if not item:
                out.append("[]")
            else:
                out.append("[")
                stack.append([iter(item), False, "]", True])
        else:
            out.append(_encode_scalar(item, ensure_ascii))

    emit(value)
    while stack:
        frame = stack[-1]
        item = next(frame[0], _END)
        if item is _END:
            stack.pop()
            if indent is not None:
                out.append("\n" + indent * len(stack))
            out.append(frame[2])
            continue

        if frame[3]:
            frame[3] = False
        else:
            out.append(",")
        if indent is not None:
            out.append("\n" + indent * len(stack))

        if frame[1]:
            key, item = item
            out.append(_encode_scalar(str(key), ensure_ascii))
            out.append(key_separator)
        emit(item)

    return "".join(out)


class Canonicalizer:
    """Parse-then-reserialize step of the format pipeline."""

    def __init__(self, ensure_ascii: bool = False):
        self.ensure_ascii = ensure_ascii

    def parse(self, text: str) -> Any:
        return parse_json(text)

    def format(self, value: Any, style: Union[str, IndentStyle, None]) -> str:
        return format_value(value, style, ensure_ascii=self.ensure_ascii)

    def canonicalize(self, text: str, style: Union[str, IndentStyle, None]) -> str:
        """Parse and re-serialize in one step."""
        return self.format(self.parse(text), style)
