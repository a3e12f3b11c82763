"""
Format Pipeline - Repair, validate, parse and re-serialize JSON text.

Orchestrates:
1. Optional repair
2. Spec validation
3. Parsing
4. Formatting

Expected outcomes are returned as FormatSuccess or FormatFailure. Only
unexpected faults, such as an unknown spec name, are raised.
"""

import re
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field

from .canonicalizer import Canonicalizer, IndentStyle, JSONParseError
from ..core.specs import SKIP_VALIDATION, SpecTable, DEFAULT_SPEC_TABLE
from ..validator.repairer import Repairer
from ..validator.spec_validator import SpecValidator
from ..utils.logger import get_logger

logger = get_logger(__name__)


NO_DATA_ERROR = "No JSON data provided"

# Whitespace plus the byte-order mark, as String.prototype.trim strips them
_SURROUNDING_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim_input(text: Optional[str]) -> str:
    """Strip surrounding whitespace and any byte-order mark."""
    return _SURROUNDING_SPACE.sub("", text or "")


@dataclass
class FormatRequest:
    """A single formatting request."""
    text: str
    spec_name: str
    indent_style: str
    repair: bool = False


@dataclass
class FormatSuccess:
    """The input parsed and was formatted."""
    formatted: str
    fixes: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    valid: bool = True
    spec: Optional[str] = None
    success: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "formatted": self.formatted,
            "fixes": list(self.fixes),
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "valid": self.valid,
            "spec": self.spec,
        }


@dataclass
class FormatFailure:
    """The input could not be parsed."""
    error: str
    fixes: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    success: bool = field(default=False, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": self.error,
            "fixes": list(self.fixes),
            "warnings": list(self.warnings),
        }


FormatResult = Union[FormatSuccess, FormatFailure]


class FormatPipeline:
    """
    Repair-validate-format pipeline.

    Stateless between runs; the profile table is read-only.
    """

    def __init__(
        self,
        spec_table: SpecTable = DEFAULT_SPEC_TABLE,
        repairer: Optional[Repairer] = None,
        canonicalizer: Optional[Canonicalizer] = None,
    ):
        self.spec_table = spec_table
        self.repairer = repairer or Repairer()
        self.validator = SpecValidator(spec_table)
        self.canonicalizer = canonicalizer or Canonicalizer()

    def run(self, request: FormatRequest) -> FormatResult:
        """
        Run the pipeline for one request.

        Args:
            request: Text and options to process

        Returns:
            FormatSuccess, or FormatFailure when there is no input or the
            text does not parse

        Raises:
            UnknownSpecError: If request.spec_name is not a known profile
        """
        text = trim_input(request.text)
        if not text:
            return FormatFailure(error=NO_DATA_ERROR)

        fixes: List[str] = []

        if request.repair:
            repair_result = self.repairer.repair(text)
            fixes.extend(repair_result.fixes)
            text = repair_result.text

        validation = self.validator.validate(text, request.spec_name)
        errors = validation.errors
        warnings = validation.warnings

        try:
            parsed = self.canonicalizer.parse(text)
        except JSONParseError as e:
            # Spec errors are not carried into a parse failure
            logger.info(f"Parse failed ({request.spec_name}): {e}")
            return FormatFailure(error=str(e), fixes=fixes, warnings=warnings)

        style = IndentStyle.resolve(request.indent_style)
        if style.value != request.indent_style:
            logger.debug(f"Unknown template {request.indent_style!r}, using {style.value}")

        formatted = self.canonicalizer.format(parsed, style)

        logger.info(
            f"Formatted with {style.value} ({request.spec_name}): "
            f"fixes={len(fixes)}, errors={len(errors)}, warnings={len(warnings)}"
        )

        return FormatSuccess(
            formatted=formatted,
            fixes=fixes,
            errors=errors,
            warnings=warnings,
            valid=not errors,
            spec=None if request.spec_name == SKIP_VALIDATION else request.spec_name,
        )


def format_text(
    text: str,
    spec_name: str = "RFC 8259",
    indent_style: str = "3 Space Tab",
    repair: bool = False,
) -> FormatResult:
    """
    Programmatic interface to run the pipeline once.

    Args:
        text: Raw JSON text
        spec_name: Spec profile name or "Skip Validation"
        indent_style: Output template name
        repair: Attempt heuristic repairs first

    Returns:
        FormatSuccess or FormatFailure
    """
    request = FormatRequest(
        text=text,
        spec_name=spec_name,
        indent_style=indent_style,
        repair=repair,
    )
    return FormatPipeline().run(request)
