"""
Spec Validator - Checks JSON text against a specification profile.

Pattern-matches the same surface syntax the repairer targets. It never
parses and never changes the text it inspects.
"""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from . import patterns
from ..core.specs import SpecTable, DEFAULT_SPEC_TABLE
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    ERROR = "error"       # Blocks trust in validity
    WARNING = "warning"   # Permitted but flagged


@dataclass
class ValidationIssue:
    """A single spec violation."""
    code: str
    message: str
    severity: ValidationSeverity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
        }


@dataclass
class ValidationResult:
    """Result of validating text against one spec."""
    spec: Optional[str] = None
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[str]:
        return [i.message for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[str]:
        return [i.message for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spec": self.spec,
            "valid": self.valid,
            "errors": self.errors,
            "warnings": self.warnings,
            "issues": [i.to_dict() for i in self.issues],
        }


class SpecValidator:
    """
    Validator for JSON specification conformance.

    Checks, each independent of the others:
    - Comments (error)
    - Trailing commas (error)
    - Single-quoted strings (warning)
    """

    def __init__(self, spec_table: SpecTable = DEFAULT_SPEC_TABLE):
        """
        Initialize validator.

        Args:
            spec_table: Profiles to resolve spec names against
        """
        self.spec_table = spec_table

    def validate(self, text: str, spec_name: str) -> ValidationResult:
        """
        Validate text against the named spec.

        Args:
            text: JSON text, post-repair if repair was requested
            spec_name: Profile name or the skip sentinel

        Returns:
            ValidationResult with errors and warnings in check order

        Raises:
            UnknownSpecError: If spec_name is not a known profile
        """
        profile = self.spec_table.get(spec_name)
        if profile is None:
            return ValidationResult()

        issues: List[ValidationIssue] = []

        if not profile.allow_comments and patterns.COMMENT.search(text):
            issues.append(ValidationIssue(
                code="COMMENTS_NOT_ALLOWED",
                message=f"Comments are not allowed in {spec_name}",
                severity=ValidationSeverity.ERROR,
            ))

        if not profile.allow_trailing_commas and patterns.TRAILING_COMMA.search(text):
            issues.append(ValidationIssue(
                code="TRAILING_COMMA",
                message=f"Trailing commas are not allowed in {spec_name}",
                severity=ValidationSeverity.ERROR,
            ))

        if not profile.allow_single_quotes and patterns.SINGLE_QUOTED_STRING.search(text):
            issues.append(ValidationIssue(
                code="SINGLE_QUOTES",
                message=f"Single quotes should be double quotes in {spec_name}",
                severity=ValidationSeverity.WARNING,
            ))

        result = ValidationResult(spec=spec_name, issues=issues)
        logger.debug(
            f"Validated against {spec_name}: "
            f"errors={len(result.errors)}, warnings={len(result.warnings)}"
        )
        return result
