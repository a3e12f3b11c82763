"""
Validator module - Repair and spec-check raw JSON text.

Provides:
- Repairer: Heuristic textual fixes for near-JSON input
- SpecValidator: Lexical conformance checks per spec profile
"""

from .spec_validator import (
    SpecValidator,
    ValidationResult,
    ValidationIssue,
    ValidationSeverity,
)
from .repairer import Repairer, RepairResult, repair

__all__ = [
    'SpecValidator',
    'ValidationResult',
    'ValidationIssue',
    'ValidationSeverity',
    'Repairer',
    'RepairResult',
    'repair',
    'repair_and_validate',
]


def repair_and_validate(
    text: str,
    spec_name: str,
    auto_fix: bool = True,
) -> tuple:
    """
    Convenience function to optionally repair and then validate text.

    Args:
        text: Raw JSON text
        spec_name: Spec profile name or "Skip Validation"
        auto_fix: If True, run the repairer first

    Returns:
        Tuple of (repair_result or None, validation_result)
    """
    repair_result = Repairer().repair(text) if auto_fix else None
    working = repair_result.text if repair_result else text
    return repair_result, SpecValidator().validate(working, spec_name)
