"""
Repairer - Best-effort textual fixes for near-JSON input.

Applies a fixed sequence of regex rewrites:
- Comments removed
- Trailing commas removed
- Single quotes swapped for double quotes
- Unquoted object keys quoted
- Python/SQL style literals lowercased

The rewrites are not string-aware. Text inside string values can be
altered, most visibly by the single-quote swap, which replaces every
apostrophe in the document once any single-quoted pair is seen.
"""

from typing import List
from dataclasses import dataclass, field

from . import patterns
from ..utils.logger import get_logger

logger = get_logger(__name__)


FIX_COMMENTS = "Removed comments"
FIX_TRAILING_COMMAS = "Removed trailing commas"
FIX_SINGLE_QUOTES = "Replaced single quotes with double quotes"
FIX_UNQUOTED_KEYS = "Added quotes to unquoted keys"
FIX_LITERALS = "Lowercased boolean/null literals"


@dataclass
class RepairResult:
    """Result of a repair pass."""
    text: str
    fixes: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.fixes)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "fixes": list(self.fixes),
        }


class Repairer:
    """
    Heuristic repairer for JSON-like text.

    Never raises; the worst case is text that still fails to parse.
    """

    def repair(self, text: str) -> RepairResult:
        """
        Apply every repair rule in order.

        Args:
            text: Raw input text

        Returns:
            RepairResult with the rewritten text and the fixes that fired,
            in rule order
        """
        fixes: List[str] = []
        fixed = text

        fixed, count = patterns.COMMENT.subn("", fixed)
        if count:
            fixes.append(FIX_COMMENTS)

        fixed, count = patterns.TRAILING_COMMA.subn(r"\1", fixed)
        if count:
            fixes.append(FIX_TRAILING_COMMAS)

        if patterns.SINGLE_QUOTED_PAIR.search(fixed):
            fixed = fixed.replace("'", '"')
            fixes.append(FIX_SINGLE_QUOTES)

        fixed, count = patterns.UNQUOTED_KEY.subn(r'\1"\2":', fixed)
        if count:
            fixes.append(FIX_UNQUOTED_KEYS)

        # Lowercasing always runs; the fix is reported from the untouched input
        fixed = patterns.NON_STANDARD_LITERAL.sub(lambda m: m.group(0).lower(), fixed)
        if patterns.NON_STANDARD_LITERAL.search(text):
            fixes.append(FIX_LITERALS)

        for fix in fixes:
            logger.debug(f"Repair applied: {fix}")

        return RepairResult(text=fixed, fixes=fixes)


def repair(text: str) -> RepairResult:
    """Convenience wrapper around Repairer().repair()."""
    return Repairer().repair(text)
