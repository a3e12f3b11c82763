"""
Specification profiles - Lexical leniency rules per JSON standard.

Profiles are immutable and collected into a read-only table that is built
once and handed to the validator and pipeline.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional


SKIP_VALIDATION = "Skip Validation"


class UnknownSpecError(KeyError):
    """Raised when a spec name has no registered profile."""

    def __init__(self, name: str, known: Iterable[str] = ()):
        self.name = name
        self.known = list(known)
        super().__init__(name)

    def __str__(self) -> str:
        known = ", ".join(self.known) or "none"
        return f"Unknown JSON specification: {self.name!r} (known: {known})"


@dataclass(frozen=True)
class SpecProfile:
    """Lexical policy flags approximating one JSON specification."""
    name: str
    allow_comments: bool = False
    allow_trailing_commas: bool = False
    allow_single_quotes: bool = False
    allow_unquoted_keys: bool = False
    require_unicode: bool = True

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "allow_comments": self.allow_comments,
            "allow_trailing_commas": self.allow_trailing_commas,
            "allow_single_quotes": self.allow_single_quotes,
            "allow_unquoted_keys": self.allow_unquoted_keys,
            "require_unicode": self.require_unicode,
        }


BUILTIN_PROFILES = (
    SpecProfile(name="RFC 8259", require_unicode=True),
    SpecProfile(name="RFC 7159", require_unicode=True),
    SpecProfile(name="RFC 4627", require_unicode=False),
    SpecProfile(name="ECMA-404", require_unicode=True),
)


class SpecTable:
    """
    Read-only registry of spec profiles keyed by name.

    The skip sentinel is accepted as a name but never maps to a profile.
    """

    def __init__(self, profiles: Iterable[SpecProfile]):
        table = {}
        for profile in profiles:
            if profile.name == SKIP_VALIDATION:
                raise ValueError(f"'{SKIP_VALIDATION}' is reserved and cannot name a profile")
            table[profile.name] = profile
        self._profiles: Mapping[str, SpecProfile] = MappingProxyType(table)

    def __contains__(self, name: object) -> bool:
        return name in self._profiles

    def __iter__(self):
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)

    @property
    def profiles(self) -> Mapping[str, SpecProfile]:
        return self._profiles

    def names(self, include_skip: bool = True) -> List[str]:
        """Closed enumeration of accepted spec names, in registration order."""
        names = list(self._profiles)
        if include_skip:
            names.append(SKIP_VALIDATION)
        return names

    def is_known(self, name: str) -> bool:
        return name == SKIP_VALIDATION or name in self._profiles

    def get(self, name: str) -> Optional[SpecProfile]:
        """
        Look up a profile.

        Returns:
            The profile, or None for the skip sentinel

        Raises:
            UnknownSpecError: If the name is neither a profile nor the sentinel
        """
        if name == SKIP_VALIDATION:
            return None
        try:
            return self._profiles[name]
        except KeyError:
            raise UnknownSpecError(name, self.names()) from None


def build_spec_table(extra: Iterable[SpecProfile] = ()) -> SpecTable:
    """Build the profile table from the built-in profiles plus any extras."""
    return SpecTable([*BUILTIN_PROFILES, *extra])


DEFAULT_SPEC_TABLE = build_spec_table()
