"""
Core module - Configuration and specification profiles.
"""

from .config import (
    FormatterConfig,
    ApiConfig,
    LoggingConfig,
    AppConfig,
    get_default_config,
    load_config,
)
from .specs import (
    SKIP_VALIDATION,
    SpecProfile,
    SpecTable,
    UnknownSpecError,
    build_spec_table,
    DEFAULT_SPEC_TABLE,
)

__all__ = [
    # Config classes
    'FormatterConfig',
    'ApiConfig',
    'LoggingConfig',
    'AppConfig',
    # Config functions
    'get_default_config',
    'load_config',
    # Spec profiles
    'SKIP_VALIDATION',
    'SpecProfile',
    'SpecTable',
    'UnknownSpecError',
    'build_spec_table',
    'DEFAULT_SPEC_TABLE',
]
