"""
Configuration management for the JSON formatter.

Provides dataclasses for all configuration options with sensible defaults,
YAML file loading, environment overrides and validation.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import os

import yaml
from dotenv import load_dotenv

from .specs import DEFAULT_SPEC_TABLE


DEFAULT_SPEC = "RFC 8259"
DEFAULT_TEMPLATE = "3 Space Tab"
DEFAULT_MAX_PAYLOAD_BYTES = 50 * 1024 * 1024  # 50 MB


@dataclass
class FormatterConfig:
    """Defaults applied when a request leaves an option out."""
    default_spec: str = field(default_factory=lambda: os.getenv(
        "JSONFMT_DEFAULT_SPEC", DEFAULT_SPEC
    ))
    default_template: str = field(default_factory=lambda: os.getenv(
        "JSONFMT_DEFAULT_TEMPLATE", DEFAULT_TEMPLATE
    ))
    repair: bool = False
    ensure_ascii: bool = False

    def __post_init__(self):
        if not DEFAULT_SPEC_TABLE.is_known(self.default_spec):
            raise ValueError(
                f"Unknown default_spec {self.default_spec!r}; "
                f"expected one of {DEFAULT_SPEC_TABLE.names()}"
            )


@dataclass
class ApiConfig:
    """Configuration for the request adapter."""
    max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES

    def __post_init__(self):
        if self.max_payload_bytes <= 0:
            raise ValueError("max_payload_bytes must be positive")


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = field(default_factory=lambda: os.getenv("JSONFMT_LOG_LEVEL", "INFO"))
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file: Optional[Path] = None

    def __post_init__(self):
        if self.file and isinstance(self.file, str):
            self.file = Path(self.file)


@dataclass
class AppConfig:
    """
    Root configuration object containing all settings.

    Can be loaded from YAML file or constructed programmatically.
    """
    formatter: FormatterConfig = field(default_factory=FormatterConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'AppConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            AppConfig instance
        """
        try:
            formatter = FormatterConfig(**(data.get('formatter') or {}))
            api = ApiConfig(**(data.get('api') or {}))
            logging = LoggingConfig(**(data.get('logging') or {}))
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

        return cls(formatter=formatter, api=api, logging=logging)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary.

        Returns:
            Configuration as dictionary
        """
        return {
            'formatter': {
                'default_spec': self.formatter.default_spec,
                'default_template': self.formatter.default_template,
                'repair': self.formatter.repair,
                'ensure_ascii': self.formatter.ensure_ascii,
            },
            'api': {
                'max_payload_bytes': self.api.max_payload_bytes,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file': str(self.logging.file) if self.logging.file else None,
            },
        }

    def save_yaml(self, path: Path | str) -> None:
        """
        Save configuration to a YAML file.

        Args:
            path: Path to output YAML file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def get_default_config() -> AppConfig:
    """
    Get the default application configuration.

    Returns:
        AppConfig with all default values
    """
    return AppConfig()


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    Reads a .env file first so environment overrides apply. Looks for config
    in this order:
    1. Provided path
    2. JSONFMT_CONFIG environment variable
    3. ./config/default.yaml, ./config.yaml, ~/.jsonfmt/config.yaml
    4. Default values

    Args:
        config_path: Optional path to config file

    Returns:
        AppConfig instance
    """
    load_dotenv()

    if config_path:
        return AppConfig.from_yaml(config_path)

    env_path = os.getenv("JSONFMT_CONFIG")
    if env_path:
        return AppConfig.from_yaml(env_path)

    default_paths = [
        Path("config/default.yaml"),
        Path("config.yaml"),
        Path.home() / ".jsonfmt" / "config.yaml",
    ]

    for path in default_paths:
        if path.exists():
            return AppConfig.from_yaml(path)

    return get_default_config()
