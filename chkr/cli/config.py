"""Configuration loading and validation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATHS = ["chkr.yaml", "chkr.yml", ".chkr.yaml"]
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class LoggingConfig:
    """Logging options."""

    level: str = "INFO"
    file: Path | None = None
    results_log: Path | None = None  # JSONL, one line per verified entry


@dataclass
class OutputConfig:
    """Console output options."""

    quiet: bool = False  # Hide lines for matching files
    summary: bool = True


@dataclass
class Config:
    """Complete application configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to YAML config file. Defaults to chkr.yaml.

    Returns:
        Loaded Config object.
    """
    config = Config()

    # Try default paths if not specified
    if config_path is None:
        for default_path in DEFAULT_CONFIG_PATHS:
            if Path(default_path).exists():
                config_path = Path(default_path)
                break

    if config_path and config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
            config = _parse_config(data)

    return config


def _optional_path(value: Any) -> Path | None:
    return Path(value) if value else None


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse configuration dictionary into Config object.

    Args:
        data: Raw configuration dictionary.

    Returns:
        Config object.
    """
    config = Config()

    if "logging" in data:
        logging_data = data["logging"] or {}
        config.logging = LoggingConfig(
            level=str(logging_data.get("level", "INFO")),
            file=_optional_path(logging_data.get("file")),
            results_log=_optional_path(logging_data.get("results_log")),
        )

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            quiet=bool(output_data.get("quiet", False)),
            summary=bool(output_data.get("summary", True)),
        )

    return config


def validate_config(config: Config) -> list[str]:
    """Validate configuration, return list of issues.

    Args:
        config: Configuration to validate.

    Returns:
        List of validation issue messages.
    """
    issues = []

    if config.logging.level.upper() not in VALID_LOG_LEVELS:
        issues.append(f"Invalid logging level: {config.logging.level}")

    return issues
