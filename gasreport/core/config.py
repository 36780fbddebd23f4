"""
Hierarchical configuration for gasreport.

Configuration priority (highest to lowest):
1. CLI arguments
2. Explicit config file (--config)
3. Project config (.gasreport.yml)
4. User config (~/.gasreport/config.yml)
5. Environment variables (GASREPORT_*)
6. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KNOWN_FORMATS = ("json", "csv", "html", "text", "checkstyle")
DEFAULT_FORMAT = "text"


class ReportingConfig(BaseModel):
    """Configuration for report rendering."""

    default_format: str = DEFAULT_FORMAT
    checkstyle_version: str = "5.0"
    tool_name: str = "gas"
    output_path: Optional[Path] = None

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate the default report format."""
        if v not in KNOWN_FORMATS:
            raise ValueError(f"Invalid format: {v}. Must be one of {KNOWN_FORMATS}")
        return v

    @field_validator("output_path", mode="before")
    @classmethod
    def validate_output_path(cls, v: Any) -> Optional[Path]:
        if v is None or v == "":
            return None
        if isinstance(v, str):
            return Path(v)
        return v


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "WARNING"
    file: Optional[Path] = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: Any) -> Optional[Path]:
        if v is None:
            return None
        if isinstance(v, str):
            return Path(v)
        return v


class ReportSettings(BaseSettings):
    """
    Main configuration model with hierarchical loading.

    Environment variables use the ``GASREPORT_`` prefix and ``__`` for
    nesting, e.g. ``GASREPORT_REPORTING__DEFAULT_FORMAT=csv``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GASREPORT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    reporting: ReportingConfig = Field(default_factory=ReportingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(
        cls,
        cli_args: Optional[dict[str, Any]] = None,
        project_path: Optional[Path] = None,
        config_file: Optional[Path] = None,
    ) -> ReportSettings:
        """
        Load configuration from multiple sources with priority.

        Args:
            cli_args: Command-line arguments (highest priority)
            project_path: Directory searched for .gasreport.yml
            config_file: Explicit config file, read after the project file

        Returns:
            Merged configuration
        """
        config_dict: dict[str, Any] = {}
        project_path = project_path or Path.cwd()

        for path in (
            Path.home() / ".gasreport" / "config.yml",
            project_path / ".gasreport.yml",
            config_file,
        ):
            if path is not None and path.exists():
                config_dict = _deep_merge(config_dict, _read_yaml(path))

        # GASREPORT_* variables fill whatever the files and CLI leave unset

        if cli_args:
            config_dict = _deep_merge(config_dict, _flatten_cli_args(cli_args))

        return cls(**config_dict)

    def to_yaml(self, path: Path) -> None:
        """Write configuration to YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _flatten_cli_args(args: dict[str, Any]) -> dict[str, Any]:
    """
    Convert flat CLI arguments to nested config structure.

    Examples:
        {"verbose": True} -> {"logging": {"level": "DEBUG"}}
        {"output": "r.xml"} -> {"reporting": {"output_path": Path("r.xml")}}
    """
    result: dict[str, Any] = {}

    mappings = {
        "verbose": ("logging", "level", lambda v: "DEBUG" if v else None),
        "quiet": ("logging", "level", lambda v: "ERROR" if v else None),
        "log_file": ("logging", "file", Path),
        "json_logs": ("logging", "json_format", lambda v: True if v else None),
        "output": ("reporting", "output_path", Path),
        "checkstyle_version": ("reporting", "checkstyle_version", str),
    }

    for key, value in args.items():
        if value is None or key not in mappings:
            continue
        section, subkey, transform = mappings[key]
        transformed = transform(value)
        if transformed is not None:
            result.setdefault(section, {})[subkey] = transformed

    return result
