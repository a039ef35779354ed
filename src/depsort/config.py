"""Configuration management for depsort."""

import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SEPARATOR,
    ENV_PREFIX,
)
from .utils.exceptions import ConfigError


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    format: str = DEFAULT_LOG_FORMAT  # "console" or "json"
    file: Path | None = None

    @property
    def json_logs(self) -> bool:
        return self.format.lower() == "json"


@dataclass
class SourceConfig:
    """
    Where files come from when no patterns are given on the command line.

    Attributes:
        patterns: Glob patterns, processed in order
        recursive: Whether ``**`` matches across directories
    """

    patterns: list[str] = field(default_factory=list)
    recursive: bool = True


@dataclass
class OutputConfig:
    """Settings for concatenating sorted files."""

    separator: str = DEFAULT_SEPARATOR
    encoding: str = DEFAULT_ENCODING


def _build_section(section_cls: type, data: Any, name: str, config_path: Path | None) -> Any:
    if data is None:
        return section_cls()
    if not isinstance(data, dict):
        raise ConfigError(
            f"Section '{name}' must be a mapping, got {type(data).__name__}", path=config_path
        )

    known = {f.name for f in fields(section_cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(
            f"Unknown keys in section '{name}': {', '.join(unknown)}", path=config_path
        )
    return section_cls(**data)


@dataclass
class DepsortConfig:
    """
    Complete configuration for depsort.

    This combines all configuration sections.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    sources: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], config_path: Path | None = None) -> "DepsortConfig":
        """
        Build configuration from a parsed mapping.

        Args:
            data: Mapping with optional ``logging``, ``sources`` and ``output`` sections
            config_path: Source file, used only for error messages

        Returns:
            DepsortConfig instance

        Raises:
            ConfigError: If a section is malformed or contains unknown keys
        """
        unknown = sorted(set(data) - {"logging", "sources", "output"})
        if unknown:
            raise ConfigError(f"Unknown configuration sections: {', '.join(unknown)}", config_path)

        logging_data = data.get("logging")
        if isinstance(logging_data, dict) and logging_data.get("file"):
            logging_data = {**logging_data, "file": Path(logging_data["file"])}

        sources = _build_section(SourceConfig, data.get("sources"), "sources", config_path)
        if isinstance(sources.patterns, str):
            sources.patterns = [sources.patterns]

        return cls(
            logging=_build_section(LoggingConfig, logging_data, "logging", config_path),
            sources=sources,
            output=_build_section(OutputConfig, data.get("output"), "output", config_path),
        )

    @classmethod
    def from_file(cls, config_path: Path) -> "DepsortConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file

        Returns:
            DepsortConfig instance
        """
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in configuration file {config_path}: {e}", config_path
            ) from e

        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise ConfigError(
                f"Invalid configuration file structure in {config_path}: "
                f"expected dictionary, got {type(data).__name__}",
                config_path,
            )

        return cls.from_dict(data, config_path)

    def to_file(self, config_path: Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            config_path: Path to save config file
        """
        logging_data = {
            k: str(v) if isinstance(v, Path) else v
            for k, v in asdict(self.logging).items()
            if v is not None
        }
        data = {
            "logging": logging_data,
            "sources": asdict(self.sources),
            "output": asdict(self.output),
        }

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_env(cls) -> "DepsortConfig":
        """
        Create configuration from environment variables.

        Environment variables:
            DEPSORT_LOG_LEVEL: Logging level (default: WARNING)
            DEPSORT_LOG_FORMAT: "console" or "json" (default: console)
            DEPSORT_LOG_FILE: Optional log file path
            DEPSORT_PATTERNS: Comma-separated default glob patterns
            DEPSORT_ENCODING: Encoding for concatenation (default: utf-8)

        Returns:
            DepsortConfig instance
        """
        log_file = os.environ.get(f"{ENV_PREFIX}LOG_FILE")
        patterns = os.environ.get(f"{ENV_PREFIX}PATTERNS", "")

        return cls(
            logging=LoggingConfig(
                level=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL),
                format=os.environ.get(f"{ENV_PREFIX}LOG_FORMAT", DEFAULT_LOG_FORMAT),
                file=Path(log_file) if log_file else None,
            ),
            sources=SourceConfig(patterns=[p.strip() for p in patterns.split(",") if p.strip()]),
            output=OutputConfig(
                encoding=os.environ.get(f"{ENV_PREFIX}ENCODING", DEFAULT_ENCODING),
            ),
        )


def load_config(config_file: Path | None = None) -> DepsortConfig:
    """
    Load configuration from file or environment variables.

    Args:
        config_file: Optional path to YAML config file

    Returns:
        DepsortConfig instance

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        return DepsortConfig.from_file(config_file)
    return DepsortConfig.from_env()
