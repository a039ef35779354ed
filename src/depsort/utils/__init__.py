"""Utility functions and exceptions."""

from .exceptions import (
    CircularDependencyError,
    ConfigError,
    DepsortError,
    ManifestError,
)

__all__ = [
    "DepsortError",
    "CircularDependencyError",
    "ManifestError",
    "ConfigError",
]
