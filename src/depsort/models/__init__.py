"""Data models."""

from .manifest import RecordEntry, load_manifest, parse_manifest
from .record import DependencyRecord

__all__ = [
    "DependencyRecord",
    "RecordEntry",
    "load_manifest",
    "parse_manifest",
]
