"""Core ordering operations and their filesystem collaborators."""

from .concat import concatenate_files
from .ordering import sort_files, sort_paths, sort_records
from .patterns import expand_pattern, expand_patterns, flatten_patterns

__all__ = [
    "sort_files",
    "sort_paths",
    "sort_records",
    "expand_pattern",
    "expand_patterns",
    "flatten_patterns",
    "concatenate_files",
]
