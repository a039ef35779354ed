"""Dependency inference and ordering."""

from .dot import records_to_dot
from .extractor import extract_dependencies, parse_name
from .sorter import max_iterations, sort_dependencies

__all__ = [
    "extract_dependencies",
    "parse_name",
    "sort_dependencies",
    "max_iterations",
    "records_to_dot",
]
