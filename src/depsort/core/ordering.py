"""Public ordering operations.

Data flows one way:

    patterns -> paths -> dependency records -> ordered records -> ordered paths
"""

from collections.abc import Iterable
from typing import Any

import structlog

from ..dependency.extractor import extract_dependencies
from ..dependency.sorter import sort_dependencies
from ..models.record import DependencyRecord
from .patterns import expand_patterns

logger = structlog.get_logger(__name__)


def sort_records(
    records: Iterable[DependencyRecord | tuple[str, str | None, Any]],
) -> list[DependencyRecord]:
    """
    Order dependency records so each follows the record it depends on.

    Args:
        records: DependencyRecord instances, or ``(key, depends_on, payload)``
            triples which are converted first.

    Returns:
        The records in dependency order. DependencyRecord inputs are returned
        as the same objects.

    Raises:
        CircularDependencyError: If no valid ordering exists.
    """
    normalized = [
        record if isinstance(record, DependencyRecord) else DependencyRecord.from_tuple(record)
        for record in records
    ]
    return sort_dependencies(normalized)


def sort_paths(identifiers: Iterable[Any]) -> list[Any]:
    """
    Order already-resolved file names by their naming-convention dependencies.

    Args:
        identifiers: File names or paths in tie-break order.

    Returns:
        The identifiers in dependency order.

    Raises:
        CircularDependencyError: If no valid ordering exists.
    """
    records = extract_dependencies(identifiers)
    return [record.payload for record in sort_dependencies(records)]


def sort_files(*patterns: Any, recursive: bool = True) -> list[str]:
    """
    Sort the files matched by wildcard patterns so dependencies come first.

    Examples:
        sort_files("Bar.Foo.js", "Foo.js")  -> ["Foo.js", "Bar.Foo.js"]
        sort_files(["Bar.js", "Foo.js"])    -> ["Bar.js", "Foo.js"]

    Args:
        *patterns: Glob patterns, given separately and/or as nested sequences.
        recursive: Whether ``**`` matches across directories.

    Returns:
        Matching paths in dependency order.

    Raises:
        CircularDependencyError: If no valid ordering exists.
    """
    paths = expand_patterns(*patterns, recursive=recursive)
    ordered = sort_paths(paths)
    logger.debug("Sorted files", file_count=len(ordered))
    return ordered
