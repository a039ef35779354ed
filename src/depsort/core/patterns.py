"""Wildcard pattern normalization and filesystem expansion.

Patterns may be passed individually and/or as nested sequences:

    expand_patterns("lib/*.js", ["src/*.js", ("vendor/*.js",)])

They are flattened in order, each pattern is globbed, its matches are sorted
by code point, and the per-pattern results are concatenated in the order the
patterns were given.
"""

import glob
import os
from collections.abc import Iterable
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

Pattern = str | bytes | os.PathLike


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bytes, os.PathLike)) or not isinstance(value, Iterable)


def flatten_patterns(*patterns: Any) -> list[Any]:
    """
    Flatten scalars and (possibly nested) sequences into one ordered list.

    Strings, bytes and path-like objects are scalars; any other iterable is
    treated as a sequence and flattened recursively.

    Args:
        *patterns: Patterns or sequences of patterns.

    Returns:
        List of scalar patterns in the order encountered.
    """
    results: list[Any] = []
    for pattern in patterns:
        if _is_scalar(pattern):
            results.append(pattern)
        else:
            results.extend(flatten_patterns(*pattern))
    return results


def expand_pattern(pattern: Pattern, recursive: bool = True) -> list[str]:
    """
    Resolve one wildcard pattern against the filesystem.

    Args:
        pattern: Glob expression (``*``, ``?``, ``[...]`` and, when
            ``recursive`` is set, ``**``).
        recursive: Whether ``**`` matches across directories.

    Returns:
        Matching paths sorted by plain code-point ordering. Empty when
        nothing matches.
    """
    # Matches are always str, bytes patterns included
    pattern = os.fsdecode(pattern)
    matches = sorted(glob.glob(pattern, recursive=recursive))
    logger.debug("Expanded pattern", pattern=pattern, match_count=len(matches))
    return matches


def expand_patterns(*patterns: Any, recursive: bool = True) -> list[str]:
    """
    Flatten patterns and concatenate their sorted matches in supplied order.

    A path matched by several patterns appears once per matching pattern.

    Args:
        *patterns: Patterns or nested sequences of patterns.
        recursive: Whether ``**`` matches across directories.

    Returns:
        Ordered list of matching paths.
    """
    paths: list[str] = []
    for pattern in flatten_patterns(*patterns):
        paths.extend(expand_pattern(pattern, recursive=recursive))
    return paths
