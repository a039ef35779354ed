"""Dependency Extractor - infer dependency records from file names.

Naming convention: a file named ``Bar.Foo.js`` holds ``Bar``, which depends
on ``Foo``; a file named ``Foo.js`` holds ``Foo`` with no dependency.

Only the base name is inspected. It is split on every dot:

    Foo.js          -> key "Foo", no dependency
    Bar.Foo.js      -> key "Bar", depends on "Foo"
    Foo.min.js      -> key "Foo", depends on "min"   (known limitation)
    Foo..js         -> key "Foo", depends on ""
    .eslintrc       -> key "",    no dependency
    Makefile        -> key "Makefile", no dependency

Multi-part extensions are read as a dependency. That ambiguity belongs to the
convention and is kept as is.
"""

import os
from collections.abc import Iterable
from typing import Any

from ..constants import NAME_SEPARATOR, PARTS_WITHOUT_DEPENDENCY
from ..models.record import DependencyRecord


def parse_name(identifier: Any) -> DependencyRecord:
    """
    Apply the naming convention to a single identifier.

    Args:
        identifier: File name or path (str, bytes or path-like). Kept as the payload.

    Returns:
        DependencyRecord for the identifier. Never raises for str, bytes or path-like input.
    """
    basename = os.fsdecode(os.path.basename(os.fspath(identifier)))
    parts = basename.split(NAME_SEPARATOR)

    # A single part has no second segment to name a dependency.
    if len(parts) <= PARTS_WITHOUT_DEPENDENCY:
        depends_on = None
    else:
        depends_on = parts[1]

    return DependencyRecord(key=parts[0], depends_on=depends_on, payload=identifier)


def extract_dependencies(identifiers: Iterable[Any]) -> list[DependencyRecord]:
    """
    Build dependency records for identifiers, preserving their order.

    Args:
        identifiers: Already-resolved file names or paths.

    Returns:
        One record per identifier, in input order.
    """
    return [parse_name(identifier) for identifier in identifiers]
