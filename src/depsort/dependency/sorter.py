"""Constrained Topological Sorter - order records after their dependencies.

Uses a single rotating queue rather than Kahn's level-by-level processing,
so no explicit graph is ever built.
"""

from collections import deque
from collections.abc import Iterable

import structlog

from ..models.record import DependencyRecord
from ..utils.exceptions import CircularDependencyError

logger = structlog.get_logger(__name__)


def max_iterations(record_count: int) -> int:
    """
    Upper bound on queue rotations for ``record_count`` records.

    Every full pass over the queue places at least one record when the input
    is acyclic, and the queue shrinks by one per pass, so the worst case is
    n + (n - 1) + ... + 1.
    """
    return record_count * (record_count + 1) // 2


def sort_dependencies(records: Iterable[DependencyRecord]) -> list[DependencyRecord]:
    """
    Return the records reordered so each comes after its dependency.

    ALGORITHM (rotating queue):
    1. Put every record on a queue in input order.
    2. Take the record at the front. It is ready when any holds:
       - it declares no dependency
       - a record with the dependency's key has already been placed
       - no record in the whole set has the dependency's key (external)
    3. Ready records are appended to the output; others go to the back of
       the queue.
    4. Stop when the queue is empty, or fail once the iteration bound from
       ``max_iterations`` is exhausted.

    A chain A -> B -> C resolves over successive rotations: C is placed on
    the first pass, then B, then A. Records without a dependency keep their
    relative input order.

    With duplicate keys, a dependent is satisfied once any record carrying
    that key has been placed.

    TIME COMPLEXITY: O(n^2) rotations in the worst case

    Args:
        records: Records in tie-break order.

    Returns:
        A new list holding the same record objects in dependency order.

    Raises:
        CircularDependencyError: If some records can never become ready.
    """
    records = list(records)
    known_keys = {record.key for record in records}

    unsorted: deque[DependencyRecord] = deque(records)
    sorted_keys: set[str] = set()
    sorted_records: list[DependencyRecord] = []

    bound = max_iterations(len(records))
    iterations = 0

    while unsorted and iterations < bound:
        iterations += 1
        record = unsorted.popleft()
        depends_on = record.depends_on

        if depends_on is None or depends_on in sorted_keys or depends_on not in known_keys:
            sorted_keys.add(record.key)
            sorted_records.append(record)
        else:
            # Defer to a later pass
            unsorted.append(record)

    if unsorted:
        remaining = list(unsorted)
        logger.debug(
            "Iteration bound exhausted",
            iterations=iterations,
            unresolved=[record.key for record in remaining],
        )
        raise CircularDependencyError(records=remaining)

    logger.debug(
        "Dependency sort complete",
        record_count=len(sorted_records),
        iterations=iterations,
    )

    return sorted_records
