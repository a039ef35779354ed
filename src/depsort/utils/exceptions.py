"""Custom exceptions for depsort.

Exception Hierarchy:
-------------------
DepsortError (base)
├── CircularDependencyError   # Records whose dependencies can never be satisfied
├── ManifestError             # Malformed record manifest (JSON/YAML)
└── ConfigError               # Malformed configuration file

Only CircularDependencyError can come out of the ordering core. Name parsing
is permissive and never raises; the other two belong to the input layer that
reads files on behalf of the CLI.
"""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.record import DependencyRecord

CIRCULAR_REFERENCE_MESSAGE = "Dependency map contains a circular reference."


class DepsortError(Exception):
    """Base exception for all depsort errors."""

    pass


class CircularDependencyError(DepsortError):
    """
    Raised when no ordering can place every record after its dependency.

    Example cycles:
    1. A.B.js and B.A.js: each names the other as its dependency
    2. A.A.js alone: a record naming its own key with no other A present
    3. C.A.js behind such a cycle: entailed by records that never get placed

    The records that were still waiting when the sorter gave up are kept on
    the exception so callers can report them.
    """

    def __init__(
        self,
        message: str | None = None,
        records: "list[DependencyRecord] | None" = None,
    ) -> None:
        """
        Initialize CircularDependencyError.

        Args:
            message: Error message. Built from the unresolved keys when omitted.
            records: Records left unplaced when the iteration bound ran out.
        """
        self.records = list(records or [])
        if message is None:
            message = CIRCULAR_REFERENCE_MESSAGE
            if self.records:
                message = f"{message} Unresolved: {', '.join(self.keys)}"
        super().__init__(message)

    @property
    def keys(self) -> list[str]:
        """Keys of the unresolved records, in queue order."""
        return [record.key for record in self.records]


class ManifestError(DepsortError):
    """Raised when a record manifest cannot be loaded."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        index: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize ManifestError.

        Args:
            message: Error message.
            path: Manifest file that failed to load.
            index: Position of the offending entry, if the problem is per entry.
            original_error: Underlying parser or validation error.
        """
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.index = index
        self.original_error = original_error

    def __str__(self) -> str:
        """
        Return string representation with file and entry position when known.

        Returns:
            str: Error message prefixed with location.
        """
        message = str(self.args[0]) if self.args else "Manifest error"
        if self.index is not None:
            message = f"Entry {self.index}: {message}"
        if self.path is not None:
            message = f"{self.path}: {message}"
        return message


class ConfigError(DepsortError):
    """Raised when a configuration file is malformed."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
