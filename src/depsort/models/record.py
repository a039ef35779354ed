"""Dependency record model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DependencyRecord:
    """
    A single item to be ordered.

    Attributes:
        key: Name of this item. Not required to be unique across a record set.
        depends_on: Key of the item that must come first, or None.
        payload: Caller data carried through untouched (e.g. the file path).
    """

    key: str
    depends_on: str | None = None
    payload: Any = None

    @property
    def has_dependency(self) -> bool:
        """Whether a dependency is declared (an empty string still counts)."""
        return self.depends_on is not None

    @classmethod
    def from_tuple(cls, entry: tuple[str, str | None, Any]) -> "DependencyRecord":
        """
        Build a record from a ``(key, depends_on, payload)`` triple.

        Args:
            entry: Triple in the legacy dependency-map form.

        Returns:
            DependencyRecord with the same three values.
        """
        key, depends_on, payload = entry
        return cls(key=key, depends_on=depends_on, payload=payload)
