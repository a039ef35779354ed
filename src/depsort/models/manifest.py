"""Record manifests: dependency records supplied from a JSON or YAML file.

A manifest is either a bare list of entries or a mapping with a ``records``
list:

    records:
      - key: Bar
        depends_on: Foo
        payload: src/Bar.js
      - key: Foo
        payload: src/Foo.js

``dependsOn`` is accepted as an alias of ``depends_on``.
"""

import json
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError

from ..utils.exceptions import ManifestError
from .record import DependencyRecord

logger = structlog.get_logger(__name__)

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


class RecordEntry(BaseModel):
    """One manifest entry, validated before it becomes a DependencyRecord."""

    key: str = Field(..., description="Name of the item")
    depends_on: str | None = Field(
        None, alias="dependsOn", description="Key of the item that must come first"
    )
    payload: Any = Field(None, description="Caller data returned with the record")

    model_config = {"extra": "forbid", "populate_by_name": True}

    def to_record(self) -> DependencyRecord:
        """Convert to the immutable record used by the sorter."""
        return DependencyRecord(key=self.key, depends_on=self.depends_on, payload=self.payload)


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ManifestError(f"Invalid JSON: {e}", path=path, original_error=e) from e

    if suffix in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ManifestError(f"Invalid YAML: {e}", path=path, original_error=e) from e

    raise ManifestError(
        f"Unsupported manifest format '{suffix or '<none>'}' (expected .json, .yaml or .yml)",
        path=path,
    )


def parse_manifest(data: Any, path: Path | str | None = None) -> list[DependencyRecord]:
    """
    Validate manifest data that has already been decoded.

    Args:
        data: A list of entries, or a mapping holding one under ``records``.
        path: Source file, used only for error messages.

    Returns:
        Records in manifest order.

    Raises:
        ManifestError: If the structure or any entry is invalid.
    """
    if isinstance(data, dict):
        if "records" not in data:
            raise ManifestError("Manifest mapping has no 'records' key", path=path)
        entries = data["records"]
    else:
        entries = data

    if entries is None:
        return []

    if not isinstance(entries, list):
        raise ManifestError(
            f"Expected a list of records, got {type(entries).__name__}", path=path
        )

    records: list[DependencyRecord] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ManifestError(
                f"Expected a mapping, got {type(entry).__name__}", path=path, index=index
            )
        try:
            records.append(RecordEntry.model_validate(entry).to_record())
        except ValidationError as e:
            raise ManifestError(str(e), path=path, index=index, original_error=e) from e

    return records


def load_manifest(path: Path | str) -> list[DependencyRecord]:
    """
    Load dependency records from a JSON or YAML manifest file.

    Args:
        path: Manifest file; the format is chosen by suffix.

    Returns:
        Records in manifest order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ManifestError: If the file cannot be decoded or validated.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Manifest file not found: {path}")

    records = parse_manifest(_read_document(path), path=path)
    logger.debug("Loaded record manifest", path=str(path), record_count=len(records))
    return records
