"""Tests for record manifest loading."""

import json

import pytest

from depsort.models.manifest import RecordEntry, load_manifest, parse_manifest
from depsort.models.record import DependencyRecord
from depsort.utils.exceptions import ManifestError


class TestRecordEntry:
    """Test RecordEntry validation."""

    def test_alias_accepted(self):
        """Test dependsOn is accepted for depends_on."""
        entry = RecordEntry.model_validate({"key": "Bar", "dependsOn": "Foo"})

        assert entry.depends_on == "Foo"

    def test_field_name_accepted(self):
        """Test the snake_case field name also works."""
        entry = RecordEntry.model_validate({"key": "Bar", "depends_on": "Foo"})

        assert entry.to_record() == DependencyRecord("Bar", "Foo", None)

    def test_payload_kept_as_is(self):
        """Test structured payloads pass through."""
        entry = RecordEntry.model_validate({"key": "Foo", "payload": {"path": "Foo.js"}})

        assert entry.to_record().payload == {"path": "Foo.js"}


class TestParseManifest:
    """Test parse_manifest on decoded data."""

    def test_bare_list(self):
        """Test a top-level list of entries."""
        records = parse_manifest([{"key": "Bar", "depends_on": "Foo"}, {"key": "Foo"}])

        assert [r.key for r in records] == ["Bar", "Foo"]

    def test_records_mapping(self):
        """Test a mapping with a records list."""
        records = parse_manifest({"records": [{"key": "Foo"}]})

        assert records == [DependencyRecord("Foo")]

    def test_empty_records(self):
        """Test an empty records section gives no records."""
        assert parse_manifest({"records": None}) == []

    def test_mapping_without_records(self):
        """Test a mapping must hold a records key."""
        with pytest.raises(ManifestError, match="no 'records' key"):
            parse_manifest({"items": []})

    def test_not_a_list(self):
        """Test records must be a list."""
        with pytest.raises(ManifestError, match="Expected a list"):
            parse_manifest({"records": "Foo"})

    def test_entry_not_a_mapping(self):
        """Test each entry must be a mapping and the index is reported."""
        with pytest.raises(ManifestError) as exc_info:
            parse_manifest([{"key": "Foo"}, "Bar"])

        assert exc_info.value.index == 1
        assert str(exc_info.value).startswith("Entry 1:")

    def test_unknown_field_rejected(self):
        """Test extra fields fail validation."""
        with pytest.raises(ManifestError) as exc_info:
            parse_manifest([{"key": "Foo", "requires": "Bar"}])

        assert exc_info.value.index == 0
        assert exc_info.value.original_error is not None

    def test_missing_key_rejected(self):
        """Test key is required."""
        with pytest.raises(ManifestError):
            parse_manifest([{"depends_on": "Foo"}])


class TestLoadManifest:
    """Test load_manifest from files."""

    def test_json(self, tmp_path):
        """Test loading a JSON manifest."""
        path = tmp_path / "deps.json"
        path.write_text(json.dumps([{"key": "Bar", "dependsOn": "Foo", "payload": "Bar.js"}]))

        assert load_manifest(path) == [DependencyRecord("Bar", "Foo", "Bar.js")]

    def test_yaml(self, tmp_path):
        """Test loading a YAML manifest."""
        path = tmp_path / "deps.yml"
        path.write_text(
            "records:\n"
            "  - key: Bar\n"
            "    depends_on: Foo\n"
            "  - key: Foo\n"
            "    payload: src/Foo.js\n"
        )

        records = load_manifest(path)

        assert records == [
            DependencyRecord("Bar", "Foo"),
            DependencyRecord("Foo", None, "src/Foo.js"),
        ]

    def test_missing_file(self, tmp_path):
        """Test a missing manifest raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_manifest(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON is reported with the path."""
        path = tmp_path / "deps.json"
        path.write_text("[{")

        with pytest.raises(ManifestError, match="Invalid JSON") as exc_info:
            load_manifest(path)

        assert exc_info.value.path == path

    def test_invalid_yaml(self, tmp_path):
        """Test malformed YAML is reported."""
        path = tmp_path / "deps.yaml"
        path.write_text("records: [\n")

        with pytest.raises(ManifestError, match="Invalid YAML"):
            load_manifest(path)

    def test_unsupported_suffix(self, tmp_path):
        """Test only JSON and YAML manifests are read."""
        path = tmp_path / "deps.txt"
        path.write_text("Foo")

        with pytest.raises(ManifestError, match="Unsupported manifest format"):
            load_manifest(path)
