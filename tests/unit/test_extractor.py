"""Tests for the naming-convention dependency extractor."""

from pathlib import Path

import pytest

from depsort.dependency.extractor import extract_dependencies, parse_name


class TestParseName:
    """Test parse_name on single identifiers."""

    @pytest.mark.parametrize(
        "identifier,key,depends_on",
        [
            ("Foo.js", "Foo", None),
            ("Bar.Foo.js", "Bar", "Foo"),
            ("src/lib/Bar.Foo.js", "Bar", "Foo"),
            ("src.d/Foo.js", "Foo", None),
            ("Makefile", "Makefile", None),
            ("", "", None),
            (".eslintrc", "", None),
        ],
    )
    def test_naming_convention(self, identifier, key, depends_on):
        """Test key and dependency extraction from the base name."""
        record = parse_name(identifier)

        assert record.key == key
        assert record.depends_on == depends_on

    def test_multi_part_extension_reads_as_dependency(self):
        """Known limitation: Foo.min.js is read as Foo depending on min."""
        record = parse_name("Foo.min.js")

        assert record.key == "Foo"
        assert record.depends_on == "min"

    def test_extra_segments_after_dependency_are_ignored(self):
        """Test only the second segment names the dependency."""
        record = parse_name("Bar.Foo.min.js")

        assert record.key == "Bar"
        assert record.depends_on == "Foo"

    def test_empty_dependency_segment(self):
        """Test Foo..js declares a dependency on the empty key."""
        record = parse_name("Foo..js")

        assert record.depends_on == ""
        assert record.has_dependency is True

    def test_payload_is_original_identifier(self):
        """Test the identifier is carried through unchanged."""
        assert parse_name("src/Bar.Foo.js").payload == "src/Bar.Foo.js"

    def test_path_object_accepted(self):
        """Test path-like identifiers are parsed and kept as payload."""
        path = Path("src") / "Bar.Foo.js"

        record = parse_name(path)

        assert record.key == "Bar"
        assert record.depends_on == "Foo"
        assert record.payload is path


class TestExtractDependencies:
    """Test extract_dependencies over sequences."""

    def test_preserves_order(self):
        """Test one record per identifier, in input order."""
        records = extract_dependencies(["Bar.Foo.js", "Foo.js"])

        assert [(r.key, r.depends_on, r.payload) for r in records] == [
            ("Bar", "Foo", "Bar.Foo.js"),
            ("Foo", None, "Foo.js"),
        ]

    def test_empty_input(self):
        """Test empty input yields no records."""
        assert extract_dependencies([]) == []

    def test_accepts_generator(self):
        """Test any iterable of identifiers is accepted."""
        records = extract_dependencies(name for name in ["Bar.js", "Foo.js"])

        assert [r.key for r in records] == ["Bar", "Foo"]
        assert all(r.depends_on is None for r in records)

    def test_bytes_identifier(self):
        """Test bytes identifiers are parsed and kept as payload."""
        record = extract_dependencies([b"src/Bar.Foo.js"])[0]

        assert (record.key, record.depends_on) == ("Bar", "Foo")
        assert record.payload == b"src/Bar.Foo.js"
