"""Tests for DOT graph rendering."""

from depsort.dependency.dot import records_to_dot
from depsort.models.record import DependencyRecord


class TestRecordsToDot:
    """Test records_to_dot output."""

    def test_empty_graph(self):
        """Test an empty record set still yields a valid digraph."""
        dot = records_to_dot([])

        assert dot.startswith("digraph Dependencies {")
        assert dot.endswith("}")

    def test_dependency_edge(self):
        """Test an edge runs from the dependency to the dependent."""
        dot = records_to_dot(
            [
                DependencyRecord("Bar", "Foo", "Bar.Foo.js"),
                DependencyRecord("Foo", None, "Foo.js"),
            ]
        )

        assert 'n0 [label="Bar\\nBar.Foo.js"' in dot
        assert 'n1 [label="Foo\\nFoo.js"' in dot
        assert "n1 -> n0;" in dot

    def test_external_dependency_is_dashed(self):
        """Test an unresolvable dependency gets its own dashed node."""
        dot = records_to_dot([DependencyRecord("Bar", "jQuery")])

        assert '"external:jQuery" [label="jQuery"' in dot
        assert '"external:jQuery" -> n0 [style=dashed];' in dot

    def test_cycle_is_drawn(self):
        """Test cycles are rendered rather than rejected."""
        dot = records_to_dot([DependencyRecord("A", "B"), DependencyRecord("B", "A")])

        assert "n1 -> n0;" in dot
        assert "n0 -> n1;" in dot

    def test_self_reference_has_no_self_loop(self):
        """Test a record does not satisfy its own dependency."""
        dot = records_to_dot([DependencyRecord("X", "X"), DependencyRecord("X")])

        assert "n1 -> n0;" in dot
        assert "n0 -> n0;" not in dot

    def test_quotes_are_escaped(self):
        """Test quotes in payloads cannot break the label."""
        dot = records_to_dot([DependencyRecord("Foo", None, 'say "hi".js')])

        assert 'say \\"hi\\".js' in dot
