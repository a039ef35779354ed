"""Graphviz DOT rendering of dependency records."""

from collections.abc import Iterable

from ..models.record import DependencyRecord

EXTERNAL_COLOR = "#eeeeee"  # Gray
ROOT_COLOR = "#d4edda"  # Green
DEPENDENT_COLOR = "#cce5ff"  # Blue


def _escape(value: object) -> str:
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def _quote(value: object) -> str:
    return f'"{_escape(value)}"'


def records_to_dot(records: Iterable[DependencyRecord]) -> str:
    """
    Generate a DOT digraph for a record set.

    Records become nodes named by their position (keys may repeat). Each
    record that satisfies a dependency gets an edge to the dependent record.
    References to keys outside the set point from a dashed "external" node.

    Args:
        records: Records in any order.

    Returns:
        String containing the Graphviz DOT definition
    """
    records = list(records)

    positions_by_key: dict[str, list[int]] = {}
    for index, record in enumerate(records):
        positions_by_key.setdefault(record.key, []).append(index)

    lines = ["digraph Dependencies {"]
    lines.append("    rankdir=LR;")
    lines.append("    node [shape=box style=filled];")

    external: list[str] = []
    edges: list[str] = []

    for index, record in enumerate(records):
        label = _escape(record.key)
        if record.payload is not None:
            label = f"{label}\\n{_escape(record.payload)}"
        color = DEPENDENT_COLOR if record.has_dependency else ROOT_COLOR
        lines.append(f'    n{index} [label="{label}" fillcolor="{color}"];')

        if not record.has_dependency:
            continue

        providers = positions_by_key.get(record.depends_on, [])
        if providers:
            for provider in providers:
                if provider != index:
                    edges.append(f"    n{provider} -> n{index};")
        else:
            node_name = _quote(f"external:{record.depends_on}")
            if record.depends_on not in external:
                external.append(record.depends_on)
                lines.append(
                    f"    {node_name} [label={_quote(record.depends_on)} "
                    f'fillcolor="{EXTERNAL_COLOR}" style="filled,dashed"];'
                )
            edges.append(f"    {node_name} -> n{index} [style=dashed];")

    lines.extend(edges)
    lines.append("}")
    return "\n".join(lines)
