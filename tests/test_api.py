"""Top-level API surface and the package docstring example."""

import networkx as nx

import pathwalk
from pathwalk import (
    DijkstraIterator,
    Direction,
    StrictMultiDiGraph,
    attr_cost,
    from_networkx,
    path_to,
)


def test_all_exports_resolve():
    for name in pathwalk.__all__:
        assert hasattr(pathwalk, name), name


def test_version():
    assert pathwalk.__version__ == "0.1.0"


def test_docstring_example():
    g = StrictMultiDiGraph()
    for n in "ABC":
        g.add_node(n)
    g.add_edge("A", "B", cost=1)
    g.add_edge("B", "C", cost=2)

    it = DijkstraIterator(g, "A", edge_cost=attr_cost("cost"))
    assert [node for node in it] == ["A", "B", "C"]
    assert it.cost("C") == 3


def test_readme_example():
    g = from_networkx(
        nx.DiGraph([("A", "B", {"cost": 1}), ("B", "C", {"cost": 2})])
    )
    it = DijkstraIterator(g, "A", edge_cost=attr_cost("cost"))

    seen = []
    while True:
        step = it.advance()
        if step.done:
            break
        seen.append((step.value, it.cost(step.value)))

    assert seen == [("A", 0), ("B", 1), ("C", 3)]
    assert path_to(it, "C").nodes == ("A", "B", "C")
    assert it.direction == Direction.OUT
