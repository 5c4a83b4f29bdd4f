import pytest

from pathwalk.graph.strict_multidigraph import StrictMultiDiGraph


@pytest.fixture
def diamond():
    # Cost:
    #        [1]        [5]
    #   A ───────► B ───────► D
    #   │          │          ▲
    #   │ [4]      │ [1]      │ [1]
    #   └────────► C ─────────┘
    #
    # Edge keys spell their endpoints, e.g. "AB".

    g = StrictMultiDiGraph()
    for node in ("A", "B", "C", "D"):
        g.add_node(node)

    g.add_edge("A", "B", key="AB", cost=1)
    g.add_edge("A", "C", key="AC", cost=4)
    g.add_edge("B", "C", key="BC", cost=1)
    g.add_edge("B", "D", key="BD", cost=5)
    g.add_edge("C", "D", key="CD", cost=1)
    return g


@pytest.fixture
def line1():
    # A ──► B ──► C ──► D, unit costs

    g = StrictMultiDiGraph()
    for node in ("A", "B", "C", "D"):
        g.add_node(node)

    g.add_edge("A", "B", key=0, cost=1)
    g.add_edge("B", "C", key=1, cost=1)
    g.add_edge("C", "D", key=2, cost=1)
    return g


@pytest.fixture
def two_islands():
    # Island 1:  A ◄──► B ──► C
    # Island 2:  X ──► Y
    # No edge connects the islands.

    g = StrictMultiDiGraph()
    for node in ("A", "B", "C", "X", "Y"):
        g.add_node(node)

    g.add_edge("A", "B", cost=1)
    g.add_edge("B", "A", cost=1)
    g.add_edge("B", "C", cost=1)
    g.add_edge("X", "Y", cost=1)
    return g


@pytest.fixture
def parallel_edges():
    # Three parallel A──►B edges with costs 3, 1, 2 and a self-loop on B.

    g = StrictMultiDiGraph()
    g.add_node("A")
    g.add_node("B")

    g.add_edge("A", "B", key="slow", cost=3)
    g.add_edge("A", "B", key="fast", cost=1)
    g.add_edge("A", "B", key="mid", cost=2)
    g.add_edge("B", "B", key="loop", cost=1)
    return g
