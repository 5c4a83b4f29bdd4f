from pathwalk.algorithms.policies import (
    attr_cost,
    strictly_lower,
    unit_cost,
    zero_heuristic,
)
from pathwalk.config import SEARCH_CONFIG
from pathwalk.graph.strict_multidigraph import Edge


def test_defaults():
    edge = Edge("A", "B", 0, {"cost": 7})
    assert unit_cost(edge, 100) == 1
    assert zero_heuristic("A") == 0


def test_strictly_lower_ignores_edges():
    a = Edge("A", "C", 0)
    b = Edge("B", "C", 1)
    assert strictly_lower(4, 2, a, b)
    assert not strictly_lower(2, 2, a, b)
    assert not strictly_lower(2, 3, a, b)
    assert strictly_lower(4, 2, None, None)


def test_attr_cost_reads_attribute():
    cost = attr_cost("latency", default=5)
    assert cost(Edge("A", "B", 0, {"latency": 2.5}), 0) == 2.5
    assert cost(Edge("A", "B", 1, {}), 0) == 5


def test_attr_cost_uses_configured_default(monkeypatch):
    monkeypatch.setattr(SEARCH_CONFIG, "default_cost_attr", "weight")
    cost = attr_cost()
    assert cost(Edge("A", "B", 0, {"weight": 4, "cost": 9}), 0) == 4
