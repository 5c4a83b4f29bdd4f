"""Traversal algorithms: the step-wise Dijkstra engine and its helpers."""

from pathwalk.algorithms.dijkstra import (
    DijkstraIterator,
    DijkstraOptions,
    NodeState,
    NodeStatus,
    StepResult,
)
from pathwalk.algorithms.frontier import FrontierEntry, PriorityFrontier
from pathwalk.algorithms.paths import edges_to, nodes_to, path_to, shortest_path, spf
from pathwalk.algorithms.policies import (
    attr_cost,
    strictly_lower,
    unit_cost,
    zero_heuristic,
)

__all__ = [
    "DijkstraIterator",
    "DijkstraOptions",
    "NodeState",
    "NodeStatus",
    "StepResult",
    "FrontierEntry",
    "PriorityFrontier",
    "attr_cost",
    "strictly_lower",
    "unit_cost",
    "zero_heuristic",
    "edges_to",
    "nodes_to",
    "path_to",
    "shortest_path",
    "spf",
]
