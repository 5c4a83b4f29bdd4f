"""pathwalk: step-wise shortest-path traversal.

pathwalk runs single-source Dijkstra (optionally heuristic-guided) as a
resumable iterator. Each step settles one node in non-decreasing cost order, so
callers can stop early, interleave traversals, or inspect state between steps.

Primary API:
    DijkstraIterator - Resumable traversal over a graph
    DijkstraOptions - Direction, cost, heuristic, filter and callback policy
    StrictMultiDiGraph - NetworkX-backed graph implementing the traversal interface
    from_networkx() - Convert any NetworkX graph to a StrictMultiDiGraph
    shortest_path(), spf() - One-shot helpers built on the iterator

Example:
    from pathwalk import DijkstraIterator, StrictMultiDiGraph, attr_cost

    g = StrictMultiDiGraph()
    for n in "ABC":
        g.add_node(n)
    g.add_edge("A", "B", cost=1)
    g.add_edge("B", "C", cost=2)

    it = DijkstraIterator(g, "A", edge_cost=attr_cost("cost"))
    order = [node for node in it]   # ["A", "B", "C"]
    it.cost("C")                    # 3
"""

from __future__ import annotations

from pathwalk import logging
from pathwalk._version import __version__
from pathwalk.algorithms import (
    DijkstraIterator,
    DijkstraOptions,
    NodeState,
    NodeStatus,
    PriorityFrontier,
    StepResult,
    attr_cost,
    edges_to,
    nodes_to,
    path_to,
    shortest_path,
    spf,
)
from pathwalk.config import SEARCH_CONFIG, SearchConfig, load_config
from pathwalk.graph import Edge, StrictMultiDiGraph, from_networkx
from pathwalk.model import Path
from pathwalk.types import Direction

__all__ = [
    # Version
    "__version__",
    # Traversal
    "DijkstraIterator",
    "DijkstraOptions",
    "NodeState",
    "NodeStatus",
    "StepResult",
    "PriorityFrontier",
    "attr_cost",
    # Helpers
    "edges_to",
    "nodes_to",
    "path_to",
    "shortest_path",
    "spf",
    "Path",
    # Graph
    "Edge",
    "StrictMultiDiGraph",
    "from_networkx",
    # Types and configuration
    "Direction",
    "SearchConfig",
    "SEARCH_CONFIG",
    "load_config",
    # Utilities
    "logging",
]
