"""Graph primitives and helpers.

This package provides the strict multi-directed graph type `StrictMultiDiGraph`,
the `Edge` record returned by its traversal interface, and conversion from
NetworkX graphs (`convert`).
"""

from pathwalk.graph.convert import from_networkx
from pathwalk.graph.strict_multidigraph import Edge, EdgeID, NodeID, StrictMultiDiGraph

__all__ = ["Edge", "EdgeID", "NodeID", "StrictMultiDiGraph", "from_networkx"]
