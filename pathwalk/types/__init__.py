"""Shared typing constructs for pathwalk.

This package defines public type aliases, enums and protocols used across the
codebase to describe nodes, edges and the graph interface consumed by
traversals. It contains no traversal logic.
"""

from pathwalk.types.base import Cost, Direction, EdgeLike, NodeID, TraversableGraph

__all__ = [
    # Enums
    "Direction",
    # Type aliases
    "Cost",
    "NodeID",
    # Protocols
    "EdgeLike",
    "TraversableGraph",
]
