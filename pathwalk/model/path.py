"""Lightweight representation of a single traversal path.

The ``Path`` dataclass stores the ordered nodes and edges from a traversal
source to one node, together with the cost recorded for every node along the
way. Helpers provide ordering by cost and sub-path extraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from pathwalk.types.base import Cost, NodeID


@dataclass(frozen=True)
class Path:
    """A path found by a traversal.

    Attributes:
        nodes: Node sequence from the traversal source to the destination.
        edges: Edge sequence; ``edges[i]`` joins ``nodes[i]`` and ``nodes[i + 1]``.
        costs: Cost recorded for each node in ``nodes``.
    """

    nodes: Tuple[NodeID, ...]
    edges: Tuple[Any, ...]
    costs: Tuple[Cost, ...]

    def __post_init__(self) -> None:
        """Validate that edges and costs line up with nodes."""
        if not self.nodes:
            raise ValueError("Path must contain at least one node.")
        if len(self.edges) != len(self.nodes) - 1:
            raise ValueError(
                f"Path with {len(self.nodes)} nodes needs {len(self.nodes) - 1} "
                f"edges, got {len(self.edges)}."
            )
        if len(self.costs) != len(self.nodes):
            raise ValueError(
                f"Path with {len(self.nodes)} nodes needs {len(self.nodes)} "
                f"costs, got {len(self.costs)}."
            )

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.nodes)

    def __lt__(self, other: Any) -> bool:
        """Compare two paths by cost."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    @property
    def cost(self) -> Cost:
        """Cost of the destination node."""
        return self.costs[-1]

    @property
    def src_node(self) -> NodeID:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        return len(self.edges)

    def get_sub_path(self, dst_node: NodeID) -> Path:
        """Create a sub-path ending at the first occurrence of ``dst_node``.

        Raises:
            ValueError: If ``dst_node`` is not found in the path.
        """
        try:
            idx = self.nodes.index(dst_node)
        except ValueError:
            raise ValueError(f"Node '{dst_node}' not found in path.") from None
        return Path(self.nodes[: idx + 1], self.edges[:idx], self.costs[: idx + 1])
