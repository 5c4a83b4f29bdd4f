"""Directed multigraph consumed by traversals.

`StrictMultiDiGraph` is a `networkx.MultiDiGraph` whose nodes must be added
explicitly and whose edges carry graph-wide unique keys. On top of the
networkx API it provides the two read-only calls a `DijkstraIterator` makes:
``for_each_node`` and ``incident_edges``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

import networkx as nx

from pathwalk.types.base import Direction

NodeID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


@dataclass(frozen=True)
class Edge:
    """A directed edge of a `StrictMultiDiGraph`.

    Attributes:
        source: Node the edge leaves.
        target: Node the edge enters.
        key: Unique edge key within the graph.
        attr: Live attribute dictionary of the edge. Not part of equality.
    """

    source: NodeID
    target: NodeID
    key: EdgeID
    attr: AttrDict = field(default_factory=dict, compare=False, repr=False)

    def __getitem__(self, name: str) -> Any:
        return self.attr[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.attr.get(name, default)


class StrictMultiDiGraph(nx.MultiDiGraph):
    """Multi-directed graph with explicit nodes and unique edge keys.

    Adding a node twice, adding an edge between unknown nodes, or reusing an
    edge key raises ValueError. Edges added without a key get the next value
    of an integer counter that skips past any explicit integer key.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        # Edge key -> (source, target, key, live attribute dict)
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._next_edge_id: int = 0

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return the next auto-assigned edge key.

        Overrides networkx's per-node-pair key so that keys are unique across
        the whole graph. ``u``, ``v`` and ``key`` are accepted for signature
        compatibility and ignored.
        """
        edge_id = self._next_edge_id
        self._next_edge_id += 1
        return edge_id

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a node with optional attributes.

        Raises:
            ValueError: If the node is already present.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add a directed edge between two existing nodes.

        Args:
            u_for_edge: Source node.
            v_for_edge: Target node.
            key: Edge key; generated when None.
            **attr: Edge attributes, for example ``cost``.

        Returns:
            The key of the new edge.

        Raises:
            ValueError: If an endpoint is missing or the key is taken.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        elif key in self._edges:
            raise ValueError(f"Edge with id '{key}' already exists.")
        elif isinstance(key, int) and key >= self._next_edge_id:
            self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self._succ[u_for_edge][v_for_edge][key],
        )
        return key

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Map every edge key to ``(source, target, key, attr)``."""
        return self._edges

    def get_edge(self, key: EdgeID) -> Edge:
        """Return the `Edge` record for a key.

        Raises:
            ValueError: If no edge has this key.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        src_node, dst_node, _, attr = self._edges[key]
        return Edge(src_node, dst_node, key, attr)

    def for_each_node(self, visitor: Callable[[NodeID], Any]) -> None:
        """Call ``visitor(node)`` once for every node, in insertion order."""
        for node in list(self._node):
            visitor(node)

    def incident_edges(
        self,
        node: NodeID,
        direction: Direction = Direction.OUT,
        edge_filter: Optional[Callable[[Edge], bool]] = None,
    ) -> List[Edge]:
        """Return edges incident to ``node`` in the given direction.

        Args:
            node: The node whose edges are enumerated.
            direction: ``Direction.OUT`` for edges whose source is ``node``,
                ``Direction.IN`` for edges whose target is ``node``.
            edge_filter: Optional predicate; edges for which it returns False
                are left out.

        Returns:
            List[Edge]: Matching edges in adjacency insertion order.

        Raises:
            ValueError: If the node does not exist or the direction is unknown.
        """
        if node not in self:
            raise ValueError(f"Node '{node}' does not exist.")

        edges: List[Edge] = []
        if direction == Direction.OUT:
            for nbr, keyed in self._succ[node].items():
                for key, attr in keyed.items():
                    edges.append(Edge(node, nbr, key, attr))
        elif direction == Direction.IN:
            for nbr, keyed in self._pred[node].items():
                for key, attr in keyed.items():
                    edges.append(Edge(nbr, node, key, attr))
        else:
            raise ValueError(f"Unknown direction: {direction!r}")

        if edge_filter is None:
            return edges
        return [e for e in edges if edge_filter(e)]
