"""Path reconstruction and one-shot helpers built on `DijkstraIterator`.

The iterator only records, for every reached node, the edge that produced its
best cost. The functions here follow those records back to the source, or
drive an iterator to completion for callers who want a whole result at once.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pathwalk.algorithms.dijkstra import DijkstraIterator, DijkstraOptions
from pathwalk.logging import get_logger
from pathwalk.model.path import Path
from pathwalk.types.base import Cost, Direction, EdgeLike, NodeID, TraversableGraph

logger = get_logger(__name__)


def _predecessor(edge: EdgeLike, direction: Direction) -> NodeID:
    # Reverse searches walk edges against their orientation.
    return edge.source if direction == Direction.OUT else edge.target


def edges_to(it: DijkstraIterator, node: NodeID) -> List[EdgeLike]:
    """Return the recorded edges from the traversal source to ``node``.

    Works for REACHED nodes too, in which case the path is the best one known
    so far.

    Raises:
        KeyError: If ``node`` has not been reached.
    """
    edges: List[EdgeLike] = []
    edge = it.incoming_edge(node)
    while edge is not None:
        edges.append(edge)
        edge = it.incoming_edge(_predecessor(edge, it.direction))
    edges.reverse()
    return edges


def nodes_to(it: DijkstraIterator, node: NodeID) -> List[NodeID]:
    """Return the recorded node sequence from the traversal source to ``node``.

    Raises:
        KeyError: If ``node`` has not been reached.
    """
    nodes = [node]
    edge = it.incoming_edge(node)
    while edge is not None:
        prev = _predecessor(edge, it.direction)
        nodes.append(prev)
        edge = it.incoming_edge(prev)
    nodes.reverse()
    return nodes


def path_to(it: DijkstraIterator, node: NodeID) -> Path:
    """Build a `Path` from the traversal source to ``node``.

    Raises:
        KeyError: If ``node`` has not been reached.
    """
    nodes = nodes_to(it, node)
    return Path(
        nodes=tuple(nodes),
        edges=tuple(edges_to(it, node)),
        costs=tuple(it.cost(n) for n in nodes),
    )


def shortest_path(
    graph: TraversableGraph,
    src_node: NodeID,
    dst_node: NodeID,
    options: Optional[DijkstraOptions] = None,
    **overrides: Any,
) -> Optional[Path]:
    """Find a cheapest path, stopping as soon as ``dst_node`` is settled.

    With ``direction=IN`` the returned path runs from ``src_node`` to
    ``dst_node`` against edge orientation.

    Args:
        graph: Graph to search.
        src_node: Source node.
        dst_node: Destination node.
        options: Traversal policy.
        **overrides: Option fields replacing those of ``options``.

    Returns:
        The path, or None if ``dst_node`` is unreachable.

    Raises:
        KeyError: If source validation is enabled and ``src_node`` is not in
            the graph.
    """
    it = DijkstraIterator(graph, src_node, options, **overrides)
    for node in it:
        if node == dst_node:
            return path_to(it, dst_node)

    logger.debug("No path from %r to %r", src_node, dst_node)
    return None


def spf(
    graph: TraversableGraph,
    src_node: NodeID,
    options: Optional[DijkstraOptions] = None,
    **overrides: Any,
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, Optional[EdgeLike]]]:
    """Drain a traversal and return its settle costs and incoming edges.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each settled node to its settle cost, in settle order.
          - pred: Maps each settled node to its incoming edge (None for the
            source).
    """
    it = DijkstraIterator(graph, src_node, options, **overrides)
    costs: Dict[NodeID, Cost] = {}
    pred: Dict[NodeID, Optional[EdgeLike]] = {}
    for node in it:
        costs[node] = it.cost(node)
        pred[node] = it.incoming_edge(node)
    return costs, pred
