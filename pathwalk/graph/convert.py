"""Graph conversion from NetworkX graphs to StrictMultiDiGraph.

Directed graphs keep their edge orientation. Undirected graphs are expanded so
that every undirected edge becomes one directed edge per orientation, which lets
a forward traversal move across it either way.
"""

from typing import Optional

import networkx as nx

from pathwalk.graph.strict_multidigraph import StrictMultiDiGraph
from pathwalk.logging import get_logger

logger = get_logger(__name__)


def from_networkx(
    nx_graph: nx.Graph,
    cost_attr: Optional[str] = None,
    default_cost: float = 1,
) -> StrictMultiDiGraph:
    """Convert any NetworkX graph to a StrictMultiDiGraph.

    Node attributes and edge attributes are copied. Parallel edges of multigraphs
    are preserved; their NetworkX keys are not, since StrictMultiDiGraph keys
    must be unique graph-wide.

    Args:
        nx_graph: A ``Graph``, ``DiGraph``, ``MultiGraph`` or ``MultiDiGraph``.
        cost_attr: If given, every edge lacking this attribute gets it set to
            ``default_cost``.
        default_cost: Value used to fill a missing ``cost_attr``.

    Returns:
        A new StrictMultiDiGraph.
    """
    graph = StrictMultiDiGraph()
    for node, data in nx_graph.nodes(data=True):
        graph.add_node(node, **dict(data))

    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        attr = dict(data)
        if cost_attr is not None:
            attr.setdefault(cost_attr, default_cost)
        graph.add_edge(u, v, **attr)
        if not directed and u != v:
            graph.add_edge(v, u, **dict(attr))

    logger.debug(
        "Converted %s with %d nodes and %d edges into %d directed edges",
        type(nx_graph).__name__,
        nx_graph.number_of_nodes(),
        nx_graph.number_of_edges(),
        len(graph.get_edges()),
    )
    return graph
