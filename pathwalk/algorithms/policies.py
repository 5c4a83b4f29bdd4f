"""Default traversal policies and policy factories.

Each function here fits one of the function-valued fields of
`DijkstraOptions`. The defaults reproduce plain hop-count Dijkstra.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pathwalk.config import SEARCH_CONFIG
from pathwalk.types.base import Cost, EdgeLike


def unit_cost(edge: EdgeLike, cost_so_far: Cost) -> Cost:
    """Every edge costs 1."""
    return 1


def zero_heuristic(node: Any) -> Cost:
    """No lookahead."""
    return 0


def strictly_lower(
    prev_cost: Cost,
    new_cost: Cost,
    prev_edge: Optional[EdgeLike],
    candidate_edge: EdgeLike,
) -> bool:
    """Accept a candidate only when it is strictly cheaper.

    The edge arguments are ignored, so among equally cheap paths the first one
    found is kept.
    """
    return new_cost < prev_cost


def attr_cost(
    attr: Optional[str] = None, default: Cost = 1
) -> Callable[[Any, Cost], Cost]:
    """Create an edge-cost function reading a numeric edge attribute.

    Args:
        attr: Attribute name. Defaults to ``SEARCH_CONFIG.default_cost_attr``
            at the time the factory is called.
        default: Cost used for edges lacking the attribute.

    Returns:
        A callable ``(edge, cost_so_far) -> cost`` for edges exposing a
        ``get(name, default)`` method (such as `Edge`).
    """
    if attr is None:
        attr = SEARCH_CONFIG.default_cost_attr

    def _edge_cost(edge: Any, cost_so_far: Cost) -> Cost:
        return edge.get(attr, default)

    _edge_cost.__name__ = f"attr_cost_{attr}"
    return _edge_cost
