"""Step-wise Dijkstra traversal exposed as a resumable iterator.

`DijkstraIterator` runs a single-source label-correcting search one settled
node at a time. Each call to ``advance()`` pops the cheapest node from a
`PriorityFrontier`, settles it, relaxes its incident edges and returns it, so
callers can stop early (for example once a target is settled), interleave
several traversals, or inspect the frontier between steps.

Notes:
    Every node moves through the states UNVISITED -> REACHED -> SETTLED and
    never regresses. State is held in a side map owned by the iterator. With
    ``state_key`` set, each `NodeState` is additionally published on the
    graph's node attribute dict under that key (stale tags under the same key
    are cleared when a traversal starts), which requires a networkx-style
    ``graph.nodes[node]`` mapping.

    Candidate costs are ``total_cost + edge_cost(edge, total_cost) +
    heuristic(neighbor)`` where ``total_cost`` is the settled node's frontier
    key. Negative edge costs or an overestimating heuristic are not detected;
    they silently break the settle-order guarantee.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any, Callable, Dict, Iterator, Optional

from pathwalk.algorithms.frontier import PriorityFrontier
from pathwalk.algorithms.policies import strictly_lower, unit_cost, zero_heuristic
from pathwalk.config import SEARCH_CONFIG
from pathwalk.logging import get_logger
from pathwalk.types.base import Cost, Direction, EdgeLike, NodeID, TraversableGraph

logger = get_logger(__name__)

UpdatePolicy = Callable[[Cost, Cost, Optional[EdgeLike], EdgeLike], bool]
EdgeCostFunc = Callable[[EdgeLike, Cost], Cost]
HeuristicFunc = Callable[[NodeID], Cost]
ReachCallback = Callable[[NodeID, Optional[EdgeLike], Cost], Any]
SettleCallback = Callable[[NodeID], Any]
EdgeFilter = Callable[[EdgeLike], bool]


class NodeStatus(IntEnum):
    """Traversal state of a node."""

    #: Never reached; such nodes have no `NodeState`.
    UNVISITED = 0
    #: Queued in the frontier with a tentative cost.
    REACHED = 1
    #: Popped from the frontier; cost and incoming edge are final.
    SETTLED = 2


@dataclass
class NodeState:
    """Per-node traversal record.

    Attributes:
        status: REACHED or SETTLED.
        cost: Best known cost from the source.
        incoming_edge: Edge that produced ``cost``; None for the source.
    """

    status: NodeStatus
    cost: Cost
    incoming_edge: Optional[EdgeLike] = None


@dataclass
class DijkstraOptions:
    """Traversal policy for a `DijkstraIterator`.

    Attributes:
        direction: Follow out-edges (forward search) or in-edges (reverse
            search). Strings "out"/"in" are accepted. Defaults to
            ``SEARCH_CONFIG.default_direction``.
        should_update_key: ``(prev_cost, new_cost, prev_edge, candidate_edge)``
            deciding whether a REACHED node takes the candidate path.
        edge_cost: ``(edge, cost_so_far)`` returning the cost of one edge.
        heuristic: ``(node)`` returning an additive lookahead estimate.
        on_reach: Called as ``(node, incoming_edge, cost)`` on every reach,
            including re-reaches after a key update.
        on_settle: Called as ``(node)`` when a node is settled.
        edge_filter: Predicate excluding edges from relaxation.
        state_key: Node attribute name under which node states are published
            on the graph; None keeps state private to the iterator.
    """

    direction: Direction = field(
        default_factory=lambda: SEARCH_CONFIG.default_direction
    )
    should_update_key: UpdatePolicy = strictly_lower
    edge_cost: EdgeCostFunc = unit_cost
    heuristic: HeuristicFunc = zero_heuristic
    on_reach: Optional[ReachCallback] = None
    on_settle: Optional[SettleCallback] = None
    edge_filter: Optional[EdgeFilter] = None
    state_key: Optional[str] = None

    def __post_init__(self) -> None:
        """Coerce string directions and validate policy fields."""
        if isinstance(self.direction, str):
            self.direction = Direction.from_string(self.direction)
        elif not isinstance(self.direction, Direction):
            raise ValueError(f"Invalid direction: {self.direction!r}")
        for name in ("should_update_key", "edge_cost", "heuristic"):
            if not callable(getattr(self, name)):
                raise ValueError(f"Option '{name}' must be callable.")
        for name in ("on_reach", "on_settle", "edge_filter"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ValueError(f"Option '{name}' must be callable or None.")


@dataclass(frozen=True)
class StepResult:
    """Outcome of one ``advance()`` call.

    Attributes:
        done: True once the frontier is exhausted.
        value: The node settled by this step; None when ``done``.
    """

    done: bool
    value: Any = None


class DijkstraIterator:
    """Resumable single-source shortest-path traversal.

    Example:
        it = DijkstraIterator(graph, "A", edge_cost=attr_cost("cost"))
        for node in it:
            if node == "D":
                break
        cost_to_d = it.cost("D")
    """

    def __init__(
        self,
        graph: TraversableGraph,
        source: NodeID,
        options: Optional[DijkstraOptions] = None,
        **overrides: Any,
    ) -> None:
        """Prepare a traversal and reach the source with cost 0.

        Args:
            graph: Graph exposing ``for_each_node`` and ``incident_edges``.
            source: Start node.
            options: Traversal policy; defaults to ``DijkstraOptions()``.
            **overrides: Option fields replacing those of ``options``.

        Raises:
            TypeError: If an override names an unknown option.
            KeyError: If source validation is enabled and ``source`` is not in
                the graph.
        """
        opts = options if options is not None else DijkstraOptions()
        if overrides:
            opts = replace(opts, **overrides)

        if SEARCH_CONFIG.validate_source and source not in graph:
            raise KeyError(f"Source node '{source}' is not in the graph.")

        self._graph = graph
        self._source = source
        self._options = opts
        self._frontier = PriorityFrontier()
        self._states: Dict[NodeID, NodeState] = {}
        self._settled_count = 0
        self._finished = False

        self._init_traversal()

    #
    # Node-state bookkeeping
    #
    def _clear_tags(self) -> None:
        key = self._options.state_key
        nodes = self._graph.nodes  # type: ignore[attr-defined]
        self._graph.for_each_node(lambda n: nodes[n].pop(key, None))

    def _reach(self, node: NodeID, edge: Optional[EdgeLike], cost: Cost) -> None:
        state = self._states.get(node)
        if state is None:
            state = NodeState(NodeStatus.REACHED, cost, edge)
            self._states[node] = state
            if self._options.state_key is not None:
                self._graph.nodes[node][self._options.state_key] = state  # type: ignore[attr-defined]
        else:
            state.cost = cost
            state.incoming_edge = edge

        if self._options.on_reach is not None:
            self._options.on_reach(node, edge, cost)

    def _settle(self, node: NodeID) -> None:
        self._states[node].status = NodeStatus.SETTLED
        self._settled_count += 1
        if self._options.on_settle is not None:
            self._options.on_settle(node)

    def _init_traversal(self) -> None:
        if self._options.state_key is not None:
            self._clear_tags()
        logger.debug(
            "Starting traversal from %r (direction=%s, state_key=%r)",
            self._source,
            self._options.direction.name,
            self._options.state_key,
        )
        self._frontier.insert(self._source, 0)
        self._reach(self._source, None, 0)

    #
    # Stepping
    #
    def advance(self) -> StepResult:
        """Settle the next cheapest node and relax its edges.

        Returns:
            ``StepResult(done=False, value=node)`` for the settled node, or
            ``StepResult(done=True)`` once the frontier is empty. Calls after
            exhaustion keep returning the done result without side effects.
        """
        if self._frontier.count == 0:
            if not self._finished:
                self._finished = True
                logger.debug(
                    "Traversal from %r exhausted after settling %d nodes",
                    self._source,
                    self._settled_count,
                )
            return StepResult(done=True)

        opts = self._options
        forward = opts.direction == Direction.OUT

        entry = self._frontier.pop()
        u = entry.item
        total_cost = entry.key
        self._settle(u)

        for edge in self._graph.incident_edges(u, opts.direction, opts.edge_filter):
            v = edge.target if forward else edge.source
            candidate = total_cost + opts.edge_cost(edge, total_cost) + opts.heuristic(v)
            state = self._states.get(v)

            if state is None:
                self._frontier.insert(v, candidate)
                self._reach(v, edge, candidate)
            elif state.status == NodeStatus.REACHED:
                if opts.should_update_key(state.cost, candidate, state.incoming_edge, edge):
                    self._frontier.update_key(v, candidate)
                    self._reach(v, edge, candidate)

        return StepResult(done=False, value=u)

    def __iter__(self) -> Iterator[NodeID]:
        return self

    def __next__(self) -> NodeID:
        step = self.advance()
        if step.done:
            raise StopIteration
        return step.value

    #
    # Read-only inspection
    #
    def node_state(self, node: NodeID) -> Optional[NodeState]:
        """Return the state record of ``node``, or None if never reached."""
        return self._states.get(node)

    def status(self, node: NodeID) -> NodeStatus:
        state = self._states.get(node)
        return NodeStatus.UNVISITED if state is None else state.status

    def cost(self, node: NodeID) -> Cost:
        """Best known cost of a reached node.

        Raises:
            KeyError: If ``node`` has not been reached.
        """
        return self._require_state(node).cost

    def incoming_edge(self, node: NodeID) -> Optional[EdgeLike]:
        """Edge that produced the best known cost; None for the source.

        Raises:
            KeyError: If ``node`` has not been reached.
        """
        return self._require_state(node).incoming_edge

    def _require_state(self, node: NodeID) -> NodeState:
        state = self._states.get(node)
        if state is None:
            raise KeyError(f"Node '{node}' has not been reached.")
        return state

    @property
    def graph(self) -> TraversableGraph:
        return self._graph

    @property
    def source(self) -> NodeID:
        return self._source

    @property
    def direction(self) -> Direction:
        return self._options.direction

    @property
    def options(self) -> DijkstraOptions:
        return self._options

    @property
    def settled_count(self) -> int:
        return self._settled_count

    @property
    def frontier_size(self) -> int:
        return self._frontier.count

    @property
    def done(self) -> bool:
        """True when the frontier is empty and ``advance()`` would finish."""
        return self._frontier.count == 0
