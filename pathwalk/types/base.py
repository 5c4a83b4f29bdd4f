"""Base aliases, enums and protocols shared by traversal algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Hashable, Iterable, Optional, Protocol, Union

#: Represents numeric cost of a traversal (e.g. hop count, distance, latency).
Cost = Union[int, float]

#: Any hashable object may identify a node.
NodeID = Hashable


class Direction(IntEnum):
    """Which incident edges a traversal follows from a node.

    ``OUT`` follows edges leaving the node (forward search); the neighbor is the
    edge target. ``IN`` follows edges entering the node (reverse search); the
    neighbor is the edge source.
    """

    OUT = 1
    IN = 2

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Parse a string into a Direction enum value.

        Args:
            value: Case-insensitive string name ("out" or "in").

        Returns:
            The corresponding Direction enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid direction '{value}'. Valid values are: {valid}"
            ) from None


class EdgeLike(Protocol):
    """Directed edge as consumed by traversal algorithms."""

    @property
    def source(self) -> NodeID: ...

    @property
    def target(self) -> NodeID: ...


class TraversableGraph(Protocol):
    """Read-only graph interface consumed by traversal algorithms."""

    def __contains__(self, node: object) -> bool: ...

    def for_each_node(self, visitor: Callable[[NodeID], Any]) -> None: ...

    def incident_edges(
        self,
        node: NodeID,
        direction: Direction = Direction.OUT,
        edge_filter: Optional[Callable[[EdgeLike], bool]] = None,
    ) -> Iterable[EdgeLike]: ...
