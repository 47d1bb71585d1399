"""
Directed, weighted graph abstraction over string vertex labels.

Vertices are case-sensitive strings.
Edges are directed: source -> target with a non-negative int weight, at most
one per ordered pair. Self-edges are allowed.

Every accessor returns a fresh copy; callers never see internal storage.
"""

from abc import ABC, abstractmethod
from typing import Dict, Set


REPRESENTATIONS = ("edges", "vertices")


class UnknownVertexError(ValueError):
    """Raised when an operation names a vertex that is not in the graph."""

    def __init__(self, vertex: str) -> None:
        super().__init__(f"vertex not in graph: {vertex!r}")
        self.vertex = vertex


def check_weight(weight: int) -> None:
    """Reject anything that is not a non-negative int (bools included)."""
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"edge weight must be an int, got {type(weight).__name__}")
    if weight < 0:
        raise ValueError(f"edge weight must be non-negative, got {weight}")


class Graph(ABC):
    """Mutable directed, weighted graph with string vertex labels."""

    @abstractmethod
    def add(self, vertex: str) -> bool:
        """
        Add a vertex with no edges.

        Returns True if the vertex was added, False if it was already present.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: str, target: str, weight: int) -> int:
        """
        Create or update the edge source -> target.

        An existing edge has its weight replaced in place, zero included.
        A missing edge is created for a positive weight; a zero weight on a
        missing edge is a no-op.
        Both vertices must already be in the graph.

        Returns:
            The previous weight of the edge, or 0 if there was no edge.

        Raises:
            UnknownVertexError: source or target is not in the graph.
            ValueError: weight is not a non-negative int.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: str) -> bool:
        """
        Remove a vertex and every edge into or out of it.

        Returns True if the vertex was present, False otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Set[str]:
        """Return a snapshot of all vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: str) -> Dict[str, int]:
        """
        Incoming neighbours of target and their edge weights.

        Returns: dict[source label, weight]
        Raises: UnknownVertexError if target is not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: str) -> Dict[str, int]:
        """
        Outgoing neighbours of source and their edge weights.

        Returns: dict[target label, weight]
        Raises: UnknownVertexError if source is not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices()

    def __len__(self) -> int:
        return len(self.vertices())


def empty_graph(representation: str = "edges") -> Graph:
    """
    Build an empty graph backed by the named representation.

    "edges" gives an EdgeListGraph, "vertices" an AdjacencyMapGraph. Both
    behave identically through the Graph interface.
    """
    # Local imports: the concrete modules import Graph from here.
    if representation == "edges":
        from edge_list_graph import EdgeListGraph

        return EdgeListGraph()
    if representation == "vertices":
        from adjacency_map_graph import AdjacencyMapGraph

        return AdjacencyMapGraph()
    raise ValueError(
        f"unknown graph representation {representation!r}; "
        f"expected one of {', '.join(REPRESENTATIONS)}"
    )
