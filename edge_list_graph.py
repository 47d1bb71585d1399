"""
Edge-list graph implementation.

Implements the Graph interface with a flat set of vertex labels and a flat
list of directed edge records. Lookups scan the edge list, so every edge
query is O(E); intended for small graphs.
"""

from dataclasses import dataclass
from typing import Dict, List, Set

from graph import Graph, UnknownVertexError, check_weight


@dataclass
class Edge:
    """
    Directed edge record source -> target.

    Internal to EdgeListGraph; weight is updated in place by set().
    """
    source: str
    target: str
    weight: int

    def __str__(self) -> str:
        return f"({self.source} -> {self.target}, {self.weight})"


class EdgeListGraph(Graph):
    """
    Directed, weighted graph backed by a vertex set and an edge list.

    Rep invariant:
        - every edge endpoint is in _vertices
        - every edge weight is a non-negative int
        - no two edges share the same (source, target)
    """

    def __init__(self) -> None:
        self._vertices: Set[str] = set()
        self._edges: List[Edge] = []
        self._check_rep()

    def _check_rep(self) -> None:
        seen = set()
        for edge in self._edges:
            assert edge.source in self._vertices, edge
            assert edge.target in self._vertices, edge
            assert isinstance(edge.weight, int) and edge.weight >= 0, edge
            key = (edge.source, edge.target)
            assert key not in seen, f"duplicate edge {key}"
            seen.add(key)

    def _require(self, vertex: str) -> None:
        if vertex not in self._vertices:
            raise UnknownVertexError(vertex)

    # --- Graph interface -----------------------------------------------------

    def add(self, vertex: str) -> bool:
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        self._check_rep()
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        check_weight(weight)
        self._require(source)
        self._require(target)

        for edge in self._edges:
            if edge.source == source and edge.target == target:
                previous = edge.weight
                edge.weight = weight
                self._check_rep()
                return previous

        # zero weight never creates an edge
        if weight > 0:
            self._edges.append(Edge(source, target, weight))
            self._check_rep()
        return 0

    def remove(self, vertex: str) -> bool:
        if vertex not in self._vertices:
            return False
        self._vertices.discard(vertex)
        self._edges = [
            e for e in self._edges if e.source != vertex and e.target != vertex
        ]
        self._check_rep()
        return True

    def vertices(self) -> Set[str]:
        return set(self._vertices)

    def sources(self, target: str) -> Dict[str, int]:
        self._require(target)
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: str) -> Dict[str, int]:
        self._require(source)
        return {e.target: e.weight for e in self._edges if e.source == source}

    def __str__(self) -> str:
        edges = ", ".join(str(e) for e in self._edges)
        return f"Graph with vertices: {sorted(self._vertices)} and edges: [{edges}]"
