"""
Adjacency-map graph implementation.

Implements the Graph interface with one record per vertex, each holding
weighted incoming and outgoing adjacency maps. Records live in an arena
keyed by label and refer to their neighbours by label, never by record.
"""

from typing import Dict, Set

from graph import Graph, UnknownVertexError, check_weight


class VertexRecord:
    """
    One vertex and its weighted adjacency.

    sources maps incoming neighbour label -> weight, targets maps outgoing
    neighbour label -> weight. Internal to AdjacencyMapGraph; the graph keeps
    both sides of every edge in step through _link()/_unlink().
    """

    __slots__ = ("label", "_sources", "_targets")

    def __init__(self, label: str) -> None:
        self.label = label
        self._sources: Dict[str, int] = {}
        self._targets: Dict[str, int] = {}

    def sources(self) -> Dict[str, int]:
        return dict(self._sources)

    def targets(self) -> Dict[str, int]:
        return dict(self._targets)

    def set_target(self, label: str, weight: int) -> int:
        """Write the outgoing entry; returns the previous weight or 0."""
        previous = self._targets.get(label, 0)
        self._targets[label] = weight
        return previous

    def set_source(self, label: str, weight: int) -> int:
        """Write the incoming entry; returns the previous weight or 0."""
        previous = self._sources.get(label, 0)
        self._sources[label] = weight
        return previous

    def drop_target(self, label: str) -> int:
        return self._targets.pop(label, 0)

    def drop_source(self, label: str) -> int:
        return self._sources.pop(label, 0)

    def __str__(self) -> str:
        out = ", ".join(f"{t} ({w})" for t, w in self._targets.items())
        return f"{self.label} -> [{out}]"


class AdjacencyMapGraph(Graph):
    """
    Directed, weighted graph backed by per-vertex incoming/outgoing maps.

    Rep invariant:
        - arena keys equal their record's label
        - every adjacency key names a record in the arena
        - u.targets[v] == w  iff  v.sources[u] == w, with w a non-negative int
    """

    def __init__(self) -> None:
        self._records: Dict[str, VertexRecord] = {}
        self._check_rep()

    def _check_rep(self) -> None:
        for label, record in self._records.items():
            assert record.label == label, (label, record.label)
            for target, weight in record.targets().items():
                assert target in self._records, (label, target)
                assert isinstance(weight, int) and weight >= 0, (label, target, weight)
                assert self._records[target].sources().get(label) == weight, (label, target)
            for source, weight in record.sources().items():
                assert source in self._records, (source, label)
                assert self._records[source].targets().get(label) == weight, (source, label)

    def _record(self, vertex: str) -> VertexRecord:
        try:
            return self._records[vertex]
        except KeyError:
            raise UnknownVertexError(vertex) from None

    @staticmethod
    def _link(src: VertexRecord, dst: VertexRecord, weight: int) -> int:
        previous = src.set_target(dst.label, weight)
        dst.set_source(src.label, weight)
        return previous

    @staticmethod
    def _unlink(src: VertexRecord, dst: VertexRecord) -> int:
        previous = src.drop_target(dst.label)
        dst.drop_source(src.label)
        return previous

    # --- Graph interface -----------------------------------------------------

    def add(self, vertex: str) -> bool:
        if vertex in self._records:
            return False
        self._records[vertex] = VertexRecord(vertex)
        self._check_rep()
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        check_weight(weight)
        src = self._record(source)
        dst = self._record(target)

        # zero weight never creates an edge
        if weight == 0 and dst.label not in src.targets():
            return 0
        previous = self._link(src, dst, weight)
        self._check_rep()
        return previous

    def remove(self, vertex: str) -> bool:
        record = self._records.get(vertex)
        if record is None:
            return False

        for label in record.sources():
            self._unlink(self._records[label], record)
        for label in record.targets():
            self._unlink(record, self._records[label])
        del self._records[vertex]

        self._check_rep()
        return True

    def vertices(self) -> Set[str]:
        return set(self._records)

    def sources(self, target: str) -> Dict[str, int]:
        return self._record(target).sources()

    def targets(self, source: str) -> Dict[str, int]:
        return self._record(source).targets()

    def __str__(self) -> str:
        return "".join(f"{record}\n" for record in self._records.values())
