"""
Graph-based poetry generator.

A corpus is turned into a word affinity graph: vertices are case-folded
words (runs of non-whitespace), and the weight of w1 -> w2 counts how often
w1 is immediately followed by w2 on the same line.

Given an input string, the poet inserts a bridge word b between each pair of
adjacent input words w1, w2 whenever w1 -> b -> w2 is a two-edge path in the
affinity graph, choosing the b with the heaviest w1 -> b edge. Input words
keep their case, bridge words are lower case, and every word is separated by
a single space.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from graph import Graph, empty_graph


logger = logging.getLogger(__name__)


class CorpusReadError(OSError):
    """The corpus could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read corpus {path}: {reason}")
        self.path = path


def read_corpus(path: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    """Read corpus lines from a text file."""
    path = Path(path)
    try:
        with path.open("r", encoding=encoding) as f:
            # line ends are \n, \r and \r\n only
            lines = [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise CorpusReadError(path, str(exc)) from exc
    logger.debug("read %d corpus lines from %s", len(lines), path)
    return lines


def tokenize(text: str) -> List[str]:
    """Split text on whitespace runs."""
    return text.split()


def build_affinity_graph(lines: Iterable[str], graph: Optional[Graph] = None) -> Graph:
    """
    Count same-line word adjacencies from lines into graph.

    Words are lower-cased before use. Adjacency never crosses a line break.
    A fresh edge-list graph is used when graph is None.
    """
    if graph is None:
        graph = empty_graph()

    line_count = 0
    for line in lines:
        line_count += 1
        words = [w.lower() for w in tokenize(line)]
        for w1, w2 in zip(words, words[1:]):
            graph.add(w1)
            graph.add(w2)
            graph.set(w1, w2, graph.targets(w1).get(w2, 0) + 1)

    logger.debug(
        "affinity graph built from %d lines: %d words", line_count, len(graph)
    )
    return graph


def find_bridge_word(graph: Graph, first: str, second: str) -> Optional[str]:
    """
    Best bridge b for first -> b -> second, or None.

    first and second must already be case-folded. Words missing from the
    graph simply have no bridges. Among equally heavy candidates the
    alphabetically first one wins.
    """
    vertices = graph.vertices()
    if first not in vertices or second not in vertices:
        return None

    outgoing = graph.targets(first)
    candidates = outgoing.keys() & graph.sources(second).keys()
    if not candidates:
        return None
    return max(sorted(candidates), key=outgoing.__getitem__)


class GraphPoet:
    """
    Bridge-word poet over a word affinity graph.

    The affinity graph is built once from the corpus lines and never changes
    afterwards.
    """

    def __init__(self, lines: Iterable[str], representation: str = "edges") -> None:
        self._graph = build_affinity_graph(lines, empty_graph(representation))

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        representation: str = "edges",
        encoding: str = "utf-8",
    ) -> "GraphPoet":
        """
        Build a poet from a corpus file.

        Raises:
            CorpusReadError: the file cannot be opened, read or decoded.
        """
        return cls(read_corpus(path, encoding=encoding), representation=representation)

    @property
    def graph(self) -> Graph:
        return self._graph

    def poem(self, text: str) -> str:
        """Insert bridge words between adjacent words of text."""
        words = tokenize(text)
        if not words:
            return ""

        out: List[str] = []
        for current, following in zip(words, words[1:]):
            out.append(current)
            bridge = find_bridge_word(self._graph, current.lower(), following.lower())
            if bridge is not None:
                logger.debug("bridge %r between %r and %r", bridge, current, following)
                out.append(bridge)
        out.append(words[-1])
        return " ".join(out)

    def __str__(self) -> str:
        return str(self._graph)
