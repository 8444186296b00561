import io
import logging
import sys
from typing import Dict, Generic, List, Optional, TextIO, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")
W = TypeVar("W")

BANNER_TOP = "*" * 51
BANNER_TITLE = "********************* GRAPH ***********************"
BANNER_BOTTOM = "*" * 50


class WeightedDirectedGraph(Generic[V, W]):
    """
    A weighted directed graph mapping each vertex to its outgoing edges.

    Vertices must be hashable and ordered among themselves; every listing
    (vertices, neighbors, dump) is in ascending vertex order. Vertices and
    edges can only be added. A missing vertex or edge is reported through
    the return value, never by raising.
    """

    def __init__(self, max_vertices: Optional[int] = None) -> None:
        """
        Args:
            max_vertices: Optional capacity. None (the default) means the
                graph is unbounded.

        Raises:
            ValueError: If max_vertices is not a non-negative integer.
        """
        if max_vertices is not None:
            if isinstance(max_vertices, bool) or not isinstance(max_vertices, int):
                raise ValueError(f"max_vertices must be an integer, got {max_vertices!r}.")
            if max_vertices < 0:
                raise ValueError(f"max_vertices must be non-negative, got {max_vertices}.")
        self._max_vertices = max_vertices
        self._adjacency_list: Dict[V, Dict[V, W]] = {}  # vertex -> {destination: weight}

    @property
    def max_vertices(self) -> Optional[int]:
        return self._max_vertices

    def size(self) -> int:
        """Returns the number of vertices in the graph."""
        return len(self._adjacency_list)

    def edge_count(self) -> int:
        """Returns the number of edges in the graph."""
        count = 0
        for vertex in self._adjacency_list:
            count += len(self._adjacency_list[vertex])
        return count

    def has_vertex(self, vertex: V) -> bool:
        return vertex in self._adjacency_list

    def add_vertex(self, vertex: V) -> bool:
        """
        Adds a vertex with no outgoing edges.

        Args:
            vertex: The vertex to add.

        Returns:
            True if the vertex was added, False if it already exists or the
            graph is at capacity.
        """
        if vertex in self._adjacency_list:
            logger.debug("Vertex %s already exists.", vertex)
            return False
        if self._max_vertices is not None and len(self._adjacency_list) >= self._max_vertices:
            logger.debug("Graph is full (%d vertices), %s not added.", self._max_vertices, vertex)
            return False
        self._adjacency_list[vertex] = {}
        return True

    def add_edge(self, u: V, v: V, weight: W) -> bool:
        """
        Adds a directed edge from u to v. If the edge already exists its
        weight is overwritten.

        Args:
            u: The starting vertex of the edge.
            v: The ending vertex of the edge.
            weight: The weight of the edge.

        Returns:
            True if the edge was stored, False if either vertex does not exist.
        """
        if u not in self._adjacency_list or v not in self._adjacency_list:
            logger.debug("Edge (%s,%s) not added: missing endpoint.", u, v)
            return False
        self._adjacency_list[u][v] = weight
        return True

    def get_weight(self, u: V, v: V) -> Tuple[Optional[W], bool]:
        """
        Looks up the weight of the edge from u to v.

        Returns:
            A (weight, found) pair. When found is False the weight is None
            and carries no meaning.
        """
        if u not in self._adjacency_list or v not in self._adjacency_list:
            return None, False
        edges = self._adjacency_list[u]
        if v not in edges:
            return None, False
        return edges[v], True

    def neighbors(self, vertex: V) -> List[V]:
        """
        Returns the destinations of the outgoing edges of a vertex in
        ascending order.

        An absent vertex yields an empty list, the same as a vertex without
        outgoing edges. Use has_vertex() to tell the two apart.
        """
        return sorted(self._adjacency_list.get(vertex, {}))

    def vertices(self) -> List[V]:
        """Returns all vertices in ascending order."""
        return sorted(self._adjacency_list)

    def dump(self, output: Optional[TextIO] = None) -> None:
        """
        Writes a human readable report of the graph for debugging.

        Args:
            output: Text stream to write to, sys.stdout by default.
        """
        if output is None:
            output = sys.stdout
        ordered = self.vertices()

        output.write(BANNER_TOP + "\n")
        output.write(BANNER_TITLE + "\n")
        output.write(f"**Num vertices: {self.size()}\n")
        output.write(f"**Num edges: {self.edge_count()}\n")

        output.write("\n")
        output.write("**Vertices:\n")
        for index, vertex in enumerate(ordered):
            output.write(f" {index}. {vertex}\n")

        output.write("\n")
        output.write("**Edges:\n")
        for u in ordered:
            edges = self._adjacency_list[u]
            output.write("".join(f" ({u},{v},{edges[v]})" for v in sorted(edges)))
            output.write("\n")
        output.write(BANNER_BOTTOM + "\n")

    def dumps(self) -> str:
        """Returns the dump() report as a string."""
        buffer = io.StringIO()
        self.dump(buffer)
        return buffer.getvalue()

    def __contains__(self, vertex: V) -> bool:
        """Checks if a vertex exists in the graph."""
        return vertex in self._adjacency_list

    def __len__(self) -> int:
        """Returns the number of vertices in the graph."""
        return len(self._adjacency_list)

    def __str__(self) -> str:
        return self.dumps()
