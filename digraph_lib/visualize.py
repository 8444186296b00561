import logging
from typing import Any, Optional

import networkx as nx

from .graph import WeightedDirectedGraph

logger = logging.getLogger(__name__)


def to_networkx(graph: WeightedDirectedGraph) -> nx.DiGraph:
    """
    Builds a networkx DiGraph with the same vertices and edges. Each edge
    weight is stored under the "weight" attribute.
    """
    G = nx.DiGraph()
    for u in graph.vertices():
        G.add_node(u)
    for u in graph.vertices():
        for v in graph.neighbors(u):
            weight, _ = graph.get_weight(u, v)
            G.add_edge(u, v, weight=weight)
    logger.debug("Converted graph with %d vertices and %d edges.", G.number_of_nodes(), G.number_of_edges())
    return G


def draw(graph: WeightedDirectedGraph, ax: Optional[Any] = None, title: str = "Graph Visualization (networkx)") -> Any:
    """
    Draws the graph with a circular layout and edge weight labels.

    Args:
        graph: The graph to draw.
        ax: Matplotlib axes to draw on. A new figure is created if omitted.
        title: Title of the axes.

    Returns:
        The axes the graph was drawn on.
    """
    import matplotlib.pyplot as plt

    G = to_networkx(graph)
    if ax is None:
        plt.figure(figsize=(6, 6))
        ax = plt.gca()

    pos = nx.circular_layout(G)
    nx.draw(
        G,
        pos,
        ax=ax,
        with_labels=True,
        node_color="lightblue",
        edge_color="gray",
        node_size=800,
        font_size=10,
        font_weight="bold",
        arrows=True,
    )
    nx.draw_networkx_edge_labels(G, pos, ax=ax, edge_labels=nx.get_edge_attributes(G, "weight"))
    ax.set_title(title)
    return ax
