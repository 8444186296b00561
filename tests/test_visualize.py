import pytest
from digraph_lib.graph import WeightedDirectedGraph

nx = pytest.importorskip("networkx")

from digraph_lib.visualize import draw, to_networkx  # noqa: E402


def build_graph():
    g = WeightedDirectedGraph()
    for v in ["A", "B", "C", "D"]:
        g.add_vertex(v)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 2)
    g.add_edge("C", "A", 3)
    g.add_edge("A", "C", 4)
    return g


class TestToNetworkx:
    def test_nodes_and_edges(self):
        G = to_networkx(build_graph())
        assert isinstance(G, nx.DiGraph)
        assert set(G.nodes()) == {"A", "B", "C", "D"}
        assert G.number_of_edges() == 4
        assert G["A"]["C"]["weight"] == 4
        assert G.has_edge("C", "A")
        assert not G.has_edge("B", "A")

    def test_isolated_vertex_kept(self):
        G = to_networkx(build_graph())
        assert G.degree("D") == 0

    def test_empty_graph(self):
        G = to_networkx(WeightedDirectedGraph())
        assert G.number_of_nodes() == 0


class TestDraw:
    def test_draw_on_axes(self):
        matplotlib = pytest.importorskip("matplotlib")
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots()
        try:
            result = draw(build_graph(), ax=ax, title="test")
            assert result is ax
            assert ax.get_title() == "test"
        finally:
            plt.close(fig)
