from .graph import WeightedDirectedGraph

__all__ = ["WeightedDirectedGraph"]
