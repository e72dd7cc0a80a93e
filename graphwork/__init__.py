"""Graph and tree algorithms over edge lists: traversal, union-find, shortest paths,
bridges and SCCs, cycles, walks, path MEX and LCA queries."""

__version__ = "0.1.0"
__all__ = ["connectivity", "cycles", "dsu", "lca", "mex", "shortest_path", "traversal", "walks"]