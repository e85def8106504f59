"""Prim tree, depth-first walk and shortcut for the heuristic tour."""
from __future__ import annotations
import logging
from typing import Iterator, List, Tuple

from .errors import DisconnectedGraphError, InvalidCityCountError
from .matrix import DistanceMatrix, NO_EDGE

logger = logging.getLogger(__name__)


class SpanningTree:
    """Undirected tree over ``n`` vertices stored as a boolean adjacency matrix."""

    def __init__(self, n: int):
        self.n = n
        self.adj = [[False]*n for _ in range(n)]
        self.edges: List[Tuple[int, int, int]] = []

    def add_edge(self, u: int, v: int, weight: int):
        self.adj[u][v] = self.adj[v][u] = True
        self.edges.append((u, v, weight))

    def neighbors(self, v: int) -> Iterator[int]:
        row = self.adj[v]
        return (u for u in range(self.n) if row[u])

    def weight(self) -> int:
        return sum(w for _, _, w in self.edges)


def build_spanning_tree(D: DistanceMatrix, start: int = 0) -> SpanningTree:
    n = len(D)
    if n <= 0:
        raise InvalidCityCountError(f"number of cities must be positive, got {n}")
    tree = SpanningTree(n)
    included = [start]
    in_tree = [False]*n
    in_tree[start] = True

    for _ in range(n - 1):
        best = None
        for u in included:
            for v in range(n):
                if in_tree[v]:
                    continue
                w = D.cost(u, v)
                if w is NO_EDGE:
                    continue
                # strict < keeps the first minimum in scan order
                if best is None or w < best[2]:
                    best = (u, v, w)
        if best is None:
            missing = [v for v in range(n) if not in_tree[v]]
            raise DisconnectedGraphError(
                f"no edge joins the tree {sorted(included)} to cities {missing}")
        u, v, w = best
        in_tree[v] = True
        included.append(v)
        tree.add_edge(u, v, w)

    logger.debug("spanning tree over %d cities, weight %d", n, tree.weight())
    return tree


def walk_tree(tree: SpanningTree, start: int = 0) -> List[int]:
    """Depth-first walk that records a vertex on entry and after each child returns."""
    visited = [False]*tree.n
    visited[start] = True
    walk = [start]
    stack = [(start, tree.neighbors(start))]
    while stack:
        node, pending = stack[-1]
        for nxt in pending:
            if not visited[nxt]:
                visited[nxt] = True
                walk.append(nxt)
                stack.append((nxt, tree.neighbors(nxt)))
                break
        else:
            stack.pop()
            if stack:
                walk.append(stack[-1][0])
    return walk


def compress_walk(walk: List[int], D: DistanceMatrix) -> Tuple[int, List[int]]:
    """Shortcut repeated cities out of ``walk``; returns ``(cost, tour)``.

    The last walk element is always kept so the tour closes on its start. The
    cost is read from ``D`` for each consecutive pair of the shortened tour.
    """
    seen = set()
    tour: List[int] = []
    for city in walk:
        if city not in seen:
            seen.add(city)
            tour.append(city)
    tour.append(walk[-1])

    cost = 0
    for a, b in zip(tour, tour[1:]):
        w = D.cost(a, b)
        if w is NO_EDGE:
            raise DisconnectedGraphError(f"shortcut from city {a} to city {b} has no edge")
        cost += w
    return cost, tour
