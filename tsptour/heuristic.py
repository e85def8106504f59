from __future__ import annotations
import logging
import time

from .errors import InvalidCityCountError
from .matrix import DistanceMatrix
from .mst import build_spanning_tree, compress_walk, walk_tree
from .tsp import TourResult

logger = logging.getLogger(__name__)


class HeuristicTourSolver:
    """Approximate tour from a minimum spanning tree walked depth-first and shortcut."""
    def __init__(self, dist_matrix: DistanceMatrix):
        self.D = dist_matrix
        self.n = len(dist_matrix)
        if self.n <= 0:
            raise InvalidCityCountError(f"number of cities must be positive, got {self.n}")
        self.tree = None
        self.walk = None
        self.elapsed_sec = 0.0

    def run(self) -> TourResult:
        start = time.perf_counter()
        self.tree = build_spanning_tree(self.D, start=0)
        self.walk = walk_tree(self.tree, start=0)
        cost, tour = compress_walk(self.walk, self.D)
        self.elapsed_sec = time.perf_counter() - start
        logger.debug("heuristic tour over %d cities: cost %d (tree weight %d)",
                     self.n, cost, self.tree.weight())
        return TourResult(cost=cost, tour=tour)


def heuristic_tour(dist_matrix: DistanceMatrix) -> TourResult:
    return HeuristicTourSolver(dist_matrix).run()
