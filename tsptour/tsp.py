from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import List, Tuple, Optional

from .matrix import DistanceMatrix


@dataclass(frozen=True)
class TourResult:
    cost: int
    tour: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "tour", tuple(self.tour))

    def n_cities(self) -> int:
        return len(self.tour) - 1


@dataclass
class TSPInstance:
    coords: List[Tuple[float, float]]
    name: str = "euclidean_tsp"

    @classmethod
    def random_euclidean(cls, n: int, seed: Optional[int] = None, square_size: float = 100.0,
                         name: Optional[str] = None) -> "TSPInstance":
        """Cities drawn uniformly from a square; the same seed gives the same cities."""
        rng = random.Random(seed)
        coords = []
        for _ in range(n):
            x = rng.uniform(0, square_size)
            coords.append((x, rng.uniform(0, square_size)))
        return cls(coords=coords, name=name or f"euclidean{n}_seed{seed}")

    def n_cities(self) -> int:
        return len(self.coords)

    def distance(self, i: int, j: int) -> int:
        # rounded up so distinct cities never get the zero "no edge" cost
        (x1, y1), (x2, y2) = self.coords[i], self.coords[j]
        return max(1, math.ceil(math.hypot(x1 - x2, y1 - y2)))

    def distance_matrix(self) -> DistanceMatrix:
        n = self.n_cities()
        D = [[0]*n for _ in range(n)]
        for i in range(n):
            for j in range(i+1, n):
                d = self.distance(i, j)
                D[i][j] = D[j][i] = d
        return DistanceMatrix(D)

    def tour_length(self, tour: List[int]) -> int:
        """Length of a closed tour (first city repeated at the end)."""
        dist = 0
        for i, j in zip(tour, tour[1:]):
            dist += self.distance(i, j)
        return dist
