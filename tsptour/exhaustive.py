from __future__ import annotations
import logging
import math
import time
from dataclasses import dataclass
from typing import List, Optional

from .errors import DisconnectedGraphError, InvalidCityCountError, SearchTimeoutError
from .matrix import DistanceMatrix, NO_EDGE
from .permutations import SJTPermutations, half_steps
from .tsp import TourResult

logger = logging.getLogger(__name__)

# how many permutations are evaluated between clock checks
_CLOCK_EVERY = 1024


@dataclass
class ExhaustiveConfig:
    both_directions: bool = False      # enumerate reversed cycles too (asymmetric costs)
    max_cities: Optional[int] = None   # refuse larger instances
    time_limit: Optional[float] = None # seconds; None runs to completion


class ExhaustiveTourSolver:
    """Optimal tour by evaluating every cycle through city 0.

    Permutations of cities ``1..n-1`` come from the Steinhaus-Johnson-Trotter
    order. The first ``(n-1)!/2`` steps hold exactly one of each cycle and its
    reverse, which is all that is needed when costs are symmetric.
    """
    def __init__(self, dist_matrix: DistanceMatrix, cfg: Optional[ExhaustiveConfig] = None):
        self.D = dist_matrix
        self.n = len(dist_matrix)
        self.cfg = cfg or ExhaustiveConfig()
        if self.n <= 0:
            raise InvalidCityCountError(f"number of cities must be positive, got {self.n}")
        if self.cfg.max_cities is not None and self.n > self.cfg.max_cities:
            raise InvalidCityCountError(
                f"{self.n} cities exceeds the exhaustive search limit of {self.cfg.max_cities}")
        if self.cfg.time_limit is not None and self.cfg.time_limit <= 0:
            raise ValueError("time_limit must be positive.")

        self.n_steps = 0
        self.n_evaluated = 0
        self.history_best_costs: List[int] = []
        self.elapsed_sec = 0.0

    def total_steps(self) -> int:
        if self.cfg.both_directions:
            return math.factorial(self.n - 1) - 1 if self.n > 1 else 0
        return half_steps(self.n)

    def _cycle_cost(self, perm: List[int]) -> Optional[int]:
        D = self.D
        cost = 0
        prev = perm[-1]
        for city in perm:
            w = D.cost(prev, city)
            if w is NO_EDGE:
                return None
            cost += w
            prev = city
        return cost

    def run(self) -> TourResult:
        start = time.perf_counter()
        deadline = start + self.cfg.time_limit if self.cfg.time_limit is not None else None
        self.n_steps = 0
        self.n_evaluated = 0
        self.history_best_costs = []

        if not self.cfg.both_directions and not self.D.is_symmetric():
            logger.warning("matrix is asymmetric; reversed cycles are not evaluated")

        steps = self.total_steps()
        logger.debug("exhaustive search over %d cities: %d steps", self.n, steps)

        gen = SJTPermutations(self.n)
        best_cost = None
        best_perm = None
        for step in range(steps + 1):
            if step:
                gen.advance()
                self.n_steps += 1
                if deadline is not None and step % _CLOCK_EVERY == 0 and time.perf_counter() > deadline:
                    raise SearchTimeoutError(
                        f"exhaustive search stopped after {step} of {steps} steps "
                        f"({self.cfg.time_limit}s limit)")
            cost = self._cycle_cost(gen.perm)
            self.n_evaluated += 1
            if cost is not None and (best_cost is None or cost < best_cost):
                best_cost = cost
                best_perm = list(gen.perm)
                self.history_best_costs.append(cost)

        self.elapsed_sec = time.perf_counter() - start
        if best_perm is None:
            raise DisconnectedGraphError(f"no Hamiltonian cycle exists through all {self.n} cities")
        return TourResult(cost=best_cost, tour=best_perm + [best_perm[0]])


def exhaustive_tour(dist_matrix: DistanceMatrix, cfg: Optional[ExhaustiveConfig] = None) -> TourResult:
    return ExhaustiveTourSolver(dist_matrix, cfg).run()
