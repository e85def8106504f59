import itertools
import random

import pytest

from tsptour import DistanceMatrix

FOUR_CITIES = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]


@pytest.fixture
def four_cities():
    return DistanceMatrix(FOUR_CITIES)


def random_matrix(n, seed, symmetric=True, low=1, high=50):
    rng = random.Random(seed)
    rows = [[0]*n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            if symmetric and j < i:
                rows[i][j] = rows[j][i]
            else:
                rows[i][j] = rng.randint(low, high)
    return DistanceMatrix(rows)


def brute_force_cost(D):
    """Cheapest cycle over every ordering of cities 1..n-1."""
    n = len(D)
    best = None
    for rest in itertools.permutations(range(1, n)):
        tour = (0,) + rest + (0,)
        cost = D.tour_cost(tour)
        if cost is not None and (best is None or cost < best):
            best = cost
    return best


def assert_valid_tour(D, result):
    n = len(D)
    assert len(result.tour) == n + 1
    assert result.tour[0] == result.tour[-1] == 0
    assert sorted(result.tour[:-1]) == list(range(n))
    assert result.cost == D.tour_cost(result.tour)
