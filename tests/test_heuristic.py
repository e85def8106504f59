import pytest

from conftest import assert_valid_tour, random_matrix
from tsptour import (DisconnectedGraphError, DistanceMatrix, HeuristicTourSolver, TSPInstance,
                     TourResult, exhaustive_tour, heuristic_tour)


def test_four_cities(four_cities):
    res = heuristic_tour(four_cities)
    assert res == TourResult(cost=95, tour=(0, 1, 2, 3, 0))


def test_solver_keeps_tree_and_walk(four_cities):
    solver = HeuristicTourSolver(four_cities)
    solver.run()
    assert solver.tree.weight() == 45
    assert solver.walk == [0, 1, 0, 2, 0, 3, 0]


def test_single_city():
    res = heuristic_tour(DistanceMatrix([[0]]))
    assert res.tour == (0, 0)
    assert res.cost == 0


def test_two_cities_asymmetric():
    res = heuristic_tour(DistanceMatrix([[0, 5], [7, 0]]))
    assert res.tour == (0, 1, 0)
    assert res.cost == 12


def test_result_is_immutable(four_cities):
    res = heuristic_tour(four_cities)
    with pytest.raises(AttributeError):
        res.cost = 1


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("n", [2, 5, 12, 30])
def test_tour_visits_every_city_once(n, seed):
    D = TSPInstance.random_euclidean(n, seed=seed).distance_matrix()
    res = heuristic_tour(D)
    assert_valid_tour(D, res)


@pytest.mark.parametrize("seed", range(5))
def test_within_twice_the_tree_on_metric_instances(seed):
    inst = TSPInstance.random_euclidean(25, seed=seed)
    solver = HeuristicTourSolver(inst.distance_matrix())
    res = solver.run()
    assert res.cost == inst.tour_length(list(res.tour))
    assert res.cost <= 2 * solver.tree.weight()


@pytest.mark.parametrize("seed", range(8))
def test_never_beats_the_optimum(seed):
    D = TSPInstance.random_euclidean(7, seed=seed).distance_matrix()
    assert exhaustive_tour(D).cost <= heuristic_tour(D).cost


def test_deterministic():
    D = random_matrix(15, seed=3)
    assert heuristic_tour(D) == heuristic_tour(D)


def test_degenerate_city():
    D = DistanceMatrix([
        [0, 10, 0, 20],
        [10, 0, 0, 25],
        [0, 0, 0, 0],
        [20, 25, 0, 0],
    ])
    with pytest.raises(DisconnectedGraphError):
        heuristic_tour(D)


def test_zero_cost_edge_kept_when_asked():
    D = DistanceMatrix([[0, 0, 4], [0, 0, 3], [4, 3, 0]], missing=None)
    res = heuristic_tour(D)
    assert res.tour == (0, 1, 2, 0)
    assert res.cost == 7
