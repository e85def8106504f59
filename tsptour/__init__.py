from .errors import TourError, MalformedMatrixError, DisconnectedGraphError, InvalidCityCountError, SearchTimeoutError
from .matrix import DistanceMatrix, NO_EDGE, parse_matrix, load_matrix
from .tsp import TSPInstance, TourResult
from .heuristic import HeuristicTourSolver, heuristic_tour
from .exhaustive import ExhaustiveConfig, ExhaustiveTourSolver, exhaustive_tour
from .experiments import run_repeated_trials, run_size_sweep
