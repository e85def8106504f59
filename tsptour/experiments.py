from __future__ import annotations
import csv
import os
import statistics
from typing import Any, Dict, List, Optional, Sequence

from .exhaustive import ExhaustiveConfig, ExhaustiveTourSolver
from .heuristic import HeuristicTourSolver
from .tsp import TSPInstance


def cost_ratio(approx, best) -> float:
    """Heuristic cost over optimal cost; 1.0 when the optimum is free."""
    return approx.cost / best.cost if best.cost > 0 else 1.0


def run_repeated_trials(n: int, n_runs: int = 10, base_seed: int = 42, square_size: float = 100.0,
                        cfg: Optional[ExhaustiveConfig] = None):
    """Solve ``n_runs`` random Euclidean instances of ``n`` cities with both solvers."""
    ratios = []
    heuristic_times = []
    exhaustive_times = []
    details = []
    for r in range(n_runs):
        inst = TSPInstance.random_euclidean(n, seed=base_seed + r, square_size=square_size,
                                            name=f"random{n}_{base_seed + r}")
        D = inst.distance_matrix()
        heuristic = HeuristicTourSolver(D)
        approx = heuristic.run()
        exhaustive = ExhaustiveTourSolver(D, cfg)
        best = exhaustive.run()
        ratios.append(cost_ratio(approx, best))
        heuristic_times.append(heuristic.elapsed_sec)
        exhaustive_times.append(exhaustive.elapsed_sec)
        details.append((inst, approx, best))
    stats = {
        "n": n,
        "mean_ratio": statistics.mean(ratios),
        "std_ratio": statistics.stdev(ratios) if len(ratios) > 1 else 0.0,
        "min_ratio": min(ratios),
        "max_ratio": max(ratios),
        "median_ratio": statistics.median(ratios),
        "mean_heuristic_time": statistics.mean(heuristic_times),
        "mean_exhaustive_time": statistics.mean(exhaustive_times),
        "n_runs": n_runs,
    }
    return stats, details


def run_size_sweep(sizes: Sequence[int], n_runs: int = 5, base_seed: int = 100,
                   csv_path: Optional[str] = None, **kwargs) -> List[Dict[str, Any]]:
    rows = []
    for n in sizes:
        row, _ = run_repeated_trials(n, n_runs=n_runs, base_seed=base_seed, **kwargs)
        rows.append(row)
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=row.keys())
                if write_header:
                    w.writeheader()
                w.writerow(row)
    return rows
