# run_experiments.py
import os, json, argparse
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from tsptour import ExhaustiveConfig
from tsptour.experiments import cost_ratio, run_repeated_trials, run_size_sweep

OUTDIR = os.path.dirname(__file__)


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_scatter(details_by_n, save_path):
    plt.figure()
    sizes = list(details_by_n.keys())
    for i, n in enumerate(sizes, start=1):
        ratios = [cost_ratio(approx, best) for (inst, approx, best) in details_by_n[n]]
        x = np.random.normal(loc=i, scale=0.03, size=len(ratios))
        plt.plot(x, ratios, "o")
    plt.axhline(1.0, color="grey", linewidth=0.8)
    plt.xticks(range(1, len(sizes) + 1), [str(n) for n in sizes])
    plt.xlabel("Number of cities")
    plt.ylabel("Heuristic cost / optimal cost")
    plt.title("MST heuristic against exhaustive search")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_times(df, save_path):
    plt.figure()
    plt.semilogy(df["n"], df["mean_heuristic_time"], "o-", label="heuristic")
    plt.semilogy(df["n"], df["mean_exhaustive_time"], "o-", label="exhaustive")
    plt.xlabel("Number of cities")
    plt.ylabel("Mean time [s]")
    plt.legend()
    plt.title("Solver running time")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--sizes", type=int, nargs="+", default=[4, 5, 6, 7, 8, 9])
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--time-limit", type=float, default=None, help="per-instance limit for the exhaustive search")
    ap.add_argument("--sweep-csv", default=None, help="also append one sweep row per size to this CSV")
    args = ap.parse_args()

    cfg = ExhaustiveConfig(max_cities=12, time_limit=args.time_limit)

    # repeated trials
    records = []
    details_by_n = {}
    for n in args.sizes:
        stats, details = run_repeated_trials(n, n_runs=args.runs, square_size=args.square, cfg=cfg)
        print(n, json.dumps(stats, indent=2))
        records.append(stats)
        details_by_n[n] = details

    # summary CSV + plots
    df_summary = pd.DataFrame.from_records(records)
    summary_csv = os.path.join(OUTDIR, "results_summary.csv")
    df_summary.to_csv(summary_csv, index=False)
    plot_scatter(details_by_n, os.path.join(OUTDIR, "results_ratios.png"))
    plot_times(df_summary, os.path.join(OUTDIR, "results_times.png"))

    if args.sweep_csv:
        rows = run_size_sweep(args.sizes, n_runs=args.runs, base_seed=500, csv_path=args.sweep_csv,
                              square_size=args.square, cfg=cfg)
        print("Sizes swept:", len(rows))


if __name__ == "__main__":
    main()
