import os, argparse
import matplotlib.pyplot as plt
import imageio

from tsptour import TSPInstance, HeuristicTourSolver, ExhaustiveTourSolver, ExhaustiveConfig


def draw_cities(ax, coords):
    ax.plot([c[0] for c in coords], [c[1] for c in coords], "o")
    for i, (x, y) in enumerate(coords):
        ax.annotate(str(i), (x, y), textcoords="offset points", xytext=(4, 4), fontsize=8)


def draw_path(ax, coords, path, style="-"):
    ax.plot([coords[i][0] for i in path], [coords[i][1] for i in path], style)


def frames_for(inst, solver, result, optimal=None):
    """Yield (title, draw) pairs: spanning tree, walk growing edge by edge, shortcut tour."""
    coords = inst.coords

    def tree(ax):
        for u, v, _ in solver.tree.edges:
            draw_path(ax, coords, [u, v], "g-")
    yield f"spanning tree  weight={solver.tree.weight()}", tree

    walk = solver.walk
    for k in range(2, len(walk) + 1):
        def partial(ax, k=k):
            tree(ax)
            draw_path(ax, coords, walk[:k], "k--")
        yield f"depth-first walk  step {k-1}/{len(walk)-1}", partial

    def final(ax):
        if optimal is not None:
            draw_path(ax, coords, optimal.tour, "c:")
        draw_path(ax, coords, result.tour, "r-")
    title = f"shortcut tour  cost={result.cost}"
    if optimal is not None:
        title += f"  optimal={optimal.cost}"
    yield title, final


def visualize(inst, outdir, with_optimal=False):
    os.makedirs(outdir, exist_ok=True)
    solver = HeuristicTourSolver(inst.distance_matrix())
    result = solver.run()
    optimal = None
    if with_optimal:
        optimal = ExhaustiveTourSolver(inst.distance_matrix(), ExhaustiveConfig(max_cities=12)).run()

    frames = []
    for idx, (title, draw) in enumerate(frames_for(inst, solver, result, optimal)):
        plt.figure(figsize=(5,5))
        ax = plt.gca()
        draw_cities(ax, inst.coords)
        draw(ax)
        plt.title(f"{inst.name}\n{title}")
        plt.axis("equal")
        plt.tight_layout()
        frame_path = os.path.join(outdir, f"{inst.name}_frame_{idx:03d}.png")
        plt.savefig(frame_path, dpi=120, bbox_inches="tight")
        plt.close()
        frames.append(frame_path)

    gif_path = os.path.join(outdir, f"{inst.name}_heuristic.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.6) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    print("Saved:", gif_path)

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--n", type=int, default=9, help="number of cities")
    p.add_argument("--square", type=float, default=100.0)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--optimal", action="store_true", help="overlay the exhaustive optimum on the last frame")
    args = p.parse_args()

    inst = TSPInstance.random_euclidean(n=args.n, seed=args.seed, square_size=args.square, name=f"viz{args.n}")
    visualize(inst, args.outdir, with_optimal=args.optimal)

if __name__ == "__main__":
    main()
