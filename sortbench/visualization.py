from pathlib import Path
from typing import Iterable, Optional

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from sortbench.experiments.aggregate import METRICS, ordered_names, latest_by_case  # noqa: E402
from sortbench.algorithms import ALGORITHMS_ALL  # noqa: E402
from sortbench.models import BenchmarkResult  # noqa: E402
from sortbench.orderings import ORDERINGS_ALL  # noqa: E402

ORDERING_COLORS = {
    "sorted": "#00FFFF",  # neon cyan
    "shuffled": "#FF00CC",  # neon magenta
    "reversed": "#7CFF00",  # neon lime
}
METRIC_LABELS = {
    "comparisons": "Comparisons",
    "elapsed_s": "Time [s]",
}


def plot_results(
    results: Iterable[BenchmarkResult],
    metric: str = "comparisons",
    save_path: Optional[str] = None,
    log_scale: bool = True,
) -> Optional[str]:
    """Grouped bar chart: one group per algorithm, one bar per ordering.

    Returns the saved path, or None when there is nothing to plot.
    """
    if metric not in METRICS:
        raise ValueError(f"Unknown metric {metric!r}, expected one of {METRICS}")
    latest = latest_by_case(results)
    if not latest:
        return None
    algorithms = ordered_names((a for a, _ in latest), ALGORITHMS_ALL)
    orderings = ordered_names((o for _, o in latest), ORDERINGS_ALL)

    width = 0.8 / len(orderings)
    fig, ax = plt.subplots(figsize=(max(6, 1.6 * len(algorithms) + 2), 5), constrained_layout=True)
    for k, ordering in enumerate(orderings):
        xs, heights = [], []
        for i, algo in enumerate(algorithms):
            r = latest.get((algo, ordering))
            if r is None:
                continue
            xs.append(i + (k - (len(orderings) - 1) / 2) * width)
            heights.append(getattr(r, metric))
        ax.bar(
            xs,
            heights,
            width=width,
            label=ordering,
            color=ORDERING_COLORS.get(ordering),
            edgecolor="black",
            linewidth=0.6,
        )
    ax.set_xticks(range(len(algorithms)))
    ax.set_xticklabels(algorithms)
    ax.set_ylabel(METRIC_LABELS[metric], fontsize=12)
    sizes = sorted({r.element_count for r in latest.values()})
    ax.set_title(f"{METRIC_LABELS[metric]} by ordering (N={', '.join(map(str, sizes))})", fontsize=14)
    if log_scale:
        ax.set_yscale("symlog" if metric == "comparisons" else "log")
    ax.grid(True, alpha=0.25, axis="y", linestyle="--", linewidth=0.7)
    ax.legend(title="Input")

    if save_path is None:
        save_path = f"{metric}.png"
    Path(save_path).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(save_path, dpi=120)
    plt.close(fig)
    return save_path
