"""Headless-safe plotting adapters."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np

from ..core.data_point import DataPoint
from ..core.network import NeuralNetwork
from ..training.metrics import decision_boundary


def _pyplot():
    import matplotlib

    matplotlib.use("Agg", force=True)
    import matplotlib.pyplot as plt  # imported lazily for headless safety

    return plt


class PlotAdapter:
    """Collect the cost per epoch and optionally emit a cost curve."""

    def __init__(self, run_dir: str | Path, enable_plots: bool = False):
        self.enable_plots = enable_plots
        self.run_dir = Path(run_dir)
        self._history: List[Tuple[int, float]] = []
        if self.enable_plots:
            self.run_dir.mkdir(parents=True, exist_ok=True)

    def on_epoch(self, epoch: int, metrics) -> None:
        if not self.enable_plots:
            return
        self._history.append((epoch, float(metrics.get("cost", 0.0))))

    def close(self) -> Path | None:
        if not self.enable_plots or not self._history:
            return None
        plt = _pyplot()
        epochs, costs = zip(*self._history)
        fig, ax = plt.subplots()
        ax.plot(epochs, costs)
        ax.set_xlabel("Epoch")
        ax.set_ylabel("Cost")
        ax.set_title("Training Cost")
        plot_path = self.run_dir / "cost.png"
        fig.savefig(plot_path)
        plt.close(fig)
        return plot_path

    __call__ = on_epoch


def plot_decision_boundary(
    network: NeuralNetwork,
    data: Sequence[DataPoint],
    path: str | Path,
    *,
    resolution: int = 50,
) -> Path:
    """Draw the predicted class regions with the labelled points on top."""

    grid = decision_boundary(network, resolution)
    plt = _pyplot()
    fig, ax = plt.subplots()
    ax.imshow(
        grid.T,
        origin="lower",
        extent=(0.0, 1.0, 0.0, 1.0),
        cmap="coolwarm",
        alpha=0.35,
        vmin=0,
        vmax=max(network.output_size - 1, 1),
    )
    if data:
        xy = np.stack([point.inputs for point in data])
        labels = np.array([point.label for point in data])
        ax.scatter(
            xy[:, 0],
            xy[:, 1],
            c=labels,
            cmap="coolwarm",
            vmin=0,
            vmax=max(network.output_size - 1, 1),
            edgecolors="k",
            s=20,
        )
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.0)
    ax.set_title("Decision Boundary")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path)
    plt.close(fig)
    return path
