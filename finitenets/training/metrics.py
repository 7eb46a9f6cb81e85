"""Evaluation helpers for trained networks."""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np

from ..core.data_point import DataPoint
from ..core.network import NeuralNetwork
from ..core.types import Array


def count_correct(network: NeuralNetwork, data: Sequence[DataPoint]) -> int:
    """Number of points whose predicted class matches their label."""

    return sum(1 for point in data if network.classify(point.inputs) == point.label)


def accuracy(network: NeuralNetwork, data: Sequence[DataPoint]) -> float:
    if not data:
        return 0.0
    return count_correct(network, data) / len(data)


def evaluate(network: NeuralNetwork, data: Sequence[DataPoint]) -> Dict[str, float]:
    correct = count_correct(network, data)
    return {
        "cost": float(network.cost(data)),
        "correct": float(correct),
        "accuracy": correct / len(data),
    }


def decision_boundary(network: NeuralNetwork, resolution: int = 50) -> Array:
    """Predicted class for a ``resolution x resolution`` grid over ``[0, 1]^2``.

    ``grid[x, y]`` holds the class for input ``(x / (resolution - 1),
    y / (resolution - 1))``. Only meaningful for two-input networks.
    """

    if network.input_size != 2:
        raise ValueError(
            f"decision_boundary needs a network with 2 inputs, got {network.input_size}"
        )
    if resolution < 2:
        raise ValueError("resolution must be at least 2")
    axis = np.linspace(0.0, 1.0, resolution)
    grid = np.empty((resolution, resolution), dtype=np.int64)
    for ix, x in enumerate(axis):
        for iy, y in enumerate(axis):
            grid[ix, iy] = network.classify((x, y))
    return grid


__all__ = ["count_correct", "accuracy", "evaluate", "decision_boundary"]
