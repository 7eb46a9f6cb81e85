"""Core typing contracts for finitenets."""

from __future__ import annotations

import operator
from dataclasses import dataclass

import numpy as np

Array = np.ndarray


@dataclass(frozen=True)
class LayerSnapshot:
    """Read-only copy of a layer's parameters taken before a training step."""

    weights: Array
    biases: Array


@dataclass(frozen=True)
class RunResult:
    """Summary returned by :func:`finitenets.training.trainer.Trainer.run`."""

    steps: int
    metrics_path: str
    manifest_path: str
    final_cost: float = float("nan")
    final_accuracy: float = float("nan")


def as_count(value: object, name: str) -> int:
    """Return ``value`` as an ``int``, rejecting bools and non-integral numbers."""

    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise TypeError(f"{name} must be an integer, got {value!r}") from exc
