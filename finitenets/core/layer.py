"""Fully connected layer with finite-difference gradient buffers."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .activations import Activation
from .errors import ShapeMismatchError
from .random import RandomSource, get_random_source
from .types import Array, LayerSnapshot, as_count

WEIGHT_BOUND = 1.0
BIAS_BOUND = 1.0


def _frozen(values: Array) -> Array:
    out = values.copy()
    out.flags.writeable = False
    return out


class Layer:
    """Dense layer mapping ``num_nodes_in`` inputs to ``num_nodes_out`` outputs.

    ``weights[i, o]`` connects input node ``i`` to output node ``o``. The
    ``activations`` cache holds the outputs of the most recent
    :meth:`forward` call and is overwritten on every call.
    """

    def __init__(
        self,
        num_nodes_in: int,
        num_nodes_out: int,
        *,
        weight_bound: float = WEIGHT_BOUND,
        bias_bound: float = BIAS_BOUND,
        random_source: RandomSource | None = None,
    ) -> None:
        num_nodes_in = as_count(num_nodes_in, "num_nodes_in")
        num_nodes_out = as_count(num_nodes_out, "num_nodes_out")
        if num_nodes_in < 1 or num_nodes_out < 1:
            raise ValueError(
                f"Layer widths must be positive, got {num_nodes_in} -> {num_nodes_out}"
            )
        self.num_nodes_in = num_nodes_in
        self.num_nodes_out = num_nodes_out
        source = random_source if random_source is not None else get_random_source()

        self.weights = np.empty((self.num_nodes_in, self.num_nodes_out), dtype=np.float64)
        for node_in in range(self.num_nodes_in):
            for node_out in range(self.num_nodes_out):
                self.weights[node_in, node_out] = source.uniform(-weight_bound, weight_bound)
        self.biases = np.array(
            [source.uniform(-bias_bound, bias_bound) for _ in range(self.num_nodes_out)],
            dtype=np.float64,
        )

        self.cost_gradient_weights = np.zeros_like(self.weights)
        self.cost_gradient_biases = np.zeros_like(self.biases)
        self.activations = np.zeros(self.num_nodes_out, dtype=np.float64)

    def forward(self, inputs: Sequence[float] | Array, activation: Activation) -> Array:
        """Compute and cache the activations for ``inputs``."""

        values = np.asarray(inputs, dtype=np.float64)
        if values.ndim != 1 or values.shape[0] != self.num_nodes_in:
            actual = values.shape[0] if values.ndim == 1 else int(values.size)
            raise ShapeMismatchError(self.num_nodes_in, actual)
        weighted_inputs = self.biases + values @ self.weights
        self.activations = np.asarray(activation.activate(weighted_inputs), dtype=np.float64)
        return self.activations

    @staticmethod
    def node_cost(output: float, expected: float) -> float:
        error = output - expected
        return error * error

    @staticmethod
    def node_cost_derivative(output: float, expected: float) -> float:
        return 2.0 * (output - expected)

    def apply_gradients(self, learn_rate: float) -> None:
        self.weights -= self.cost_gradient_weights * learn_rate
        self.biases -= self.cost_gradient_biases * learn_rate

    def snapshot(self) -> LayerSnapshot:
        return LayerSnapshot(weights=_frozen(self.weights), biases=_frozen(self.biases))

    def parameter_count(self) -> int:
        return int(self.weights.size + self.biases.size)

    def __repr__(self) -> str:
        return f"Layer({self.num_nodes_in} -> {self.num_nodes_out})"


__all__ = ["Layer", "WEIGHT_BOUND", "BIAS_BOUND"]
