"""Feed-forward network trained with finite-difference gradients."""

from __future__ import annotations

from typing import List, Sequence

from .activations import Activation, ActivationType, get_activation
from .data_point import DataPoint
from .errors import DegenerateStepError, EmptyDatasetError, ShapeMismatchError
from .layer import Layer
from .random import RandomSource
from .types import Array, LayerSnapshot, as_count


class NeuralNetwork:
    """Ordered stack of :class:`Layer` objects sharing one activation.

    ``NeuralNetwork([2, 3, 2])`` builds two layers, 2 -> 3 and 3 -> 2. The
    first entry is the input width and does not get a layer of its own.
    """

    def __init__(
        self,
        layer_sizes: Sequence[int],
        activation: ActivationType | str | Activation = ActivationType.SIGMOID,
        *,
        random_source: RandomSource | None = None,
    ) -> None:
        sizes = [as_count(size, "layer width") for size in layer_sizes]
        if len(sizes) < 2:
            raise ValueError(
                f"layer_sizes needs an input and an output width, got {sizes}"
            )
        if any(size < 1 for size in sizes):
            raise ValueError(f"layer widths must be positive, got {sizes}")
        self.activation = get_activation(activation)
        self.layers: List[Layer] = [
            Layer(num_in, num_out, random_source=random_source)
            for num_in, num_out in zip(sizes[:-1], sizes[1:])
        ]

    @property
    def layer_sizes(self) -> List[int]:
        return [self.layers[0].num_nodes_in] + [layer.num_nodes_out for layer in self.layers]

    @property
    def input_size(self) -> int:
        return self.layers[0].num_nodes_in

    @property
    def output_size(self) -> int:
        return self.layers[-1].num_nodes_out

    def parameter_count(self) -> int:
        return sum(layer.parameter_count() for layer in self.layers)

    def snapshot(self) -> List[LayerSnapshot]:
        return [layer.snapshot() for layer in self.layers]

    # ------------------------------------------------------------------
    # Read paths

    def calculate_outputs(self, inputs: Sequence[float] | Array) -> Array:
        """Run ``inputs`` through every layer and return the final activations."""

        outputs = inputs
        for layer in self.layers:
            outputs = layer.forward(outputs, self.activation)
        return outputs

    def classify(self, inputs: Sequence[float] | Array) -> int:
        """Return the index of the largest output.

        Ties resolve to the lowest index: the running best is only replaced
        on a strict improvement.
        """

        outputs = self.calculate_outputs(inputs)
        best_index = 0
        best_value = outputs[0]
        for index in range(1, outputs.shape[0]):
            if outputs[index] > best_value:
                best_index = index
                best_value = outputs[index]
        return best_index

    def cost(self, data: Sequence[DataPoint]) -> float:
        """Mean over ``data`` of the summed squared error per output node."""

        if len(data) == 0:
            raise EmptyDatasetError("cannot compute the cost of an empty dataset")
        total = 0.0
        for point in data:
            total += self._cost_single(point)
        return total / len(data)

    def _cost_single(self, point: DataPoint) -> float:
        outputs = self.calculate_outputs(point.inputs)
        if point.expected_outputs.shape[0] != outputs.shape[0]:
            raise ShapeMismatchError(outputs.shape[0], point.expected_outputs.shape[0])
        output_layer = self.layers[-1]
        cost = 0.0
        for output, expected in zip(outputs, point.expected_outputs):
            cost += output_layer.node_cost(float(output), float(expected))
        return cost

    # ------------------------------------------------------------------
    # Training

    def learn(self, batch: Sequence[DataPoint], learn_rate: float, h: float) -> float:
        """Run one finite-difference gradient descent step over ``batch``.

        Every parameter is nudged by ``h`` in turn, the batch cost is
        re-measured and the parameter is restored from a snapshot taken before
        the loop, so each estimate is made against the same baseline. Gradients
        are applied to all layers only once every estimate is in. Each step
        costs one full batch evaluation per parameter.

        Returns the baseline cost measured before the update.
        """

        if h == 0:
            raise DegenerateStepError("finite-difference step h must be non-zero")
        baseline_cost = self.cost(batch)
        snapshots = self.snapshot()

        for layer, snapshot in zip(self.layers, snapshots):
            for node_in in range(layer.num_nodes_in):
                for node_out in range(layer.num_nodes_out):
                    layer.weights[node_in, node_out] += h
                    perturbed_cost = self.cost(batch)
                    layer.weights[node_in, node_out] = snapshot.weights[node_in, node_out]
                    layer.cost_gradient_weights[node_in, node_out] = (
                        perturbed_cost - baseline_cost
                    ) / h

            for node_out in range(layer.num_nodes_out):
                layer.biases[node_out] += h
                perturbed_cost = self.cost(batch)
                layer.biases[node_out] = snapshot.biases[node_out]
                layer.cost_gradient_biases[node_out] = (perturbed_cost - baseline_cost) / h

        self.apply_all_gradients(learn_rate)
        return baseline_cost

    def apply_all_gradients(self, learn_rate: float) -> None:
        for layer in self.layers:
            layer.apply_gradients(learn_rate)

    def __repr__(self) -> str:
        name = getattr(self.activation, "name", type(self.activation).__name__)
        return f"NeuralNetwork({self.layer_sizes}, activation={name!r})"


__all__ = ["NeuralNetwork"]
