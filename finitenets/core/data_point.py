"""Labelled training examples."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .errors import LabelOutOfRangeError
from .types import Array, as_count


def one_hot(label: int, num_labels: int) -> Array:
    """Return a vector of ``num_labels`` zeros with ``1.0`` at ``label``."""

    if not 0 <= label < num_labels:
        raise LabelOutOfRangeError(label, num_labels)
    out = np.zeros(num_labels, dtype=np.float64)
    out[label] = 1.0
    return out


@dataclass(frozen=True)
class DataPoint:
    """An immutable input vector with its class label and one-hot target."""

    inputs: Array
    label: int
    num_labels: int
    expected_outputs: Array = field(init=False, repr=False)

    def __init__(self, inputs: Sequence[float] | Array, label: int, num_labels: int) -> None:
        label = as_count(label, "label")
        num_labels = as_count(num_labels, "num_labels")
        expected = one_hot(label, num_labels)
        values = np.array(inputs, dtype=np.float64).reshape(-1)
        values.flags.writeable = False
        expected.flags.writeable = False
        object.__setattr__(self, "inputs", values)
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "num_labels", num_labels)
        object.__setattr__(self, "expected_outputs", expected)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        return (
            self.label == other.label
            and self.num_labels == other.num_labels
            and np.array_equal(self.inputs, other.inputs)
        )

    def __hash__(self) -> int:
        return hash((self.label, self.num_labels, self.inputs.tobytes()))


__all__ = ["DataPoint", "one_hot"]
