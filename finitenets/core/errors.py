"""Error taxonomy raised by the network core."""

from __future__ import annotations


class NetworkError(Exception):
    """Base class for checked conditions reported by the core."""


class ShapeMismatchError(NetworkError, ValueError):
    """An input vector does not match the width a layer expects."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} inputs but received {actual}")
        self.expected = expected
        self.actual = actual


class LabelOutOfRangeError(NetworkError, ValueError):
    """A data point label is not a valid index into its class count."""

    def __init__(self, label: int, num_labels: int) -> None:
        super().__init__(f"Label {label} is out of range for {num_labels} classes")
        self.label = label
        self.num_labels = num_labels


class DegenerateStepError(NetworkError, ValueError):
    """A finite-difference step of zero was requested."""


class EmptyDatasetError(NetworkError, ValueError):
    """The cost of an empty dataset was requested."""


__all__ = [
    "NetworkError",
    "ShapeMismatchError",
    "LabelOutOfRangeError",
    "DegenerateStepError",
    "EmptyDatasetError",
]
