"""Activation functions shared by every layer of a network."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union

import numpy as np

from .types import Array

Value = Union[float, Array]


class Activation(Protocol):
    """Pure elementwise function together with its derivative."""

    name: str

    def activate(self, x: Value) -> Value:
        """Return the activation of ``x``."""

    def derivative(self, x: Value) -> Value:
        """Return d(activate)/dx evaluated at ``x``."""


def _sigmoid(x: Value) -> Value:
    # exp overflow saturates to 0.0 rather than warning.
    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + np.exp(-x))


@dataclass(frozen=True)
class Sigmoid:
    name: str = "sigmoid"

    def activate(self, x: Value) -> Value:
        return _sigmoid(x)

    def derivative(self, x: Value) -> Value:
        a = self.activate(x)
        return a * (1.0 - a)


@dataclass(frozen=True)
class TanH:
    name: str = "tanh"

    def activate(self, x: Value) -> Value:
        # Equal to (e^2x - 1) / (e^2x + 1) but saturates instead of inf/inf.
        return np.tanh(x)

    def derivative(self, x: Value) -> Value:
        t = self.activate(x)
        return 1.0 - t * t


@dataclass(frozen=True)
class ReLU:
    name: str = "relu"

    def activate(self, x: Value) -> Value:
        return np.maximum(x, 0.0)

    def derivative(self, x: Value) -> Value:
        return np.heaviside(x, 0.0)


@dataclass(frozen=True)
class SiLU:
    name: str = "silu"

    def activate(self, x: Value) -> Value:
        return x * _sigmoid(x)

    def derivative(self, x: Value) -> Value:
        s = _sigmoid(x)
        return x * s * (1.0 - s) + s


class ActivationType(Enum):
    SIGMOID = "sigmoid"
    TANH = "tanh"
    RELU = "relu"
    SILU = "silu"


_ACTIVATIONS = {
    ActivationType.SIGMOID: Sigmoid,
    ActivationType.TANH: TanH,
    ActivationType.RELU: ReLU,
    ActivationType.SILU: SiLU,
}


def get_activation(kind: ActivationType | str | Activation) -> Activation:
    """Resolve ``kind`` into an :class:`Activation` instance.

    ``kind`` may be an :class:`ActivationType`, its name in any case, or an
    object that already implements the activation protocol.
    """

    if isinstance(kind, ActivationType):
        return _ACTIVATIONS[kind]()
    if isinstance(kind, str):
        try:
            return _ACTIVATIONS[ActivationType(kind.lower())]()
        except ValueError as exc:
            available = ", ".join(member.value for member in ActivationType)
            raise KeyError(
                f"Unknown activation {kind!r}. Available activations: {available}"
            ) from exc
    if hasattr(kind, "activate") and hasattr(kind, "derivative"):
        return kind
    raise TypeError(f"Cannot build an activation from {kind!r}")


__all__ = [
    "Activation",
    "ActivationType",
    "Sigmoid",
    "TanH",
    "ReLU",
    "SiLU",
    "get_activation",
]
