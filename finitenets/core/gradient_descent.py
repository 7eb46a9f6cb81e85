"""One-dimensional gradient descent on a fixed quartic curve."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .errors import DegenerateStepError
from .random import RandomSource, get_random_source

LEARN_RATE_STEP = 0.25
H_FACTOR = 10.0
MAX_LEARN_RATE = 100.0
MAX_H = 1.0
START_RANGE = 2.5


def curve(x: float) -> float:
    return 0.2 * x**4 + 0.1 * x**3 - x**2 + 2.0


def curve_derivative(x: float) -> float:
    return 0.8 * x**3 + 0.3 * x**2 - 2.0 * x


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass
class GradientDescent:
    """Walk ``input_value`` downhill on :func:`curve` using numerical slopes."""

    input_value: float = 0.0
    learn_rate: float = 2.25
    h: float = 0.0001
    past_values: List[float] = field(default_factory=list)

    @staticmethod
    def function(x: float) -> float:
        return curve(x)

    @staticmethod
    def derivative(x: float) -> float:
        return curve_derivative(x)

    def slope(self) -> float:
        """Finite-difference slope of the curve at the current input."""

        if self.h == 0:
            raise DegenerateStepError("finite-difference step h must be non-zero")
        delta = curve(self.input_value + self.h) - curve(self.input_value)
        return delta / self.h

    def learn(self) -> float:
        """Take one step and return the new input value."""

        slope = self.slope()
        self.past_values.append(self.input_value)
        self.input_value -= slope * self.learn_rate
        return self.input_value

    def reset(self, random_source: RandomSource | None = None) -> float:
        """Restart from a random point in ``[-2.5, 2.5]`` with no history."""

        source = random_source if random_source is not None else get_random_source()
        self.input_value = source.uniform(-START_RANGE, START_RANGE)
        self.past_values = []
        return self.input_value

    # Tuning helpers, clamped to the ranges the interactive driver allowed.

    def increase_learn_rate(self) -> float:
        self.learn_rate = _clamp(self.learn_rate + LEARN_RATE_STEP, 0.0, MAX_LEARN_RATE)
        return self.learn_rate

    def decrease_learn_rate(self) -> float:
        self.learn_rate = _clamp(self.learn_rate - LEARN_RATE_STEP, 0.0, MAX_LEARN_RATE)
        return self.learn_rate

    def refine_h(self) -> float:
        self.h = _clamp(self.h / H_FACTOR, 0.0, MAX_H)
        return self.h

    def coarsen_h(self) -> float:
        self.h = _clamp(self.h * H_FACTOR, 0.0, MAX_H)
        return self.h


__all__ = [
    "GradientDescent",
    "curve",
    "curve_derivative",
    "LEARN_RATE_STEP",
    "H_FACTOR",
]
