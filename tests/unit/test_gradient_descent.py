import pytest

from finitenets.core.errors import DegenerateStepError
from finitenets.core.gradient_descent import (
    H_FACTOR,
    LEARN_RATE_STEP,
    GradientDescent,
    curve,
    curve_derivative,
)
from finitenets.core.random import RandomSource


@pytest.mark.parametrize("x", [-2.0, -0.5, 0.3, 1.7])
def test_numerical_slope_tracks_analytic_derivative(x):
    descent = GradientDescent(input_value=x, h=1e-6)
    assert descent.slope() == pytest.approx(curve_derivative(x), abs=1e-4)


def test_learn_moves_downhill_and_records_history():
    descent = GradientDescent(input_value=0.5, learn_rate=0.05)
    start = descent.input_value
    for _ in range(20):
        descent.learn()
    assert curve(descent.input_value) < curve(start)
    assert len(descent.past_values) == 20
    assert descent.past_values[0] == start


def test_zero_step_is_rejected():
    descent = GradientDescent(input_value=1.0, h=0.0)
    with pytest.raises(DegenerateStepError):
        descent.learn()
    assert descent.past_values == []


def test_reset_picks_a_fresh_start():
    descent = GradientDescent(input_value=1.0)
    descent.learn()
    x = descent.reset(RandomSource(4))
    assert -2.5 <= x <= 2.5
    assert descent.past_values == []


def test_tuning_helpers_clamp():
    descent = GradientDescent(learn_rate=0.1, h=0.5)
    assert descent.decrease_learn_rate() == 0.0
    assert descent.increase_learn_rate() == LEARN_RATE_STEP
    assert descent.coarsen_h() == 1.0
    assert descent.refine_h() == pytest.approx(1.0 / H_FACTOR)
    descent.learn_rate = 99.9
    assert descent.increase_learn_rate() == 100.0
