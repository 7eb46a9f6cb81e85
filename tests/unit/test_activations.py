import warnings

import numpy as np
import pytest

from finitenets.core.activations import (
    ActivationType,
    ReLU,
    Sigmoid,
    SiLU,
    TanH,
    get_activation,
)

ALL = [Sigmoid(), TanH(), ReLU(), SiLU()]


def test_known_values():
    assert Sigmoid().activate(0.0) == pytest.approx(0.5)
    assert TanH().activate(0.0) == pytest.approx(0.0)
    assert TanH().activate(1.0) == pytest.approx((np.exp(2.0) - 1) / (np.exp(2.0) + 1))
    assert ReLU().activate(-3.0) == 0.0
    assert ReLU().activate(2.5) == 2.5
    assert SiLU().activate(2.0) == pytest.approx(2.0 / (1.0 + np.exp(-2.0)))


def test_relu_derivative_is_a_step():
    relu = ReLU()
    assert relu.derivative(-1.0) == 0.0
    assert relu.derivative(0.0) == 0.0
    assert relu.derivative(0.5) == 1.0


@pytest.mark.parametrize("activation", [Sigmoid(), TanH(), SiLU()], ids=lambda a: a.name)
@pytest.mark.parametrize("x", [-2.0, -0.3, 0.0, 0.7, 3.0])
def test_derivative_matches_central_difference(activation, x):
    eps = 1e-6
    numeric = (activation.activate(x + eps) - activation.activate(x - eps)) / (2 * eps)
    assert activation.derivative(x) == pytest.approx(numeric, rel=1e-5, abs=1e-7)


@pytest.mark.parametrize("activation", ALL, ids=lambda a: a.name)
def test_elementwise_on_arrays(activation):
    x = np.array([-1.0, 0.0, 1.5])
    out = activation.activate(x)
    assert out.shape == x.shape
    assert np.allclose(out, [activation.activate(float(v)) for v in x])


def test_extreme_inputs_saturate_without_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert Sigmoid().activate(-1000.0) == 0.0
        assert Sigmoid().activate(1000.0) == 1.0
        assert TanH().activate(1000.0) == 1.0
        assert TanH().activate(-1000.0) == -1.0
        assert SiLU().activate(1000.0) == 1000.0
        assert SiLU().activate(-1000.0) == 0.0


def test_get_activation_resolves_names_and_members():
    assert isinstance(get_activation("SiLU"), SiLU)
    assert isinstance(get_activation(ActivationType.TANH), TanH)
    custom = Sigmoid()
    assert get_activation(custom) is custom
    with pytest.raises(KeyError):
        get_activation("softplus")
