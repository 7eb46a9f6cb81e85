import numpy as np
import pytest

from finitenets.core.activations import ReLU, Sigmoid
from finitenets.core.errors import ShapeMismatchError
from finitenets.core.layer import Layer
from finitenets.core.random import RandomSource


@pytest.mark.parametrize("num_in, num_out", [(1, 1), (2, 3), (4, 2), (7, 5)])
def test_shapes_and_initial_bounds(num_in, num_out):
    layer = Layer(num_in, num_out, random_source=RandomSource(num_in * 10 + num_out))
    assert layer.weights.shape == (num_in, num_out)
    assert layer.biases.shape == (num_out,)
    assert layer.cost_gradient_weights.shape == (num_in, num_out)
    assert layer.cost_gradient_biases.shape == (num_out,)
    assert np.all(np.abs(layer.weights) <= 1.0)
    assert np.all(np.abs(layer.biases) <= 1.0)
    assert not layer.cost_gradient_weights.any()
    assert not layer.cost_gradient_biases.any()
    assert np.array_equal(layer.activations, np.zeros(num_out))


def test_custom_bounds_are_respected():
    layer = Layer(6, 6, weight_bound=2.0, bias_bound=0.1, random_source=RandomSource(3))
    assert np.all(np.abs(layer.weights) <= 2.0)
    assert np.abs(layer.weights).max() > 1.0
    assert np.all(np.abs(layer.biases) <= 0.1)


def test_initialisation_draws_weights_row_major_then_biases():
    layer = Layer(2, 3, random_source=RandomSource(5))
    source = RandomSource(5)
    expected = [source.uniform(-1.0, 1.0) for _ in range(2 * 3 + 3)]
    assert np.allclose(layer.weights.ravel(), expected[:6])
    assert np.allclose(layer.biases, expected[6:])


def test_forward_computes_weighted_input_and_caches():
    layer = Layer(2, 2, random_source=RandomSource(0))
    layer.weights[:] = [[1.0, -1.0], [0.5, 2.0]]
    layer.biases[:] = [0.25, -3.0]
    out = layer.forward([2.0, 1.0], ReLU())
    # node 0: 0.25 + 2*1 + 1*0.5 = 2.75, node 1: -3 + 2*-1 + 1*2 = -3 -> 0
    assert np.allclose(out, [2.75, 0.0])
    assert layer.activations is out

    again = layer.forward([0.0, 0.0], Sigmoid())
    assert np.allclose(again, [1 / (1 + np.exp(-0.25)), 1 / (1 + np.exp(3.0))])
    assert np.allclose(layer.activations, again)


@pytest.mark.parametrize("inputs", [[1.0], [1.0, 2.0, 3.0], [[1.0, 2.0]]])
def test_forward_rejects_wrong_width(inputs):
    layer = Layer(2, 3, random_source=RandomSource(0))
    with pytest.raises(ShapeMismatchError):
        layer.forward(inputs, Sigmoid())


def test_node_cost_and_derivative():
    assert Layer.node_cost(0.75, 1.0) == pytest.approx(0.0625)
    assert Layer.node_cost(1.0, 1.0) == 0.0
    assert Layer.node_cost_derivative(0.75, 1.0) == pytest.approx(-0.5)


def test_apply_gradients_steps_against_gradient():
    layer = Layer(2, 1, random_source=RandomSource(0))
    layer.weights[:] = [[1.0], [2.0]]
    layer.biases[:] = [0.5]
    layer.cost_gradient_weights[:] = [[0.5], [-1.0]]
    layer.cost_gradient_biases[:] = [2.0]
    layer.apply_gradients(0.1)
    assert np.allclose(layer.weights, [[0.95], [2.1]])
    assert np.allclose(layer.biases, [0.3])


def test_snapshot_is_a_read_only_copy():
    layer = Layer(2, 2, random_source=RandomSource(0))
    snap = layer.snapshot()
    layer.weights[0, 0] += 5.0
    assert snap.weights[0, 0] == pytest.approx(layer.weights[0, 0] - 5.0)
    with pytest.raises(ValueError):
        snap.biases[0] = 1.0
    assert layer.parameter_count() == 6


def test_non_positive_widths_rejected():
    with pytest.raises(ValueError):
        Layer(0, 2)


@pytest.mark.parametrize("num_in, num_out", [(2.5, 3), (2, 3.0), (True, 3)])
def test_non_integral_widths_rejected(num_in, num_out):
    with pytest.raises(TypeError):
        Layer(num_in, num_out, random_source=RandomSource(0))


def test_numpy_integer_widths_accepted():
    layer = Layer(np.int64(2), np.int64(3), random_source=RandomSource(0))
    assert layer.weights.shape == (2, 3)
    assert type(layer.num_nodes_in) is int
