"""Core numerical primitives for finitenets."""

from . import activations, errors, gradient_descent, random, types
from .data_point import DataPoint
from .layer import Layer
from .network import NeuralNetwork

__all__ = [
    "activations",
    "errors",
    "gradient_descent",
    "random",
    "types",
    "DataPoint",
    "Layer",
    "NeuralNetwork",
]
