"""finitenets public API."""

from .core import activations, errors  # noqa: F401
from .core.activations import ActivationType, get_activation
from .core.data_point import DataPoint
from .core.layer import Layer
from .core.network import NeuralNetwork
from .core.random import seed
from .training.pipelines import load_preset, presets, run_pipeline
from .training.trainer import Trainer

__all__ = [
    "ActivationType",
    "DataPoint",
    "Layer",
    "NeuralNetwork",
    "Trainer",
    "activations",
    "errors",
    "get_activation",
    "load_preset",
    "presets",
    "run_pipeline",
    "seed",
]
