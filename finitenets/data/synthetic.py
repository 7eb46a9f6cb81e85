"""Pure in-memory synthetic datasets on the unit square."""

from __future__ import annotations

import numpy as np

from ..core.data_point import DataPoint
from .registry import Dataset, register_dataset

VALUE_PADDING = 0.025
CLASS_THRESHOLD = 0.3


def make_fruit(
    n_points: int = 65,
    seed: int = 0,
    *,
    padding: float = VALUE_PADDING,
    threshold: float = CLASS_THRESHOLD,
) -> list[DataPoint]:
    """Two-class "poisonous fruit" points over (spot size, spike length).

    A fruit is poisonous (label 1) when ``spot**0.8 * spike**0.8`` exceeds
    ``threshold``. Both features are kept ``padding`` away from the edges.
    """

    if not 0 <= padding < 0.5:
        raise ValueError("padding must be in [0, 0.5)")
    rng = np.random.default_rng(seed)
    low, high = padding, 1.0 - padding
    raw = rng.random((n_points, 2))
    features = low + raw * (high - low)
    points = []
    for spot_size, spike_length in features:
        poisonous = spot_size**0.8 * spike_length**0.8 > threshold
        points.append(DataPoint([spot_size, spike_length], 1 if poisonous else 0, 2))
    return points


def make_blobs(
    n_points: int = 90,
    num_classes: int = 3,
    seed: int = 0,
    *,
    spread: float = 0.08,
) -> list[DataPoint]:
    """Gaussian clusters with centres spaced on a circle inside the unit square."""

    if num_classes < 2:
        raise ValueError("num_classes must be at least 2")
    rng = np.random.default_rng(seed)
    angles = 2.0 * np.pi * np.arange(num_classes) / num_classes
    centres = 0.5 + 0.3 * np.stack([np.cos(angles), np.sin(angles)], axis=1)
    labels = np.arange(n_points) % num_classes
    rng.shuffle(labels)
    points = []
    for label in labels:
        xy = np.clip(centres[label] + spread * rng.standard_normal(2), 0.0, 1.0)
        points.append(DataPoint(xy, int(label), num_classes))
    return points


def _fruit_factory(
    n_points: int = 65,
    seed: int = 0,
    padding: float = VALUE_PADDING,
    threshold: float = CLASS_THRESHOLD,
    **_: object,
) -> Dataset:
    points = make_fruit(n_points, seed, padding=padding, threshold=threshold)
    provenance = {
        "type": "fruit",
        "n_points": n_points,
        "seed": seed,
        "padding": padding,
        "threshold": threshold,
    }
    return Dataset(name="fruit", points=points, num_classes=2, input_size=2, provenance=provenance)


def _blobs_factory(
    n_points: int = 90,
    num_classes: int = 3,
    seed: int = 0,
    spread: float = 0.08,
    **_: object,
) -> Dataset:
    points = make_blobs(n_points, num_classes, seed, spread=spread)
    provenance = {
        "type": "blobs",
        "n_points": n_points,
        "num_classes": num_classes,
        "seed": seed,
        "spread": spread,
    }
    return Dataset(
        name="blobs",
        points=points,
        num_classes=num_classes,
        input_size=2,
        provenance=provenance,
    )


register_dataset("fruit", _fruit_factory)
register_dataset("blobs", _blobs_factory)

__all__ = ["make_fruit", "make_blobs", "VALUE_PADDING", "CLASS_THRESHOLD"]
