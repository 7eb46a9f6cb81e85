"""Dataset registry and metadata contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, MutableMapping

from ..core.data_point import DataPoint


@dataclass(frozen=True)
class Dataset:
    """A labelled dataset ready to be fed to a network.

    Attributes
    ----------
    name:
        Registry name the dataset was built from.
    points:
        The labelled examples.
    num_classes:
        Length of every point's one-hot target.
    input_size:
        Length of every point's input vector.
    provenance:
        Options the factory was called with, recorded in run manifests so a
        run can be reproduced.
    """

    name: str
    points: List[DataPoint]
    num_classes: int
    input_size: int
    provenance: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.points)


DatasetFactory = Callable[..., Dataset]


_REGISTRY: MutableMapping[str, DatasetFactory] = {}


def register_dataset(
    name: str | None = None,
    factory: DatasetFactory | None = None,
) -> Callable[[DatasetFactory], DatasetFactory] | DatasetFactory:
    """Register a dataset factory, directly or as a decorator::

        @register_dataset("fruit")
        def make_fruit(**kwargs):
            ...
    """

    def _decorator(func: DatasetFactory) -> DatasetFactory:
        _REGISTRY[str(name or func.__name__)] = func
        return func

    if factory is not None:
        return _decorator(factory)
    if name is None:
        raise TypeError("register_dataset requires a name when used without a decorator")
    return _decorator


def get_dataset(name: str, /, **options: Any) -> Dataset:
    """Build the dataset registered as ``name`` with ``options``."""

    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY))
        raise KeyError(f"Unknown dataset {name!r}. Available datasets: {available}")
    dataset = _REGISTRY[name](**options)
    _validate(dataset)
    return dataset


def available_datasets() -> Iterable[str]:
    return sorted(_REGISTRY)


def _validate(dataset: Dataset) -> None:
    if not dataset.points:
        raise ValueError(f"Dataset {dataset.name!r} produced no points")
    for point in dataset.points:
        if point.inputs.shape[0] != dataset.input_size:
            raise ValueError(
                f"Dataset {dataset.name!r} declares input_size={dataset.input_size} "
                f"but a point has {point.inputs.shape[0]} inputs"
            )
        if point.num_labels != dataset.num_classes:
            raise ValueError(
                f"Dataset {dataset.name!r} declares {dataset.num_classes} classes "
                f"but a point has {point.num_labels}"
            )


__all__ = ["Dataset", "register_dataset", "get_dataset", "available_datasets"]
