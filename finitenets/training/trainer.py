"""Training loops driving finite-difference learning steps."""

from __future__ import annotations

import logging
from typing import Iterator, Mapping, Sequence

from ..core.data_point import DataPoint
from ..core.network import NeuralNetwork
from ..core.types import RunResult
from .metrics import evaluate

logger = logging.getLogger(__name__)

SCHEDULES = ("chunked", "full")


def iter_chunks(data: Sequence[DataPoint], chunk_size: int) -> Iterator[Sequence[DataPoint]]:
    """Yield consecutive slices of ``data``; the last one may be shorter."""

    if chunk_size < 1:
        raise ValueError("chunk_size must be positive")
    for start in range(0, len(data), chunk_size):
        yield data[start : start + chunk_size]


class Trainer:
    """Repeatedly call :meth:`NeuralNetwork.learn` and report progress.

    With the ``"chunked"`` schedule an epoch sweeps every chunk size from 1
    up to ``int(len(data) * max_chunk_size_factor)`` (exclusive) and learns on
    each consecutive chunk of that size. With ``"full"`` an epoch is a single
    step over the whole dataset.
    """

    def __init__(
        self,
        network: NeuralNetwork,
        learn_rate: float,
        h: float,
        *,
        schedule: str = "chunked",
        max_chunk_size_factor: float = 0.5,
        callbacks: Sequence[object] | None = None,
    ) -> None:
        if schedule not in SCHEDULES:
            raise ValueError(f"schedule must be one of {SCHEDULES}, got {schedule!r}")
        if not 0.0 <= max_chunk_size_factor <= 1.0:
            raise ValueError("max_chunk_size_factor must be in [0, 1]")
        self.network = network
        self.learn_rate = learn_rate
        self.h = h
        self.schedule = schedule
        self.max_chunk_size_factor = max_chunk_size_factor
        self.callbacks = list(callbacks or [])

    def run(self, data: Sequence[DataPoint], epochs: int) -> RunResult:
        data = list(data)
        total_steps = 0
        metrics: Mapping[str, float] = {}
        for epoch in range(1, epochs + 1):
            steps = self.run_epoch(data)
            total_steps += steps
            metrics = dict(evaluate(self.network, data), learn_steps=float(steps))
            logger.info(
                "epoch %d: cost=%.6f correct=%d/%d steps=%d",
                epoch,
                metrics["cost"],
                int(metrics["correct"]),
                len(data),
                steps,
            )
            self._emit_epoch(epoch, metrics)
        return RunResult(
            steps=total_steps,
            metrics_path="",
            manifest_path="",
            final_cost=float(metrics.get("cost", float("nan"))),
            final_accuracy=float(metrics.get("accuracy", float("nan"))),
        )

    def run_epoch(self, data: Sequence[DataPoint]) -> int:
        """Train for one epoch and return the number of learn steps taken."""

        if self.schedule == "full":
            self.network.learn(data, self.learn_rate, self.h)
            return 1

        steps = 0
        max_chunk_size = int(len(data) * self.max_chunk_size_factor)
        if max_chunk_size <= 1:
            logger.warning(
                "max chunk size %d leaves nothing to learn on %d points",
                max_chunk_size,
                len(data),
            )
        for chunk_size in range(1, max_chunk_size):
            for chunk in iter_chunks(data, chunk_size):
                self.network.learn(chunk, self.learn_rate, self.h)
                steps += 1
        logger.debug("chunked epoch finished after %d steps", steps)
        return steps

    def _emit_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        for callback in self.callbacks:
            if hasattr(callback, "on_epoch"):
                callback.on_epoch(epoch, metrics)  # type: ignore[attr-defined]
            elif callable(callback):
                callback(epoch, metrics)


__all__ = ["Trainer", "iter_chunks", "SCHEDULES"]
