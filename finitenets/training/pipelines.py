"""Pipeline assembly: config -> dataset -> network -> trainer -> artifacts."""

from __future__ import annotations

import json
import logging
import time
from copy import deepcopy
from pathlib import Path
from typing import Dict, List, Mapping

from ..core import random as random_source
from ..core.network import NeuralNetwork
from ..core.types import RunResult
from ..data import get_dataset
from ..reporting.artifacts import write_manifest
from ..reporting.metrics import CsvSink, JsonlSink
from ..reporting.plots import PlotAdapter, plot_decision_boundary
from .trainer import Trainer

logger = logging.getLogger(__name__)

_PRESETS: Dict[str, Mapping[str, object]] = {
    "fruit-sigmoid": {
        "data": {"name": "fruit", "options": {"n_points": 65, "seed": 0}},
        "model": {"hidden": [3], "activation": "sigmoid"},
        "train": {
            "epochs": 1,
            "learn_rate": 2.25,
            "h": 0.0001,
            "schedule": "chunked",
            "max_chunk_size_factor": 0.5,
            "seed": 7,
            "run_dir": "runs/fruit-sigmoid",
            "enable_plots": False,
        },
    },
    "fruit-full-step": {
        "data": {"name": "fruit", "options": {"n_points": 65, "seed": 0}},
        "model": {"hidden": [3], "activation": "sigmoid"},
        "train": {
            "epochs": 50,
            "learn_rate": 2.25,
            "h": 0.0001,
            "schedule": "full",
            "seed": 7,
            "run_dir": "runs/fruit-full-step",
            "enable_plots": False,
        },
    },
    "blobs-tanh": {
        "data": {"name": "blobs", "options": {"n_points": 90, "num_classes": 3, "seed": 0}},
        "model": {"hidden": [4], "activation": "tanh"},
        "train": {
            "epochs": 30,
            "learn_rate": 0.5,
            "h": 0.0001,
            "schedule": "full",
            "seed": 3,
            "run_dir": "runs/blobs-tanh",
            "enable_plots": False,
        },
    },
}

_REQUIRED_SECTIONS = {"data", "model", "train"}


def presets() -> Mapping[str, Mapping[str, object]]:
    return {name: deepcopy(cfg) for name, cfg in _PRESETS.items()}


def load_preset(name: str) -> Dict[str, object]:
    try:
        return deepcopy(dict(_PRESETS[name]))
    except KeyError as exc:
        available = ", ".join(sorted(_PRESETS))
        raise KeyError(f"Unknown preset {name!r}. Available presets: {available}") from exc


def merge_config(base: Mapping[str, object], override: Mapping[str, object]) -> Dict[str, object]:
    """Recursively merge ``override`` into a copy of ``base``."""

    merged = deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_config(merged[key], value)  # type: ignore[arg-type]
        else:
            merged[key] = deepcopy(value)
    return merged


def build_network(model_cfg: Mapping[str, object], d_in: int, d_out: int) -> NeuralNetwork:
    hidden = [int(width) for width in model_cfg.get("hidden", [])]  # type: ignore[union-attr]
    configured_in = int(model_cfg.get("d_in", d_in))
    configured_out = int(model_cfg.get("d_out", d_out))
    if configured_in != d_in:
        raise ValueError(f"Configured d_in={configured_in} but the dataset has {d_in} inputs")
    if configured_out != d_out:
        raise ValueError(f"Configured d_out={configured_out} but the dataset has {d_out} classes")
    layer_sizes = [d_in, *hidden, d_out]
    return NeuralNetwork(layer_sizes, str(model_cfg.get("activation", "sigmoid")))


def run_pipeline(config: Mapping[str, object]) -> RunResult:
    missing = _REQUIRED_SECTIONS - set(config)
    if missing:
        raise KeyError(f"Config is missing required sections: {', '.join(sorted(missing))}")
    data_cfg = dict(config["data"])  # type: ignore[arg-type]
    model_cfg = dict(config["model"])  # type: ignore[arg-type]
    train_cfg = dict(config["train"])  # type: ignore[arg-type]

    seed = int(train_cfg.get("seed", 0))
    random_source.seed(seed)

    dataset = get_dataset(str(data_cfg["name"]), **dict(data_cfg.get("options", {})))
    network = build_network(model_cfg, dataset.input_size, dataset.num_classes)

    run_dir = _resolve_run_dir(train_cfg, dataset.name)
    run_dir.mkdir(parents=True, exist_ok=True)
    enable_plots = bool(train_cfg.get("enable_plots", False))

    _print_startup_summary(
        dataset_name=dataset.name,
        points=len(dataset),
        network=network,
        train_cfg=train_cfg,
    )

    jsonl = JsonlSink(run_dir / "metrics.jsonl", seed=seed)
    csv_sink = CsvSink(run_dir / "metrics.csv")
    plots = PlotAdapter(run_dir, enable_plots=enable_plots)

    trainer = Trainer(
        network,
        learn_rate=float(train_cfg.get("learn_rate", 2.25)),
        h=float(train_cfg.get("h", 0.0001)),
        schedule=str(train_cfg.get("schedule", "chunked")),
        max_chunk_size_factor=float(train_cfg.get("max_chunk_size_factor", 0.5)),
        callbacks=[jsonl, csv_sink, plots],
    )
    started = time.perf_counter()
    result = trainer.run(dataset.points, epochs=int(train_cfg.get("epochs", 1)))
    logger.info("training finished in %.2fs", time.perf_counter() - started)

    plots.close()
    if enable_plots and network.input_size == 2:
        plot_decision_boundary(
            network,
            dataset.points,
            run_dir / "boundary.png",
            resolution=int(train_cfg.get("boundary_resolution", 50)),
        )

    safe_config = json.loads(json.dumps(config))
    manifest = write_manifest(
        run_dir / "manifest.json",
        config=safe_config,
        dataset_provenance=dataset.provenance,
        network={
            "layer_sizes": network.layer_sizes,
            "activation": network.activation.name,
            "parameters": network.parameter_count(),
        },
    )
    (run_dir / "config.json").write_text(json.dumps(safe_config, indent=2))

    return RunResult(
        steps=result.steps,
        metrics_path=str(jsonl.path),
        manifest_path=manifest,
        final_cost=result.final_cost,
        final_accuracy=result.final_accuracy,
    )


def _resolve_run_dir(train_cfg: Mapping[str, object], dataset: str) -> Path:
    if "run_dir" in train_cfg:
        return Path(str(train_cfg["run_dir"]))
    timestamp = time.strftime("%Y%m%d-%H%M%S")
    return Path("runs") / timestamp / dataset


def _print_startup_summary(
    *,
    dataset_name: str,
    points: int,
    network: NeuralNetwork,
    train_cfg: Mapping[str, object],
) -> None:
    print("=== finitenets run ===")
    print(f"Dataset       : {dataset_name} ({points} points)")
    print(f"Layers        : {network.layer_sizes}")
    print(f"Activation    : {network.activation.name}")
    print(f"Parameters    : {network.parameter_count()}")
    print(f"Schedule      : {train_cfg.get('schedule', 'chunked')}")
    print(f"Learn rate    : {train_cfg.get('learn_rate', 2.25)}")
    print(f"h             : {train_cfg.get('h', 0.0001)}")
    print("======================")


__all__ = ["run_pipeline", "load_preset", "presets", "merge_config", "build_network"]
