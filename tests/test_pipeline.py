import json
from pathlib import Path

import pytest

from finitenets.training import pipelines


def _config(run_dir, **train_overrides):
    config = {
        "data": {"name": "fruit", "options": {"n_points": 12, "seed": 0}},
        "model": {"hidden": [3], "activation": "sigmoid"},
        "train": {
            "epochs": 2,
            "learn_rate": 2.25,
            "h": 0.0001,
            "schedule": "chunked",
            "max_chunk_size_factor": 0.5,
            "seed": 11,
            "run_dir": str(run_dir),
            "enable_plots": False,
        },
    }
    config["train"].update(train_overrides)
    return config


def test_pipeline_produces_artifacts(tmp_path):
    config = _config(tmp_path / "run")
    result = pipelines.run_pipeline(config)

    assert Path(result.metrics_path).exists()
    manifest = json.loads(Path(result.manifest_path).read_text())
    assert manifest["config"]["train"]["seed"] == 11
    assert manifest["dataset"]["type"] == "fruit"
    assert manifest["network"]["layer_sizes"] == [2, 3, 2]
    assert manifest["network"]["activation"] == "sigmoid"
    assert manifest["network"]["parameters"] == 17

    records = [json.loads(line) for line in Path(result.metrics_path).read_text().splitlines()]
    assert [r["epoch"] for r in records] == [1, 2]
    assert all(r["seed"] == 11 for r in records)
    assert all(r["cost"] >= 0 for r in records)
    # chunk sizes 1..5 over 12 points: 12 + 6 + 4 + 3 + 3 chunks per epoch
    assert records[0]["learn_steps"] == 28
    assert result.steps == 56

    run_dir = Path(config["train"]["run_dir"])
    assert (run_dir / "metrics.csv").exists()
    assert json.loads((run_dir / "config.json").read_text()) == config
    assert not (run_dir / "cost.png").exists()


def test_pipeline_writes_plots_when_enabled(tmp_path):
    config = _config(tmp_path / "plots", schedule="full", epochs=3, enable_plots=True)
    config["train"]["boundary_resolution"] = 8
    pipelines.run_pipeline(config)
    assert (tmp_path / "plots" / "cost.png").exists()
    assert (tmp_path / "plots" / "boundary.png").exists()


def test_pipeline_rejects_mismatched_dimensions(tmp_path):
    config = _config(tmp_path / "bad")
    config["model"]["d_out"] = 3
    with pytest.raises(ValueError):
        pipelines.run_pipeline(config)


def test_pipeline_requires_all_sections():
    with pytest.raises(KeyError):
        pipelines.run_pipeline({"data": {"name": "fruit"}})


def test_presets_are_complete_and_isolated():
    names = set(pipelines.presets())
    assert {"fruit-sigmoid", "fruit-full-step", "blobs-tanh"} <= names
    preset = pipelines.load_preset("fruit-sigmoid")
    assert {"data", "model", "train"} <= set(preset)
    preset["train"]["epochs"] = 99
    assert pipelines.load_preset("fruit-sigmoid")["train"]["epochs"] == 1
    with pytest.raises(KeyError):
        pipelines.load_preset("missing")


def test_merge_config_is_recursive():
    base = {"train": {"epochs": 1, "seed": 2}, "model": {"hidden": [3]}}
    merged = pipelines.merge_config(base, {"train": {"epochs": 5}, "model": {"hidden": [4, 4]}})
    assert merged == {"train": {"epochs": 5, "seed": 2}, "model": {"hidden": [4, 4]}}
    assert base["train"]["epochs"] == 1
