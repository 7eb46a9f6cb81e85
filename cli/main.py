"""Command line entry point for finitenets training runs."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable

from finitenets.core.activations import ActivationType
from finitenets.training import pipelines


def _format_result(result) -> str:
    payload = {
        "steps": result.steps,
        "metrics": result.metrics_path,
        "manifest": result.manifest_path,
        "cost": result.final_cost,
        "accuracy": result.final_accuracy,
    }
    return json.dumps(payload, sort_keys=True)


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    preset_names = sorted(pipelines.presets().keys())
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--preset",
        choices=preset_names,
        default="fruit-sigmoid",
        help="Preset configuration to execute",
    )
    parser.add_argument(
        "--config", type=Path, help="Optional JSON/YAML config override"
    )
    parser.add_argument(
        "--enable-plots", action="store_true", help="Write cost and boundary plots"
    )
    parser.add_argument(
        "--activation",
        choices=[member.value for member in ActivationType],
        help="Override the activation shared by every layer",
    )
    parser.add_argument("--learn-rate", type=float, help="Override the learn rate")
    parser.add_argument("--h", type=float, help="Override the finite-difference step")
    parser.add_argument("--epochs", type=int, help="Override the number of epochs")
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed used for weight initialisation",
    )
    parser.add_argument("--run-dir", type=Path, help="Directory for run artifacts")
    parser.add_argument(
        "--list-presets", action="store_true", help="List available presets and exit"
    )
    parser.add_argument(
        "--dump-config", type=Path, help="Dump the resolved config to a JSON file"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _load_override(path: Path) -> dict:
    text = path.read_text()
    if path.suffix in {".yml", ".yaml"}:
        import yaml

        return yaml.safe_load(text) or {}
    return json.loads(text)


def resolve_config(args: argparse.Namespace) -> dict:
    config = pipelines.load_preset(args.preset)

    if args.config:
        override = _load_override(args.config)
        if {"data", "model", "train"} <= set(override.keys()):
            config = json.loads(json.dumps(override))
        else:
            config = pipelines.merge_config(config, override)

    train = config.setdefault("train", {})
    if args.enable_plots:
        train["enable_plots"] = True
    if args.learn_rate is not None:
        train["learn_rate"] = float(args.learn_rate)
    if args.h is not None:
        train["h"] = float(args.h)
    if args.epochs is not None:
        train["epochs"] = int(args.epochs)
    if args.seed is not None:
        train["seed"] = int(args.seed)
    if args.run_dir is not None:
        train["run_dir"] = str(args.run_dir)
    if args.activation:
        config.setdefault("model", {})["activation"] = args.activation
    return config


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        for name in sorted(pipelines.presets().keys()):
            print(name)
        raise SystemExit(0)

    config = resolve_config(args)

    if args.dump_config:
        args.dump_config.parent.mkdir(parents=True, exist_ok=True)
        args.dump_config.write_text(json.dumps(config, indent=2))

    result = pipelines.run_pipeline(config)
    print(_format_result(result))


if __name__ == "__main__":
    main()
