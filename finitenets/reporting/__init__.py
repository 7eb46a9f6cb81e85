"""Reporting utilities for finitenets."""

from .artifacts import write_manifest
from .metrics import CsvSink, JsonlSink
from .plots import PlotAdapter, plot_decision_boundary

__all__ = ["write_manifest", "CsvSink", "JsonlSink", "PlotAdapter", "plot_decision_boundary"]
