"""Training loops, evaluation metrics and run pipelines."""

from .metrics import accuracy, count_correct, decision_boundary, evaluate
from .trainer import Trainer

__all__ = ["Trainer", "accuracy", "count_correct", "decision_boundary", "evaluate"]
