"""Score cube game records read line by line from a text file."""

from .pipelines.evaluate import evaluate_power, evaluate_validity, run_evaluation

__all__ = ["evaluate_power", "evaluate_validity", "run_evaluation"]
