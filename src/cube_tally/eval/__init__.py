from .evaluators import PowerEvaluator, ValidityEvaluator, get_evaluator

__all__ = ["PowerEvaluator", "ValidityEvaluator", "get_evaluator"]
