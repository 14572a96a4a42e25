from pon.evaluation.evaluator import evaluate
from pon.evaluation.apply import apply

__all__ = ["evaluate", "apply"]
