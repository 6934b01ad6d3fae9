from lispy.evaluation.evaluator import evaluate, evaluate_sexpr
from lispy.evaluation.apply import apply

__all__ = ["evaluate", "evaluate_sexpr", "apply"]
