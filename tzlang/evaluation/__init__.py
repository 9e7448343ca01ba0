from tzlang.evaluation.evaluator import evaluate, evaluate_program

__all__ = ["evaluate", "evaluate_program"]
