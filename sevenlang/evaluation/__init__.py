from sevenlang.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
