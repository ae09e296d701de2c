from app.analysis.base import BaseEvaluator
from app.analysis.evaluator import Evaluator
from app.analysis.factory import EvaluatorFactory
from app.analysis.prompt_loader import select_prompt

__all__ = ["BaseEvaluator", "Evaluator", "EvaluatorFactory", "select_prompt"]
