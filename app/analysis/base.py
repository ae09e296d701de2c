from abc import ABC, abstractmethod

from app.analysis.models import AnalysisRequest


class BaseEvaluator(ABC):
    """Contract for all resume evaluators."""

    @abstractmethod
    def evaluate(self, request: AnalysisRequest, prompt: str) -> str:
        """Ask the AI model to evaluate the rendered resume page.

        Args:
            request: Job description, analysis category and rendered page.
            prompt: Instruction template chosen for the analysis category.

        Returns:
            The model's evaluation text, never empty.

        Raises:
            AIClientError: on any failure, including an empty reply.
        """
