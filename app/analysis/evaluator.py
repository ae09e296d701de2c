"""AI-powered resume evaluator."""

from app.analysis.base import BaseEvaluator
from app.analysis.client_base import BaseVisionClient
from app.analysis.exceptions import EmptyResponseError
from app.analysis.models import AnalysisRequest
from app.logging.logger import Log


def build_text_part(prompt: str, job_description: str) -> str:
    return f"{prompt}\n\nJob Description: {job_description}"


class Evaluator(BaseEvaluator):
    """Sends the instruction, job description and page image to an AI provider."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        model: str,
        temperature: float = 0.4,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))

    def evaluate(self, request: AnalysisRequest, prompt: str) -> str:
        """Return the model's evaluation of the rendered resume page."""
        text = build_text_part(prompt, request.job_description)
        Log.debug(f"Evaluation prompt:\n{text}")

        reply = self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            text=text,
            image_base64=request.page.base64_data,
            image_mime_type=request.page.mime_type,
        )
        if not reply or not reply.strip():
            raise EmptyResponseError("No response text from AI model")

        Log.debug(f"AI raw response:\n{reply}")
        Log.info(f"Evaluation complete: {len(reply)} chars returned by {self._model}")
        return reply
