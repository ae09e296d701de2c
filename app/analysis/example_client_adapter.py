"""Offline multimodal client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in EvaluatorFactory.
"""

from typing import ClassVar

from app.analysis.client_base import BaseVisionClient


class ExampleClientAdapter(BaseVisionClient):
    """Adapter that returns a fixed evaluation without any network calls.

    Selected with ``AI_PROVIDER=example`` for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "Match: 70%\n\n"
        "Keywords missing: none identified by the offline example client.\n\n"
        "Final thoughts: this is a placeholder evaluation; configure a real "
        "AI provider to analyze resumes."
    )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        text: str,
        image_base64: str,
        image_mime_type: str,
    ) -> str:
        _ = model, temperature, text, image_base64, image_mime_type
        return self.DEFAULT_RESPONSE
