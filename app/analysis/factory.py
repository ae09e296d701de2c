from typing import ClassVar

from app.analysis.base import BaseEvaluator
from app.analysis.evaluator import Evaluator
from app.analysis.example_client_adapter import ExampleClientAdapter
from app.analysis.openai_client_adapter import OpenAIClientAdapter
from app.config.settings import Settings


class EvaluatorFactory:
    """Creates the configured evaluator."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseEvaluator:
        """Create an evaluator from application settings."""
        provider = settings.ai_provider.lower()
        if provider == "example":
            return Evaluator(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        client = OpenAIClientAdapter(
            api_key=settings.ai_api_key,
            timeout_seconds=settings.ai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Evaluator(
            client=client,
            model=settings.ai_model_name,
            temperature=settings.ai_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = (settings.ai_base_url or "").strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "ai_base_url is required for ai_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {supported}")
