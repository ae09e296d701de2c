import httpx
import openai

from app.analysis.client_base import BaseVisionClient
from app.analysis.error_mapping import translate_api_error
from app.analysis.exceptions import EmptyResponseError


class OpenAIClientAdapter(BaseVisionClient):
    """Multimodal client built on the OpenAI-compatible chat API.

    Works against OpenAI itself and any gateway that speaks the same
    protocol, including Gemini's OpenAI endpoint.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
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
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": text},
                            {
                                "type": "image_url",
                                "image_url": {
                                    "url": f"data:{image_mime_type};base64,{image_base64}"
                                },
                            },
                        ],
                    }
                ],
            )
        except (openai.APIError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise translate_api_error(exc) from exc

        if not response.choices:
            raise EmptyResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise EmptyResponseError("AI returned empty response")
        return content
