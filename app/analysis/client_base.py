from abc import ABC, abstractmethod


class BaseVisionClient(ABC):
    """Contract for provider-specific multimodal AI clients."""

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        text: str,
        image_base64: str,
        image_mime_type: str,
    ) -> str:
        """Send one text part plus one inline image and return the reply text.

        Raises:
            AIClientError: on any provider failure.
        """
