import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedPage:
    """JPEG image of the first page of a document."""

    jpeg_bytes: bytes
    mime_type: str = "image/jpeg"

    @property
    def base64_data(self) -> str:
        """Base64 text of the JPEG bytes, as sent inline to the AI model."""
        return base64.b64encode(self.jpeg_bytes).decode("ascii")
