from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from app.api.exceptions import UploadValidationError
from app.logging.logger import Log
from app.utils.naming import unique_name

PDF_MIME_TYPE = "application/pdf"
_CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class UploadedDocument:
    """A PDF accepted into the upload directory for a single request."""

    path: Path
    filename: str
    mime_type: str
    size_bytes: int


class UploadStore:
    """Writes incoming PDFs under ``upload_dir`` and removes them afterwards."""

    def __init__(self, upload_dir: Path, max_size_bytes: int) -> None:
        self._upload_dir = upload_dir
        self._max_size_bytes = max_size_bytes

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def check_content_type(self, content_type: str | None) -> None:
        if content_type != PDF_MIME_TYPE:
            raise UploadValidationError("Only PDF files are allowed!")

    def save(self, stream: BinaryIO, filename: str) -> UploadedDocument:
        """Copy an upload stream to a uniquely named file.

        The content type is checked by the caller through
        ``check_content_type`` before the stream is read.

        Raises:
            UploadValidationError: if the stream exceeds the size limit. No
                file is left behind.
        """
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._upload_dir / unique_name("file", ".pdf")

        size = 0
        try:
            with path.open("wb") as out:
                while chunk := stream.read(_CHUNK_SIZE):
                    size += len(chunk)
                    if size > self._max_size_bytes:
                        raise UploadValidationError(
                            f"File too large. Maximum size is {self._max_size_label()}"
                        )
                    out.write(chunk)
        except Exception:
            self.discard(path)
            raise

        Log.info(f"Accepted upload '{filename}' as {path.name} ({size} bytes)")
        return UploadedDocument(
            path=path,
            filename=filename,
            mime_type=PDF_MIME_TYPE,
            size_bytes=size,
        )

    def discard(self, path: Path) -> None:
        """Delete an uploaded file. Failures are logged, never raised."""
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            Log.warning(f"Could not remove uploaded file {path}: {exc}")

    def _max_size_label(self) -> str:
        megabytes = self._max_size_bytes / (1024 * 1024)
        return f"{megabytes:g}MB"
