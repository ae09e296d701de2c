import shutil
import threading
from abc import ABC, abstractmethod
from pathlib import Path

import pymupdf

from app.logging.logger import Log
from app.rendering.exceptions import ConversionError
from app.rendering.models import RenderedPage
from app.utils.naming import unique_name

# MuPDF is not thread-safe; every pymupdf call goes through this lock.
MUPDF_LOCK = threading.Lock()


class BasePageRenderer(ABC):
    """Contract for all PDF first-page renderers.

    Every call to ``render`` works inside its own uniquely named directory
    under ``temp_dir`` and removes that directory before returning, so
    concurrent renders never see each other's files and nothing accumulates.
    Subclasses only implement ``_rasterize``.
    """

    IMAGE_PREFIX = "page"
    IMAGE_SUFFIXES = (".jpg", ".jpeg")
    JPEG_QUALITY = 100

    def __init__(self, *, temp_dir: Path, dpi: int = 150) -> None:
        self._temp_dir = temp_dir
        self._dpi = dpi

    def render(self, pdf_path: Path) -> RenderedPage:
        """Rasterize page one of ``pdf_path`` into JPEG bytes.

        Args:
            pdf_path: Path to a PDF file. Pages after the first are ignored.

        Returns:
            RenderedPage holding the JPEG bytes.

        Raises:
            ConversionError: if the file is missing or corrupt, the engine
                fails, or no readable image is produced.
        """
        workdir = self._temp_dir / unique_name("render")
        try:
            if not pdf_path.is_file():
                raise FileNotFoundError(f"PDF not found: {pdf_path}")
            workdir.mkdir(parents=True)
            Log.debug(f"Rasterizing {pdf_path.name} into {workdir}")
            self._rasterize(pdf_path, workdir)
            image_path = self._find_image(workdir)
            jpeg_bytes = self._read_image(image_path)
        except Exception as exc:
            Log.error(f"PDF conversion failed for {pdf_path.name}: {exc}")
            raise ConversionError(f"Failed to convert PDF: {exc}") from exc
        finally:
            self._cleanup(workdir)

        Log.info(f"Rendered first page of {pdf_path.name}: {len(jpeg_bytes)} bytes")
        return RenderedPage(jpeg_bytes=jpeg_bytes)

    @abstractmethod
    def _rasterize(self, pdf_path: Path, workdir: Path) -> None:
        """Write page one of ``pdf_path`` as ``{IMAGE_PREFIX}*.jpg`` into ``workdir``."""

    def _find_image(self, workdir: Path) -> Path:
        candidates = sorted(
            path
            for path in workdir.iterdir()
            if path.name.startswith(self.IMAGE_PREFIX)
            and path.suffix.lower() in self.IMAGE_SUFFIXES
        )
        if not candidates:
            raise ConversionError("No image files generated from PDF conversion")
        return candidates[0]

    def _read_image(self, image_path: Path) -> bytes:
        try:
            with MUPDF_LOCK:
                pixmap = pymupdf.Pixmap(str(image_path))
                return pixmap.tobytes("jpg", jpg_quality=self.JPEG_QUALITY)
        except Exception as exc:
            Log.warning(f"Image decode failed, reading raw bytes instead: {exc}")
            return image_path.read_bytes()

    @staticmethod
    def _cleanup(workdir: Path) -> None:
        if not workdir.exists():
            return
        try:
            shutil.rmtree(workdir)
        except OSError as exc:
            Log.warning(f"Could not remove render directory {workdir}: {exc}")
