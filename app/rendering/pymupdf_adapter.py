from pathlib import Path

import pymupdf

from app.rendering.base import MUPDF_LOCK, BasePageRenderer
from app.rendering.exceptions import ConversionError


class PyMuPdfRenderer(BasePageRenderer):
    """Rasterizes the first PDF page in-process with PyMuPDF."""

    def _rasterize(self, pdf_path: Path, workdir: Path) -> None:
        with MUPDF_LOCK:
            with pymupdf.open(pdf_path) as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise ConversionError("PDF has no pages")
                pixmap = doc[0].get_pixmap(dpi=self._dpi)
            pixmap.save(
                str(workdir / f"{self.IMAGE_PREFIX}-1.jpg"),
                jpg_quality=self.JPEG_QUALITY,
            )
