import subprocess
from pathlib import Path

from app.logging.logger import Log
from app.rendering.base import BasePageRenderer
from app.rendering.exceptions import ConversionError


class PdftoppmRenderer(BasePageRenderer):
    """Rasterizes the first PDF page with Poppler's ``pdftoppm`` binary.

    ``poppler_path`` is the directory that holds the binary; when unset the
    binary is looked up on ``PATH``.
    """

    BINARY = "pdftoppm"

    def __init__(
        self,
        *,
        temp_dir: Path,
        dpi: int = 150,
        poppler_path: str | None = None,
    ) -> None:
        super().__init__(temp_dir=temp_dir, dpi=dpi)
        self._poppler_path = poppler_path

    @property
    def binary(self) -> str:
        if self._poppler_path:
            return str(Path(self._poppler_path) / self.BINARY)
        return self.BINARY

    def _rasterize(self, pdf_path: Path, workdir: Path) -> None:
        command = [
            self.binary,
            "-jpeg",
            "-jpegopt",
            f"quality={self.JPEG_QUALITY}",
            "-f",
            "1",
            "-l",
            "1",
            "-r",
            str(self._dpi),
            str(pdf_path),
            str(workdir / self.IMAGE_PREFIX),
        ]
        Log.debug(f"Running {' '.join(command)}")
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ConversionError(f"Cannot run {self.binary}: {exc}") from exc

        if completed.returncode != 0:
            raise ConversionError(
                f"{self.BINARY} exited with status {completed.returncode}: "
                f"{completed.stderr.strip()}"
            )
