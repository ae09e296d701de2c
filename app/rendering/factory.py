from app.config.settings import Settings
from app.rendering.base import BasePageRenderer
from app.rendering.pdftoppm_adapter import PdftoppmRenderer
from app.rendering.pymupdf_adapter import PyMuPdfRenderer


class PageRendererFactory:
    """Creates the correct page renderer based on settings."""

    ADAPTERS: dict[str, type[BasePageRenderer]] = {
        "pymupdf": PyMuPdfRenderer,
        "pdftoppm": PdftoppmRenderer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePageRenderer:
        engine = settings.render_engine.lower()
        if engine not in cls.ADAPTERS:
            raise ValueError(
                f"Unknown render engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        if engine == "pdftoppm":
            return PdftoppmRenderer(
                temp_dir=settings.temp_dir,
                dpi=settings.render_dpi,
                poppler_path=settings.poppler_path,
            )
        return cls.ADAPTERS[engine](temp_dir=settings.temp_dir, dpi=settings.render_dpi)
