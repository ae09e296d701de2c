import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from app.config.settings import Settings


@pytest.fixture(autouse=True)
def _isolate_ai_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials and overrides out of the tests."""
    for name in (
        "AI_API_KEY",
        "GOOGLE_API_KEY",
        "AI_PROVIDER",
        "AI_BASE_URL",
        "RENDER_ENGINE",
        "POPPLER_PATH",
        "PORT",
        "LOG_LEVEL",
        "APP_ENV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page resume PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Jane Doe - Senior Backend Engineer")
    c.drawString(72, 700, "Go, Python, PostgreSQL, Kubernetes")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_path(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "resume.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture()
def example_settings(tmp_path: Path) -> Settings:
    """Settings for the offline example AI provider with per-test directories."""
    return Settings(
        ai_provider="example",
        upload_dir=tmp_path / "uploads",
        temp_dir=tmp_path / "temp",
    )
