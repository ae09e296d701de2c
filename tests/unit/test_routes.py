from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from app.analysis.models import AnalysisResult
from app.config.settings import Settings
from app.main import create_app
from app.processor.exceptions import AnalysisFailedError

_FORM = {"jobDescription": "Senior backend engineer, 5 years Go", "analysisType": "percentage"}


@pytest.fixture()
def processor() -> MagicMock:
    mock = MagicMock()
    mock.analyze.return_value = AnalysisResult(
        analysis="Match: 78%\n\nKeywords missing: Kafka",
        analysis_type="percentage",
    )
    return mock


@pytest.fixture()
def client(example_settings: Settings, processor: MagicMock) -> TestClient:
    return TestClient(create_app(example_settings, processor=processor))


def _pdf_file(content: bytes = b"%PDF-1.4 fake") -> dict[str, tuple[str, bytes, str]]:
    return {"file": ("resume.pdf", content, "application/pdf")}


def _uploaded_files(settings: Settings) -> list[Path]:
    if not settings.upload_dir.exists():
        return []
    return list(settings.upload_dir.iterdir())


class TestAnalyzeValidation:
    def test_missing_file_is_400(self, client: TestClient, processor: MagicMock) -> None:
        response = client.post("/api/resume/analyze", data=_FORM)
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Please upload a PDF file"}
        processor.analyze.assert_not_called()

    def test_file_sent_as_text_field_is_missing_file(
        self, client: TestClient, processor: MagicMock
    ) -> None:
        response = client.post(
            "/api/resume/analyze",
            data={"jobDescription": "Go engineer", "analysisType": "review", "file": "oops"},
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Please upload a PDF file"}
        processor.analyze.assert_not_called()

    def test_empty_job_description_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/resume/analyze",
            data={"jobDescription": "", "analysisType": "review"},
            files=_pdf_file(),
        )
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Job description and analysis type are required",
        }

    def test_missing_analysis_type_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/resume/analyze",
            data={"jobDescription": "Go engineer"},
            files=_pdf_file(),
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Job description and analysis type are required"

    def test_blank_job_description_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/resume/analyze",
            data={"jobDescription": "   ", "analysisType": "review"},
            files=_pdf_file(),
        )
        assert response.status_code == 400

    def test_non_pdf_is_400(self, client: TestClient, example_settings: Settings) -> None:
        response = client.post(
            "/api/resume/analyze",
            data=_FORM,
            files={"file": ("resume.docx", b"PK..", "application/msword")},
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Only PDF files are allowed!"}
        assert _uploaded_files(example_settings) == []

    def test_oversized_pdf_is_400(self, tmp_path: Path, processor: MagicMock) -> None:
        settings = Settings(
            ai_provider="example",
            upload_dir=tmp_path / "uploads",
            temp_dir=tmp_path / "temp",
            max_upload_size_bytes=8,
        )
        client = TestClient(create_app(settings, processor=processor))
        response = client.post("/api/resume/analyze", data=_FORM, files=_pdf_file(b"x" * 9))
        assert response.status_code == 400
        assert response.json()["message"].startswith("File too large")
        assert _uploaded_files(settings) == []
        processor.analyze.assert_not_called()


class TestAnalyzeSuccess:
    def test_checks_content_type_once(
        self, example_settings: Settings, processor: MagicMock
    ) -> None:
        app = create_app(example_settings, processor=processor)
        store = app.state.upload_store
        with patch.object(
            store, "check_content_type", wraps=store.check_content_type
        ) as check:
            response = TestClient(app).post("/api/resume/analyze", data=_FORM, files=_pdf_file())
        assert response.status_code == 200
        check.assert_called_once_with("application/pdf")

    def test_returns_analysis(self, client: TestClient) -> None:
        response = client.post("/api/resume/analyze", data=_FORM, files=_pdf_file())
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Analysis completed successfully",
            "analysis": "Match: 78%\n\nKeywords missing: Kafka",
            "analysisType": "percentage",
        }

    def test_passes_saved_file_and_fields(
        self, client: TestClient, processor: MagicMock, example_settings: Settings
    ) -> None:
        seen: dict[str, object] = {}

        def analyze(file_path: Path, job_description: str, analysis_type: str) -> AnalysisResult:
            seen["exists"] = file_path.exists()
            seen["content"] = file_path.read_bytes()
            seen["parent"] = file_path.parent
            return AnalysisResult(analysis="ok", analysis_type=analysis_type)

        processor.analyze.side_effect = analyze
        client.post("/api/resume/analyze", data=_FORM, files=_pdf_file(b"%PDF-1.4 data"))

        assert seen == {
            "exists": True,
            "content": b"%PDF-1.4 data",
            "parent": example_settings.upload_dir,
        }
        _path, job_description, analysis_type = processor.analyze.call_args.args
        assert job_description == _FORM["jobDescription"]
        assert analysis_type == "percentage"

    def test_removes_upload_after_success(
        self, client: TestClient, example_settings: Settings
    ) -> None:
        client.post("/api/resume/analyze", data=_FORM, files=_pdf_file())
        assert _uploaded_files(example_settings) == []

    def test_unknown_analysis_type_is_accepted(
        self, client: TestClient, processor: MagicMock
    ) -> None:
        processor.analyze.return_value = AnalysisResult(analysis="ok", analysis_type="haiku")
        response = client.post(
            "/api/resume/analyze",
            data={"jobDescription": "Go engineer", "analysisType": "haiku"},
            files=_pdf_file(),
        )
        assert response.status_code == 200
        assert response.json()["analysisType"] == "haiku"


class TestAnalyzeFailure:
    def test_analysis_failure_is_500(self, client: TestClient, processor: MagicMock) -> None:
        processor.analyze.side_effect = AnalysisFailedError(
            "Analysis failed: Failed to convert PDF: No image files generated from PDF conversion"
        )
        response = client.post("/api/resume/analyze", data=_FORM, files=_pdf_file())
        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert "Failed to convert PDF" in body["message"]

    def test_empty_failure_message_uses_default(
        self, client: TestClient, processor: MagicMock
    ) -> None:
        processor.analyze.side_effect = AnalysisFailedError()
        response = client.post("/api/resume/analyze", data=_FORM, files=_pdf_file())
        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Failed to analyze resume"}

    def test_removes_upload_after_failure(
        self, client: TestClient, processor: MagicMock, example_settings: Settings
    ) -> None:
        processor.analyze.side_effect = AnalysisFailedError("Analysis failed: boom")
        client.post("/api/resume/analyze", data=_FORM, files=_pdf_file())
        assert _uploaded_files(example_settings) == []


class TestHealth:
    def test_reports_ok(self, client: TestClient) -> None:
        response = client.get("/api/resume/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["service"] == "Resume Analysis API"
        assert body["timestamp"].endswith("Z")
