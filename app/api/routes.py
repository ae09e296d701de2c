from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from app.api.errors import MISSING_FILE_MESSAGE
from app.api.exceptions import UploadValidationError
from app.api.schemas import AnalysisResponse, HealthResponse
from app.api.uploads import UploadStore
from app.processor.processor import Processor

SERVICE_NAME = "Resume Analysis API"

router = APIRouter(prefix="/api/resume", tags=["resume"])


def get_processor(request: Request) -> Processor:
    return request.app.state.processor


def get_upload_store(request: Request) -> UploadStore:
    return request.app.state.upload_store


@router.post("/analyze", response_model=AnalysisResponse)
def analyze_resume(
    processor: Annotated[Processor, Depends(get_processor)],
    upload_store: Annotated[UploadStore, Depends(get_upload_store)],
    file: Annotated[UploadFile | None, File()] = None,
    job_description: Annotated[str | None, Form(alias="jobDescription")] = None,
    analysis_type: Annotated[str | None, Form(alias="analysisType")] = None,
) -> AnalysisResponse:
    """Render page one of the uploaded resume and have the AI model evaluate it.

    Runs in FastAPI's thread pool. The uploaded file is removed on every path.
    """
    if file is None:
        raise UploadValidationError(MISSING_FILE_MESSAGE)
    upload_store.check_content_type(file.content_type)
    if not (job_description and job_description.strip()) or not (
        analysis_type and analysis_type.strip()
    ):
        raise UploadValidationError("Job description and analysis type are required")

    document = upload_store.save(file.file, file.filename or "")
    try:
        result = processor.analyze(document.path, job_description, analysis_type)
    finally:
        upload_store.discard(document.path)

    return AnalysisResponse(analysis=result.analysis, analysis_type=result.analysis_type)


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return HealthResponse(
        service=SERVICE_NAME,
        timestamp=timestamp.replace("+00:00", "Z"),
    )
