from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.exceptions import UploadValidationError
from app.api.schemas import ErrorResponse
from app.logging.logger import Log
from app.processor.exceptions import AnalysisFailedError

DEFAULT_FAILURE_MESSAGE = "Failed to analyze resume"
MISSING_FILE_MESSAGE = "Please upload a PDF file"
_FILE_FIELD_LOC = ("body", "file")


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(message=message).model_dump(by_alias=True)
    return JSONResponse(status_code=status_code, content=body)


async def _handle_upload_validation(request: Request, exc: UploadValidationError) -> JSONResponse:
    Log.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if any(tuple(error.get("loc", ())) == _FILE_FIELD_LOC for error in errors):
        # a "file" part sent as a plain form field carries no upload
        message = MISSING_FILE_MESSAGE
    elif errors:
        message = errors[0].get("msg", "Invalid request")
    else:
        message = "Invalid request"
    Log.warning(f"Rejected {request.method} {request.url.path}: {message}")
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def _handle_analysis_failed(request: Request, exc: AnalysisFailedError) -> JSONResponse:
    Log.error(f"Resume analysis error on {request.url.path}: {exc}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc) or DEFAULT_FAILURE_MESSAGE,
    )


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc) or DEFAULT_FAILURE_MESSAGE,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"success": false, "message": ...}``."""
    app.add_exception_handler(UploadValidationError, _handle_upload_validation)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(AnalysisFailedError, _handle_analysis_failed)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _handle_unexpected)
