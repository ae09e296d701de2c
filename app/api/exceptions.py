class UploadValidationError(Exception):
    """Raised when an analysis request is missing its file or fields, or the file is rejected."""
