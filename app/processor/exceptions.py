class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class AnalysisFailedError(ProcessorError):
    """Raised when any step of the resume analysis pipeline fails."""
