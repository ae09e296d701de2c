class ConversionError(Exception):
    """Raised when page one of a PDF cannot be turned into a JPEG image."""
