class AIClientError(Exception):
    """Raised when the AI model call does not yield usable text."""


class EmptyResponseError(AIClientError):
    """Raised when the AI model returns no text."""


class ApiCallFailedError(AIClientError):
    """Raised when the AI provider call fails for an unclassified reason."""


class InvalidApiKeyError(AIClientError):
    """Raised when the AI provider rejects the configured API key."""


class QuotaExceededError(AIClientError):
    """Raised when the AI provider account has run out of quota."""


class RateLimitedError(AIClientError):
    """Raised when the AI provider throttles the request."""


class PromptTemplateError(Exception):
    """Raised when a bundled prompt template cannot be loaded."""
