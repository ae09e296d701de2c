"""Translation of AI provider failures into user-facing error types.

Typed ``openai`` errors are classified first. Anything else falls back to a
case-sensitive substring check on the error message.
"""

import openai

from app.analysis.exceptions import (
    AIClientError,
    ApiCallFailedError,
    InvalidApiKeyError,
    QuotaExceededError,
    RateLimitedError,
)

INVALID_API_KEY_MESSAGE = "Invalid API key. Please check your API key."
QUOTA_EXCEEDED_MESSAGE = "API quota exceeded. Please try again later."
RATE_LIMITED_MESSAGE = "API rate limit exceeded. Please try again later."


def translate_api_error(exc: Exception) -> AIClientError:
    """Map a provider exception to the matching AIClientError subclass.

    The returned error is not raised here; callers raise it ``from exc``.
    """
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return InvalidApiKeyError(INVALID_API_KEY_MESSAGE)
    if isinstance(exc, openai.RateLimitError):
        if _mentions_quota(exc):
            return QuotaExceededError(QUOTA_EXCEEDED_MESSAGE)
        return RateLimitedError(RATE_LIMITED_MESSAGE)

    message = str(exc)
    if "API_KEY" in message:
        return InvalidApiKeyError(INVALID_API_KEY_MESSAGE)
    if "QUOTA_EXCEEDED" in message:
        return QuotaExceededError(QUOTA_EXCEEDED_MESSAGE)
    if "RATE_LIMIT" in message:
        return RateLimitedError(RATE_LIMITED_MESSAGE)
    return ApiCallFailedError(f"AI API call failed: {message}")


def _mentions_quota(exc: openai.APIStatusError) -> bool:
    parts = [str(exc), str(exc.body or ""), str(getattr(exc, "code", "") or "")]
    return "quota" in " ".join(parts).lower()
