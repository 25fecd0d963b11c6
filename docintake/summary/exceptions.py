class SummaryError(Exception):
    """Base exception for AI report generation."""


class AIRequestFailedError(SummaryError):
    """Raised when the AI endpoint is unreachable or returns a non-2xx / empty answer."""


class InvalidAIResponseError(SummaryError):
    """Raised when the model output is not a complete, well-formed report."""
