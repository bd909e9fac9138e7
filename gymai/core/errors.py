"""
Error taxonomy for the AI-assisted operations.

The deterministic calculators never raise these. The AI services raise them
internally and convert them into an ``AIFailure`` result at their boundary.
"""
from enum import Enum


class AIErrorKind(str, Enum):
    """Why an AI-assisted operation did not produce a result."""

    CONFIGURATION = "configuration"
    EMPTY_RESPONSE = "empty_response"
    INVALID_RESPONSE = "invalid_response"
    INVALID_REQUEST = "invalid_request"
    SERVICE = "service"


class AIServiceError(Exception):
    """Completion service or transport failure."""

    kind = AIErrorKind.SERVICE


class AIConfigurationError(AIServiceError):
    """No completion service is configured. Not retryable."""

    kind = AIErrorKind.CONFIGURATION


class EmptyAIResponseError(AIServiceError):
    """The completion service answered with no content."""

    kind = AIErrorKind.EMPTY_RESPONSE


class InvalidAIResponseError(AIServiceError):
    """The response was not JSON or did not match the expected schema."""

    kind = AIErrorKind.INVALID_RESPONSE
