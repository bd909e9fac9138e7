"""
Structured logging for the GymAI Microservice.

Deterministic calculators never log; routes log each request and the AI
services log every completion call and every failure they turn into a result.
"""
import logging
import sys

from gymai.core.config import settings
from gymai.core.errors import AIErrorKind

# Failures caused by the caller or deployment rather than the model
EXPECTED_FAILURES = (AIErrorKind.CONFIGURATION, AIErrorKind.INVALID_REQUEST)


def setup_logger(name: str = "gymai", level: str = settings.LOG_LEVEL) -> logging.Logger:
    """
    Create a configured logger instance.

    Args:
        name: Logger name for identification
        level: Level name, e.g. "INFO" or "DEBUG"

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(handler)

    return logger


# Global logger instance
logger = setup_logger()


def log_request(endpoint: str, method: str = "POST") -> None:
    """Log incoming API request."""
    logger.info(f"Request: {method} {endpoint}")


def log_error(context: str, error: Exception) -> None:
    """Log error with context."""
    logger.error(f"Error in {context}: {type(error).__name__}: {error}")


def log_ai_call(operation: str, model: str, temperature: float) -> None:
    """Log an outgoing completion request."""
    logger.info(f"AI Call: {operation} using {model} (temperature={temperature})")


def log_ai_failure(operation: str, kind: AIErrorKind, error: Exception) -> None:
    """
    Log a failed AI operation before it is returned as a failure result.

    Missing configuration and bad caller input are warnings; anything the
    model or the transport got wrong is an error.
    """
    msg = f"AI failure in {operation} [{kind.value}]: {type(error).__name__}: {error}"
    if kind in EXPECTED_FAILURES:
        logger.warning(msg)
    else:
        logger.error(msg)
