"""
Text-completion capability backed by the OpenAI API.

The AI services only depend on ``CompletionService``; this module provides
the OpenAI implementation and the dependency that resolves it from config.
"""
import logging
from functools import lru_cache
from typing import Optional, Protocol

import openai
from openai import AsyncOpenAI
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from gymai.core.config import settings
from gymai.core.logger import logger, log_ai_call


class CompletionService(Protocol):
    """Anything that turns a system + user prompt into raw response text."""

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        ...


# Per-call timeout: 10s to connect, OPENAI_TIMEOUT overall.
# Prevents a stalled OpenAI stream from hanging a uvicorn worker forever.
OPENAI_TIMEOUT = openai.Timeout(settings.OPENAI_TIMEOUT, connect=10.0)

# Tenacity retry policy: exponential backoff 2s→10s
# Only retries transient errors: rate limits and connection failures
_openai_retry = retry(
    stop=stop_after_attempt(settings.OPENAI_MAX_ATTEMPTS),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type((openai.RateLimitError, openai.APIConnectionError)),
    before_sleep=before_sleep_log(logging.getLogger(__name__), logging.WARNING),
    reraise=True,
)


class OpenAICompletionService:
    """Chat-completions client that always asks for a JSON object."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = settings.TEMPERATURE_ADAPTATION,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model or settings.OPENAI_MODEL
        self.temperature = temperature
        self.client = client or AsyncOpenAI(api_key=api_key or settings.OPENAI_API_KEY)

    @_openai_retry
    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Call OpenAI Chat API in JSON mode.

        Retries automatically on RateLimitError / APIConnectionError.

        Args:
            system_prompt: System context
            user_prompt: User request

        Returns:
            Raw message content, "" when the model returned nothing

        Raises:
            openai.OpenAIError: If the call fails or all retries are exhausted
        """
        log_ai_call("Chat API", self.model, self.temperature)

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt}
        ]

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            response_format={"type": "json_object"},
            timeout=OPENAI_TIMEOUT,
        )

        if not response.choices:
            return ""
        content = response.choices[0].message.content or ""
        logger.info("Chat API call successful")
        return content


@lru_cache(maxsize=4)
def _build_service(api_key: str, model: str, temperature: float) -> OpenAICompletionService:
    return OpenAICompletionService(api_key=api_key, model=model, temperature=temperature)


def get_completion_service() -> Optional[CompletionService]:
    """
    FastAPI dependency resolving the configured completion service.

    Returns None when no API key is configured; AI operations then fail
    fast with a configuration error.
    """
    if not settings.OPENAI_API_KEY:
        return None
    return _build_service(
        settings.OPENAI_API_KEY,
        settings.OPENAI_MODEL,
        settings.TEMPERATURE_ADAPTATION,
    )


def get_analysis_completion_service() -> Optional[CompletionService]:
    """Completion service for meal analysis, at TEMPERATURE_ANALYSIS."""
    if not settings.OPENAI_API_KEY:
        return None
    return _build_service(
        settings.OPENAI_API_KEY,
        settings.OPENAI_MODEL,
        settings.TEMPERATURE_ANALYSIS,
    )
