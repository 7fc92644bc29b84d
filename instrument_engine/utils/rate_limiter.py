"""Rate limiting and retry logic for LLM API calls.

This module provides utilities for handling rate limits and transient
failures in LLM API calls using exponential backoff.

The retry logic uses the tenacity library with configurable attempts and
backoff. Rate limit errors are detected and logged separately, and any
failure left after the last attempt is wrapped in a SuggestionError.
"""

import logging
from typing import Any

from tenacity import (
    RetryCallState,
    Retrying,
    after_log,
    before_sleep_log,
    stop_after_attempt,
    wait_exponential,
)

from instrument_engine.config import get_config
from instrument_engine.exceptions.suggestion_error import SuggestionError

logger = logging.getLogger(__name__)


def _is_rate_limit_error(exception: Exception) -> bool:
    """Check if exception is a rate limit error.

    Detects various forms of rate limit errors from LLM APIs:
    - HTTP 429 (Too Many Requests)
    - Rate limit exceptions from LangChain/Groq
    - Quota exceeded errors

    Args:
        exception: Exception to check

    Returns:
        True if exception appears to be a rate limit error, False otherwise
    """
    error_str = str(exception).lower()
    error_type = type(exception).__name__.lower()

    rate_limit_indicators = [
        "rate limit",
        "rate_limit",
        "ratelimit",
        "429",
        "too many requests",
        "quota exceeded",
        "quota_exceeded",
        "throttle",
    ]

    if any(indicator in error_str for indicator in rate_limit_indicators):
        return True

    if any(indicator in error_type for indicator in rate_limit_indicators):
        return True

    if getattr(exception, "status_code", None) == 429:
        return True

    response = getattr(exception, "response", None)
    if getattr(response, "status_code", None) == 429:
        return True

    return False


class RateLimitError(Exception):
    """Exception raised when rate limit is detected.

    Used internally to tag rate limit failures so they are logged and
    reported distinctly from other API errors.
    """

    def __init__(self, original_exception: Exception) -> None:
        """Initialize rate limit error.

        Args:
            original_exception: The original exception that was identified as a rate limit error
        """
        super().__init__(f"Rate limit error: {original_exception}")
        self.original_exception = original_exception


def _log_retry_reason(retry_state: RetryCallState) -> bool:
    """Retry on every exception, logging rate limits at WARNING."""
    if retry_state.outcome is None:
        return False

    exception = retry_state.outcome.exception()
    if exception is None:
        return False

    if isinstance(exception, RateLimitError):
        logger.warning(
            f"Rate limit error, retrying (attempt {retry_state.attempt_number})"
        )
    else:
        logger.debug(
            f"LLM call failed, retrying (attempt {retry_state.attempt_number}): "
            f"{type(exception).__name__}: {str(exception)[:200]}"
        )
    return True


def invoke_llm_with_retry(
    llm: Any,
    messages: list[Any],
    config: Any | None = None,
    **kwargs: Any
) -> Any:
    """Invoke LLM with automatic retry logic.

    Wraps ``llm.invoke()`` with exponential backoff. Configuration is read
    from Config:
    - llm_retry_attempts: Maximum number of attempts (default: 3)
    - llm_retry_backoff_min: Minimum backoff time in seconds (default: 1.0)
    - llm_retry_backoff_max: Maximum backoff time in seconds (default: 30.0)

    Args:
        llm: Language model instance (BaseChatModel)
        messages: List of messages to send to the LLM
        config: Optional Config instance. If not provided, uses get_config()
        **kwargs: Additional keyword arguments to pass to llm.invoke()

    Returns:
        Response from LLM

    Raises:
        SuggestionError: If all retries are exhausted
    """
    if config is None:
        config = get_config()

    def _invoke() -> Any:
        try:
            return llm.invoke(messages, **kwargs)
        except Exception as e:
            if _is_rate_limit_error(e):
                raise RateLimitError(e) from e
            raise

    retrying = Retrying(
        stop=stop_after_attempt(config.llm_retry_attempts),
        wait=wait_exponential(
            multiplier=1,
            min=config.llm_retry_backoff_min,
            max=config.llm_retry_backoff_max,
        ),
        retry=_log_retry_reason,
        reraise=True,
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.DEBUG),
    )

    try:
        return retrying(_invoke)
    except RateLimitError as e:
        raise SuggestionError(
            "LLM API rate limit exceeded after retries",
            context={
                "error": str(e.original_exception),
                "retry_attempts": config.llm_retry_attempts,
            }
        ) from e.original_exception
    except Exception as e:
        raise SuggestionError(
            "LLM API call failed after retries",
            context={
                "error": str(e),
                "error_type": type(e).__name__,
                "retry_attempts": config.llm_retry_attempts,
            }
        ) from e
