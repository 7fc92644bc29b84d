"""Input validation and sanitization utilities.

This module validates free text before it is sent to the AI suggestion
service:
- Situation description validation and sanitization
- Character validation and length limits
"""

import logging
import re
from typing import Any

from instrument_engine.config import get_config
from instrument_engine.exceptions.validation_error import InputValidationError

logger = logging.getLogger(__name__)

# Control characters that should be removed
CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')


def sanitize_situation(situation: str | None, config: Any | None = None) -> str:
    """Validate and sanitize a situation description.

    Validates the description against length limits and strips control
    characters. Raises InputValidationError if validation fails.

    Args:
        situation: Free-text description of the user's situation
        config: Optional Config instance. If not provided, uses get_config()

    Returns:
        Sanitized description (trimmed, control chars removed, whitespace collapsed)

    Raises:
        InputValidationError: If the description is empty, too short, or too long

    Example:
        ```python
        sanitize_situation("  Received a notice\\tfrom the county  ")
        # Returns: "Received a notice from the county"
        ```
    """
    if config is None:
        config = get_config()

    if situation is None or not situation.strip():
        raise InputValidationError(
            "Please describe your situation first.",
            context={"situation_length": 0}
        )

    sanitized = CONTROL_CHARS.sub(' ', situation)
    sanitized = re.sub(r'\s+', ' ', sanitized).strip()

    if len(sanitized) < config.min_situation_length:
        raise InputValidationError(
            f"Situation description is too short. Minimum length: "
            f"{config.min_situation_length} characters",
            context={
                "situation_length": len(sanitized),
                "min_length": config.min_situation_length
            }
        )

    if len(sanitized) > config.max_situation_length:
        raise InputValidationError(
            f"Situation description is too long. Maximum length: "
            f"{config.max_situation_length} characters",
            context={
                "situation_length": len(sanitized),
                "max_length": config.max_situation_length
            }
        )

    logger.debug(
        f"Situation sanitized: original_length={len(situation)}, "
        f"sanitized_length={len(sanitized)}"
    )

    return sanitized
