"""Base agent class for all agents in the system.

This module defines the abstract base class that all agents must implement,
following the Agent Pattern with dependency injection:
- Agents are stateless (inputs passed in, results returned)
- Dependencies (LLM, config) are injected, not created internally
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from langchain_core.language_models import BaseChatModel

from instrument_engine.config import Config, get_config
from instrument_engine.utils.rate_limiter import invoke_llm_with_retry

logger = logging.getLogger(__name__)


class BaseAgent(ABC):
    """Base class for all agents in the system.

    All concrete agent implementations must:
    1. Inherit from BaseAgent
    2. Implement the `name` property
    3. Accept LLM and config via constructor

    Attributes:
        llm: Language model instance (injected dependency)
        config: Config instance (injected dependency)
    """

    def __init__(self, llm: BaseChatModel, config: Config | None = None) -> None:
        """Initialize agent with dependencies.

        Args:
            llm: Language model instance to use for agent operations.
                Must be a BaseChatModel instance (e.g., ChatGroq).
            config: Optional Config instance. If not provided, uses get_config()

        Raises:
            TypeError: If llm is not a BaseChatModel instance
        """
        if not isinstance(llm, BaseChatModel):
            raise TypeError(
                f"llm must be a BaseChatModel instance, got {type(llm).__name__}"
            )

        self.llm = llm
        self.config = config if config is not None else get_config()

    def invoke_llm(self, messages: list[Any], **kwargs: Any) -> Any:
        """Invoke LLM with automatic retry logic for rate limits.

        All agents should use this method instead of calling self.llm.invoke()
        directly to ensure consistent retry behavior across all LLM calls.

        Args:
            messages: List of messages to send to the LLM
            **kwargs: Additional keyword arguments to pass to llm.invoke()

        Returns:
            Response from LLM

        Raises:
            SuggestionError: If all retries are exhausted
        """
        return invoke_llm_with_retry(self.llm, messages, config=self.config, **kwargs)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return agent name.

        Returns:
            String identifier for this agent
        """
        pass
