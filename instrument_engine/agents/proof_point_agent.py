"""Proof point agent for AI-suggested conditional acceptance demands.

This module implements the ProofPointAgent that turns a free-text situation
description into an ordered list of proof points. The template engine only
ever sees the resulting list inside a FieldRecord.
"""

import json
import logging
import re
from typing import Any

from langchain_core.prompts import ChatPromptTemplate

from instrument_engine.agents.base_agent import BaseAgent
from instrument_engine.agents.prompts.proof_point_prompts import SYSTEM_PROMPT, USER_PROMPT
from instrument_engine.exceptions.suggestion_error import SuggestionError
from instrument_engine.models.field_record import FieldRecord
from instrument_engine.utils.input_validator import sanitize_situation

logger = logging.getLogger(__name__)

MIN_SUGGESTED_POINTS = 4

# "1. ...", "2) ...", "- ...", "* ..."
_LIST_MARKER = re.compile(r"^\s*(?:\d+[.)]|[-*•])\s+")


class ProofPointAgent(BaseAgent):
    """Agent that suggests proof points for a Conditional Acceptance.

    The agent:
    1. Validates and sanitizes the situation description
    2. Asks the LLM for a JSON object of demands
    3. Parses the response (JSON object, JSON list, or numbered lines)
    4. Returns at most ``config.max_proof_points`` points

    Attributes:
        llm: Language model instance (injected)
        config: Config instance (injected)
    """

    def suggest(self, situation: str | None) -> list[str]:
        """Suggest proof points for a situation.

        Args:
            situation: Free-text description of the situation

        Returns:
            Ordered list of proof-point strings

        Raises:
            InputValidationError: If the situation description is invalid
            SuggestionError: If the LLM fails or returns no usable points
        """
        situation = sanitize_situation(situation, self.config)
        logger.info(f"Generating proof points for situation: {situation[:100]}...")

        prompt = ChatPromptTemplate.from_messages([
            ("system", SYSTEM_PROMPT),
            ("human", USER_PROMPT),
        ])
        messages = prompt.format_messages(
            situation=situation,
            min_points=min(MIN_SUGGESTED_POINTS, self.config.max_proof_points),
            max_points=self.config.max_proof_points,
        )

        response = self.invoke_llm(messages)
        content = response.content if hasattr(response, "content") else str(response)
        if not isinstance(content, str) or not content.strip():
            raise SuggestionError("LLM returned empty response")

        logger.debug(f"LLM response: {content[:200]}...")

        points = parse_proof_points(content)
        if not points:
            raise SuggestionError(
                "Invalid response format from AI.",
                context={"content_preview": content[:200]}
            )

        points = points[: self.config.max_proof_points]
        logger.info(f"Generated {len(points)} proof points")
        return points

    def apply(self, fields: FieldRecord, situation: str | None = None) -> FieldRecord:
        """Return a copy of the field record with suggested proof points.

        Args:
            fields: Current field record
            situation: Situation description. Defaults to the record's
                ``situation_context``.

        Returns:
            New FieldRecord whose proof points are replaced by the suggestions
        """
        text = situation if situation is not None else fields.situation_context
        points = self.suggest(text)
        return fields.model_copy(update={"proof_points": points})

    @property
    def name(self) -> str:
        """Return agent name.

        Returns:
            String identifier for this agent
        """
        return "proof_point_agent"


def parse_proof_points(content: str) -> list[str]:
    """Parse proof points from an LLM response.

    Accepts, in order of preference:
    - a JSON object with a ``proofs`` list (optionally in a markdown code block)
    - a bare JSON list of strings
    - plain text with one numbered or bulleted point per line

    List markers are stripped from every point and blank points are dropped.

    Args:
        content: LLM response content

    Returns:
        List of proof points (empty if nothing could be parsed)
    """
    data = _load_json(content)

    if isinstance(data, dict):
        data = data.get("proofs")
    if isinstance(data, list):
        points = _clean([item for item in data if isinstance(item, str)])
        if points:
            return points

    lines = [line for line in content.splitlines() if _LIST_MARKER.match(line)]
    return _clean(lines)


def _load_json(content: str) -> Any:
    json_match = re.search(r"```(?:json)?\s*([\[{].*?[\]}])\s*```", content, re.DOTALL)
    if json_match:
        json_str = json_match.group(1)
    else:
        json_match = re.search(r"[\[{].*[\]}]", content, re.DOTALL)
        json_str = json_match.group(0) if json_match else content

    try:
        return json.loads(json_str)
    except json.JSONDecodeError:
        logger.debug("Response is not JSON, falling back to line parsing")
        return None


def _clean(points: list[str]) -> list[str]:
    cleaned = (_LIST_MARKER.sub("", point).strip() for point in points)
    return [point for point in cleaned if point]
