"""Prompts module for agent prompts.

This module contains the prompts used by the agents in the system.
"""

from instrument_engine.agents.prompts.proof_point_prompts import \
    SYSTEM_PROMPT as PROOF_POINT_SYSTEM_PROMPT
from instrument_engine.agents.prompts.proof_point_prompts import \
    USER_PROMPT as PROOF_POINT_USER_PROMPT

__all__ = [
    "PROOF_POINT_SYSTEM_PROMPT",
    "PROOF_POINT_USER_PROMPT",
]
