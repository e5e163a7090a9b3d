"""Prompt templates for the LLM dictionary oracle."""

from .oracle_prompt import ORACLE_SYSTEM_PROMPT, get_oracle_system_prompt, build_oracle_prompt

__all__ = [
    "ORACLE_SYSTEM_PROMPT",
    "get_oracle_system_prompt",
    "build_oracle_prompt",
]
