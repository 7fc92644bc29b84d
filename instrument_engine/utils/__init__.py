"""Utility helpers for input validation and LLM retry handling."""
