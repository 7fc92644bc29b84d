"""Agent implementations for AI-assisted instrument drafting.

This package contains:
- BaseAgent: Abstract base class for all agents
- ProofPointAgent: Suggests proof points from a situation description
"""
