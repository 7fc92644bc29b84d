"""Instrument Engine.

Deterministic template rendering for correspondence instruments: fill a
document template from a field record, with estoppel deadline arithmetic
and optional AI-suggested proof points.
"""

__version__ = "1.0.0"
