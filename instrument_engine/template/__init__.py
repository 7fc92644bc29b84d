"""Instrument templates and the engine that dispatches to them.

This package contains:
- InstrumentTemplateEngine: Abstract base class for template engines
- DefaultTemplateEngine: Engine backed by the DocumentType-to-renderer mapping
- render: Convenience function using the default engine
"""

from instrument_engine.template.template_engine import (
    DEFAULT_RENDERERS,
    DefaultTemplateEngine,
    InstrumentTemplateEngine,
    render,
)

__all__ = [
    "DEFAULT_RENDERERS",
    "InstrumentTemplateEngine",
    "DefaultTemplateEngine",
    "render",
]
