"""Data models for instrument rendering.

This package contains:
- FieldRecord: User-supplied field values
- DocumentType: Closed selector of templates, with families and process phases
- RenderContext: Optional date arguments for deadline templates
"""

from instrument_engine.models.document_type import (
    REMEDY_DOCUMENTS,
    TRUST_DOCUMENTS,
    DocumentFamily,
    DocumentType,
    ProcessPhase,
    documents_for_family,
    process_phase,
    requires_trust_fields,
)
from instrument_engine.models.field_record import FieldRecord
from instrument_engine.models.render_context import RenderContext

__all__ = [
    "REMEDY_DOCUMENTS",
    "TRUST_DOCUMENTS",
    "DocumentFamily",
    "DocumentType",
    "FieldRecord",
    "ProcessPhase",
    "RenderContext",
    "documents_for_family",
    "process_phase",
    "requires_trust_fields",
]
