"""Template engine that turns a field record into an instrument.

This module implements the InstrumentTemplateEngine abstract base class and
the default implementation that dispatches each DocumentType to its
renderer through a closed mapping.

Example:
    ```python
    from datetime import date

    from instrument_engine.models.document_type import DocumentType
    from instrument_engine.models.field_record import FieldRecord
    from instrument_engine.models.render_context import RenderContext
    from instrument_engine.template.template_engine import DefaultTemplateEngine

    engine = DefaultTemplateEngine(issue_date=date(2024, 1, 1))
    text = engine.render(
        DocumentType.ESTOPPEL_10,
        FieldRecord(man_name="John Henry", creditor="ACME Corp"),
        RenderContext(start_date=date(2024, 1, 1)),
    )
    ```
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import date
from functools import partial
from typing import Any, Callable, Optional

from pydantic import ValidationError

from instrument_engine.models.document_type import ESTOPPEL_DAY_OFFSETS, DocumentType
from instrument_engine.models.field_record import FieldRecord
from instrument_engine.models.render_context import RenderContext
from instrument_engine.template import remedy_templates, trust_templates

logger = logging.getLogger(__name__)

Renderer = Callable[[FieldRecord, RenderContext, date], str]

MISSING_RENDERER_MESSAGE = "No generator found for document type: {doc_type}"

DEFAULT_RENDERERS: dict[DocumentType, Renderer] = {
    DocumentType.CONDITIONAL_ACCEPTANCE: remedy_templates.render_conditional_acceptance,
    DocumentType.ESTOPPEL_10: partial(
        remedy_templates.render_estoppel_notice,
        default_offset=ESTOPPEL_DAY_OFFSETS[DocumentType.ESTOPPEL_10],
    ),
    DocumentType.ESTOPPEL_28: partial(
        remedy_templates.render_estoppel_notice,
        default_offset=ESTOPPEL_DAY_OFFSETS[DocumentType.ESTOPPEL_28],
    ),
    DocumentType.FAULT_AND_CURE: remedy_templates.render_fault_and_cure,
    DocumentType.AFFIDAVIT_OF_STATUS: remedy_templates.render_affidavit_of_status,
    DocumentType.NOTICE_TO_AGENT: remedy_templates.render_notice_to_agent,
    DocumentType.DECLARATION_OF_TRUST: trust_templates.render_declaration_of_trust,
    DocumentType.APPOINTMENT_OF_TRUSTEE: trust_templates.render_appointment_of_trustee,
    DocumentType.PROOF_OF_FUNDS: trust_templates.render_proof_of_funds,
    DocumentType.TRUST_AMENDMENT: trust_templates.render_trust_amendment,
    DocumentType.ASSET_TRANSFER: trust_templates.render_asset_transfer,
}


class InstrumentTemplateEngine(ABC):
    """Abstract base class for instrument template engines.

    This class follows the Template Method pattern: :meth:`render` normalises
    its inputs, asks :meth:`get_renderer` for the renderer of the selected
    type, and falls back to a diagnostic string when there is none.
    Rendering never raises for a known input shape.

    The issue date stamped on letters is fixed when the engine is created, so
    a render call is a pure function of its arguments.

    Attributes:
        issue_date: Date stamped in letter headers (defaults to today)
    """

    def __init__(self, issue_date: date | None = None) -> None:
        """Initialize the engine.

        Args:
            issue_date: Date stamped on rendered letters (defaults to the
                current date if None)
        """
        self.issue_date = issue_date if issue_date else date.today()

    @abstractmethod
    def get_renderer(self, doc_type: DocumentType) -> Optional[Renderer]:
        """Return the renderer registered for a document type.

        Args:
            doc_type: Selected document type

        Returns:
            Renderer callable, or None when nothing is registered

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError("Subclasses must implement get_renderer")

    def render(
        self,
        doc_type: DocumentType | str,
        fields: FieldRecord | Mapping[str, Any] | None = None,
        context: RenderContext | Mapping[str, Any] | None = None,
    ) -> str:
        """Render an instrument.

        Args:
            doc_type: DocumentType or its string value (e.g. ``"CA"``)
            fields: Field record, or a mapping validated into one
            context: Optional start date and day offset for estoppel notices.
                An invalid context is logged and treated as empty.

        Returns:
            Rendered instrument text, or the "No generator found" message
            when the type has no renderer
        """
        fields = _as_field_record(fields)
        context = _as_render_context(context)

        resolved = _as_document_type(doc_type)
        renderer = self.get_renderer(resolved) if resolved is not None else None
        if renderer is None:
            value = doc_type.value if isinstance(doc_type, DocumentType) else doc_type
            logger.warning(f"No renderer registered for document type {value!r}")
            return MISSING_RENDERER_MESSAGE.format(doc_type=value)

        logger.debug(f"Rendering {resolved.label} dated {self.issue_date.isoformat()}")
        return renderer(fields, context, self.issue_date)


class DefaultTemplateEngine(InstrumentTemplateEngine):
    """Default engine backed by a DocumentType-to-renderer mapping.

    Adding a document type means adding one entry to the mapping.

    Example:
        ```python
        engine = DefaultTemplateEngine(
            issue_date=date(2024, 1, 1),
            renderers={**DEFAULT_RENDERERS, DocumentType.NOTICE_TO_AGENT: my_renderer},
        )
        ```
    """

    def __init__(
        self,
        issue_date: date | None = None,
        renderers: Mapping[DocumentType, Renderer] | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            issue_date: Date stamped on rendered letters (defaults to today)
            renderers: Optional replacement renderer mapping
        """
        super().__init__(issue_date=issue_date)
        self.renderers: dict[DocumentType, Renderer] = dict(
            DEFAULT_RENDERERS if renderers is None else renderers
        )

    def get_renderer(self, doc_type: DocumentType) -> Optional[Renderer]:
        """Look up the renderer for a document type in the mapping."""
        return self.renderers.get(doc_type)


def render(
    doc_type: DocumentType | str,
    fields: FieldRecord | Mapping[str, Any] | None = None,
    context: RenderContext | Mapping[str, Any] | None = None,
    issue_date: date | None = None,
) -> str:
    """Render an instrument with the default engine.

    Args:
        doc_type: DocumentType or its string value
        fields: Field record or mapping
        context: Optional start date and day offset
        issue_date: Date stamped on the letter (defaults to today)

    Returns:
        Rendered instrument text
    """
    return DefaultTemplateEngine(issue_date=issue_date).render(doc_type, fields, context)


def _as_document_type(value: Any) -> Optional[DocumentType]:
    if isinstance(value, DocumentType):
        return value
    try:
        return DocumentType(value)
    except ValueError:
        return None


def _as_field_record(value: FieldRecord | Mapping[str, Any] | None) -> FieldRecord:
    if value is None:
        return FieldRecord()
    if isinstance(value, FieldRecord):
        return value
    return FieldRecord.model_validate(dict(value))


def _as_render_context(value: RenderContext | Mapping[str, Any] | None) -> RenderContext:
    if value is None:
        return RenderContext()
    if isinstance(value, RenderContext):
        return value
    try:
        return RenderContext.model_validate(dict(value))
    except ValidationError as e:
        logger.warning(
            f"Ignoring invalid render context {dict(value)!r}: "
            f"{e.error_count()} validation error(s)"
        )
        return RenderContext()
