"""Document type selector and process-guide metadata.

This module defines the closed DocumentType enumeration used to pick a
template, the two product families that group the types, and the process
phase each type belongs to.

Example:
    ```python
    from instrument_engine.models.document_type import DocumentType, process_phase

    doc_type = DocumentType("E10")
    doc_type.label          # "Estoppel 10"
    process_phase(doc_type) # ProcessPhase.CULMINATION
    ```
"""

from enum import Enum


class DocumentType(str, Enum):
    """Closed set of instruments the engine can render."""

    CONDITIONAL_ACCEPTANCE = "CA"
    ESTOPPEL_10 = "E10"
    ESTOPPEL_28 = "E28"
    FAULT_AND_CURE = "FC"
    AFFIDAVIT_OF_STATUS = "AOS"
    DECLARATION_OF_TRUST = "DOT"
    APPOINTMENT_OF_TRUSTEE = "AOT"
    NOTICE_TO_AGENT = "NTA"
    PROOF_OF_FUNDS = "POF"
    TRUST_AMENDMENT = "TA"
    ASSET_TRANSFER = "AT"

    @property
    def label(self) -> str:
        """Human-readable name shown in document pickers."""
        return _LABELS[self]

    @classmethod
    def _missing_(cls, value: object) -> "DocumentType | None":
        # Accept lower-case codes and member names ("proof-of-funds")
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_").replace(" ", "_")
            for member in cls:
                if key in (member.value, member.name):
                    return member
        return None


class DocumentFamily(str, Enum):
    """Product variant a document type is offered in."""

    REMEDY = "remedy"
    TRUST_OPERATIONS = "trust_operations"


class ProcessPhase(str, Enum):
    """Step of the process guide a document belongs to."""

    FOUNDATION = "Foundation"
    CHALLENGE = "Challenge"
    CULMINATION = "Culmination"
    OPERATION = "Operation"
    ADMINISTRATION = "Administration"


_LABELS: dict[DocumentType, str] = {
    DocumentType.CONDITIONAL_ACCEPTANCE: "Conditional Acceptance",
    DocumentType.ESTOPPEL_10: "Estoppel 10",
    DocumentType.ESTOPPEL_28: "Estoppel 28",
    DocumentType.FAULT_AND_CURE: "Fault And Cure",
    DocumentType.AFFIDAVIT_OF_STATUS: "Affidavit Of Status",
    DocumentType.DECLARATION_OF_TRUST: "Declaration Of Trust",
    DocumentType.APPOINTMENT_OF_TRUSTEE: "Appointment Of Trustee",
    DocumentType.NOTICE_TO_AGENT: "Notice To Agent",
    DocumentType.PROOF_OF_FUNDS: "Proof Of Funds",
    DocumentType.TRUST_AMENDMENT: "Trust Amendment",
    DocumentType.ASSET_TRANSFER: "Asset Transfer",
}

REMEDY_DOCUMENTS: frozenset[DocumentType] = frozenset({
    DocumentType.CONDITIONAL_ACCEPTANCE,
    DocumentType.ESTOPPEL_10,
    DocumentType.ESTOPPEL_28,
    DocumentType.FAULT_AND_CURE,
    DocumentType.AFFIDAVIT_OF_STATUS,
    DocumentType.DECLARATION_OF_TRUST,
    DocumentType.APPOINTMENT_OF_TRUSTEE,
    DocumentType.NOTICE_TO_AGENT,
})

TRUST_DOCUMENTS: frozenset[DocumentType] = frozenset({
    DocumentType.DECLARATION_OF_TRUST,
    DocumentType.APPOINTMENT_OF_TRUSTEE,
    DocumentType.PROOF_OF_FUNDS,
    DocumentType.TRUST_AMENDMENT,
    DocumentType.ASSET_TRANSFER,
})

# Types whose form needs the trust inputs (trust name, trustee, ...)
_TRUST_FIELD_DOCUMENTS: frozenset[DocumentType] = TRUST_DOCUMENTS | {
    DocumentType.NOTICE_TO_AGENT,
}

ESTOPPEL_DAY_OFFSETS: dict[DocumentType, int] = {
    DocumentType.ESTOPPEL_10: 10,
    DocumentType.ESTOPPEL_28: 28,
}

_REMEDY_PHASES: dict[DocumentType, ProcessPhase] = {
    DocumentType.CONDITIONAL_ACCEPTANCE: ProcessPhase.FOUNDATION,
    DocumentType.AFFIDAVIT_OF_STATUS: ProcessPhase.FOUNDATION,
    DocumentType.DECLARATION_OF_TRUST: ProcessPhase.FOUNDATION,
    DocumentType.APPOINTMENT_OF_TRUSTEE: ProcessPhase.FOUNDATION,
    DocumentType.NOTICE_TO_AGENT: ProcessPhase.FOUNDATION,
    DocumentType.ESTOPPEL_10: ProcessPhase.CULMINATION,
    DocumentType.ESTOPPEL_28: ProcessPhase.CULMINATION,
    DocumentType.FAULT_AND_CURE: ProcessPhase.CULMINATION,
}

_TRUST_PHASES: dict[DocumentType, ProcessPhase] = {
    DocumentType.DECLARATION_OF_TRUST: ProcessPhase.FOUNDATION,
    DocumentType.APPOINTMENT_OF_TRUSTEE: ProcessPhase.FOUNDATION,
    DocumentType.PROOF_OF_FUNDS: ProcessPhase.OPERATION,
    DocumentType.ASSET_TRANSFER: ProcessPhase.OPERATION,
    DocumentType.TRUST_AMENDMENT: ProcessPhase.ADMINISTRATION,
}


def documents_for_family(family: DocumentFamily) -> list[DocumentType]:
    """Return the document types offered by a product family, in enum order.

    Args:
        family: Product family to list

    Returns:
        List of DocumentType values belonging to the family
    """
    members = REMEDY_DOCUMENTS if family == DocumentFamily.REMEDY else TRUST_DOCUMENTS
    return [doc_type for doc_type in DocumentType if doc_type in members]


def requires_trust_fields(doc_type: DocumentType) -> bool:
    """Return True when the form for this type should collect trust inputs."""
    return doc_type in _TRUST_FIELD_DOCUMENTS


def process_phase(
    doc_type: DocumentType,
    family: DocumentFamily | None = None,
) -> ProcessPhase:
    """Return the process-guide phase for a document type.

    Declaration of Trust and Appointment of Trustee sit in both families,
    both times in the Foundation phase. When no family is given, the
    remedy family is consulted first.

    Args:
        doc_type: Document type to place
        family: Optional family whose guide should be used

    Returns:
        ProcessPhase for the document (Foundation when not mapped)
    """
    if family == DocumentFamily.TRUST_OPERATIONS:
        return _TRUST_PHASES.get(doc_type, ProcessPhase.FOUNDATION)
    if family == DocumentFamily.REMEDY:
        return _REMEDY_PHASES.get(doc_type, ProcessPhase.FOUNDATION)
    return _REMEDY_PHASES.get(
        doc_type, _TRUST_PHASES.get(doc_type, ProcessPhase.FOUNDATION)
    )
