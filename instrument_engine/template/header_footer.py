"""Shared header, footer and list blocks for instruments.

Every template is a body sandwiched between one of two header/footer
pairs:

- correspondence header/footer, signed by the lawful name, for letters
  addressed to a claimant
- trustee letterhead/signature, for letters issued by the office of the
  trustee

All functions are pure: they take the field record (and the issue date
where a stamp is needed) and return a text fragment.
"""

from datetime import date

from instrument_engine.models.field_record import FieldRecord
from instrument_engine.template import placeholders
from instrument_engine.template.dates import format_issue_date


def create_header(fields: FieldRecord, issue_date: date) -> str:
    """Create the correspondence header block.

    Args:
        fields: Field record supplying recipient and reference
        issue_date: Date stamped on the letter

    Returns:
        Header text (no trailing newline)
    """
    recipient = placeholders.fill(fields.creditor, placeholders.RECIPIENT)
    reference = placeholders.fill(fields.claim_ref, placeholders.CLAIM_REFERENCE)
    return (
        "[Your Address Here]\n"
        "Near [Your Zip Code]\n"
        "\n"
        f"Date: {format_issue_date(issue_date)}\n"
        "\n"
        f"TO: {recipient} (The Claimant/Agency/Fiduciary)\n"
        f"Reference: {reference}"
    )


def create_footer(fields: FieldRecord) -> str:
    """Create the rights-reservation footer and signature block.

    Args:
        fields: Field record supplying the lawful name

    Returns:
        Footer text (no trailing newline)
    """
    signer = placeholders.fill(fields.man_name, placeholders.LAWFUL_NAME)
    return (
        "I reserve all my Lawful Rights.\n"
        "\n"
        "Sincerely, and without ill will, vexation, or frivolity,\n"
        "\n"
        "By:\n"
        "________________________________\n"
        f"{signer}\n"
        "Sui Juris\n"
        "WITHOUT PREJUDICE UCC 1-308"
    )


def create_trustee_letterhead(fields: FieldRecord, issue_date: date) -> str:
    """Create the letterhead used on letters issued by the trustee."""
    trust_name = placeholders.fill(fields.trust_name, placeholders.TRUST_NAME)
    return (
        "From the Office of the Trustee\n"
        f"{trust_name}\n"
        "[Trust Address]\n"
        "\n"
        f"Date: {format_issue_date(issue_date)}"
    )


def create_trustee_signature(fields: FieldRecord) -> str:
    """Create the trustee's signature block."""
    trust_name = placeholders.fill(fields.trust_name, placeholders.TRUST_NAME)
    trustee_name = placeholders.fill(fields.trustee_name, placeholders.TRUSTEE_NAME)
    return (
        "Sincerely,\n"
        "\n"
        "By:\n"
        "________________________________\n"
        f"{trustee_name}, Trustee\n"
        f"For and on behalf of {trust_name}"
    )


def create_proof_points(proof_points: list[str]) -> str:
    """Render proof points as a numbered list separated by blank lines.

    Items are numbered from 1 as ``"1.  <point>"``. An empty list renders the
    single AI placeholder line without any numbering.

    Args:
        proof_points: Ordered proof points

    Returns:
        List text (no trailing newline)
    """
    points = [point.strip() for point in proof_points if point and point.strip()]
    if not points:
        return placeholders.PROOF_POINTS
    return "\n\n".join(f"{index}.  {point}" for index, point in enumerate(points, start=1))


def compose(*sections: str) -> str:
    """Join document sections with one blank line between them."""
    return "\n\n".join(section.strip("\n") for section in sections) + "\n"
