"""Bracketed placeholder text for missing field values.

Each template asks for its values through :func:`fill`, so an absent field
always shows up as a readable fill-in-the-blank marker instead of an empty
gap.
"""

from typing import Optional

LAWFUL_NAME = "[Your Lawful Name]"
FICTION_NAME = "[Legal Fiction Name]"
RECIPIENT = "[Intended Recipient]"
DEALERSHIP = "[Dealership Name]"
CLAIM_REFERENCE = "[Claim Reference]"
TRUST_NAME = "[Trust Name]"
TRUSTEE_NAME = "[Trustee Name]"
VEHICLE_VIN = "[Vehicle VIN]"
PURCHASE_PRICE = "[Purchase Price]"
ASSET_RECIPIENT = "[Name of Recipient/Entity]"
DEADLINE_DATE = "[Date of Deadline]"

AMENDMENT_DETAILS = (
    '[Specify the amendment details here. For example: "The name of the Trustee '
    'is hereby changed to Jane Smith." Or "A new article is added to detail the '
    'process for asset distribution."]'
)

ASSET_DESCRIPTION = (
    '[Describe the asset being transferred, e.g., "Real property located at 123 '
    'Main Street", "100 shares of XYZ Corp stock", "Vehicle with VIN: XXXXX"]'
)

PROOF_POINTS = (
    '[AI-Generated points will appear here. Describe your situation and click '
    '"Generate Proofs with AI".]'
)


def fill(value: Optional[str], placeholder: str) -> str:
    """Return the value, or the placeholder when the value is missing or blank."""
    if value is None or not value.strip():
        return placeholder
    return value


def format_price(value: Optional[str]) -> str:
    """Render a purchase price with exactly one leading dollar sign."""
    amount = (value or "").strip().lstrip("$").strip()
    if not amount:
        return PURCHASE_PRICE
    return f"${amount}"
