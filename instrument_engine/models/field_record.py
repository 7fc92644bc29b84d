"""Field record model holding the user-supplied values for an instrument.

This module defines the FieldRecord Pydantic model. Every field is optional;
templates substitute bracketed placeholders for whatever is missing.

Field names are snake_case in Python, but the camelCase names used by form
payloads (``manName``, ``claimRef``, ``vehicleVIN``...) are accepted as
aliases.

Example:
    ```python
    from instrument_engine.models.field_record import FieldRecord

    fields = FieldRecord.model_validate({
        "manName": "John Henry",
        "fictionName": "JOHN H DOE",
        "creditor": "ACME Corp",
        "claimRef": "REF-001",
        "proofPoints": ["Show the contract.", "Prove standing."],
    })
    ```
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FieldRecord(BaseModel):
    """Snapshot of the form fields used to fill a template.

    Blank strings are normalised to None so that templates only have to
    check for absence once.

    Attributes:
        man_name: Lawful name of the signer
        fiction_name: Name of the legal fiction/entity
        creditor: Claimant, creditor or dealership addressed by the letter
        claim_ref: Claim or account reference
        situation_context: Free-text situation description (input for AI suggestions)
        proof_points: Ordered proof-point demands
        trust_name: Name of the trust
        trustee_name: Name of the trustee
        vehicle_vin: Vehicle identification number (proof of funds)
        purchase_price: Agreed purchase price (proof of funds)
        amendment_details: Text of a trust amendment
        asset_description: Description of a transferred asset
        asset_recipient: Recipient of a transferred asset
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    man_name: Optional[str] = Field(default=None, description="Lawful name")
    fiction_name: Optional[str] = Field(default=None, description="Legal fiction name")
    creditor: Optional[str] = Field(default=None, description="Claimant/creditor name")
    claim_ref: Optional[str] = Field(default=None, description="Claim reference")
    situation_context: Optional[str] = Field(
        default=None,
        description="Free-text description of the situation",
    )
    proof_points: list[str] = Field(
        default_factory=list,
        description="Ordered proof-point demands",
    )
    trust_name: Optional[str] = Field(default=None, description="Trust name")
    trustee_name: Optional[str] = Field(default=None, description="Trustee name")
    vehicle_vin: Optional[str] = Field(
        default=None,
        alias="vehicleVIN",
        description="Vehicle identification number",
    )
    purchase_price: Optional[str] = Field(default=None, description="Purchase price")
    amendment_details: Optional[str] = Field(default=None, description="Amendment text")
    asset_description: Optional[str] = Field(default=None, description="Asset description")
    asset_recipient: Optional[str] = Field(default=None, description="Asset recipient")

    @field_validator(
        "man_name",
        "fiction_name",
        "creditor",
        "claim_ref",
        "situation_context",
        "trust_name",
        "trustee_name",
        "vehicle_vin",
        "purchase_price",
        "amendment_details",
        "asset_description",
        "asset_recipient",
    )
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        """Treat empty and whitespace-only strings as absent.

        Args:
            value: Raw field value

        Returns:
            Stripped value, or None when nothing is left
        """
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("proof_points", mode="before")
    @classmethod
    def validate_proof_points(cls, value: list[str] | None) -> list[str]:
        """Strip proof points and drop blank entries, keeping order and duplicates.

        Args:
            value: Raw list of proof points (None is treated as empty)

        Returns:
            Cleaned list of proof points
        """
        if value is None:
            return []
        return [point.strip() for point in value if point and point.strip()]
