"""Templates for trust instruments.

Declaration of Trust, Appointment of Trustee and Trust Amendment are
signed by the grantor and use the correspondence header/footer. Proof of
Funds and Asset Transfer are issued by the trustee and use the trustee
letterhead and signature instead.
"""

from datetime import date

from instrument_engine.models.field_record import FieldRecord
from instrument_engine.models.render_context import RenderContext
from instrument_engine.template import placeholders
from instrument_engine.template.header_footer import (
    compose,
    create_footer,
    create_header,
    create_trustee_letterhead,
    create_trustee_signature,
)


def render_declaration_of_trust(
    fields: FieldRecord, context: RenderContext, issue_date: date
) -> str:
    """Render a Declaration of Trust naming the grantor as beneficiary."""
    man_name = placeholders.fill(fields.man_name, placeholders.LAWFUL_NAME)
    fiction_name = placeholders.fill(fields.fiction_name, placeholders.FICTION_NAME)
    trust_name = placeholders.fill(fields.trust_name, placeholders.TRUST_NAME)
    body = f"""DECLARATION OF TRUST

BE IT KNOWN TO ALL, that I, {man_name}, the Grantor, being of sound mind and not under duress, do hereby irrevocably declare the creation of a private trust, effective this day.

1.  **Trust Name:** The trust shall be known as: {trust_name}.
2.  **Grantor:** The Grantor is {man_name}, a sovereign man/woman.
3.  **Corpus:** The trust corpus shall include, but not be limited to, the legal fiction {fiction_name} and all associated property, titles, and interests.
4.  **Beneficiary:** The primary beneficiary is {man_name}.
5.  **Purpose:** The purpose of this trust is for the holding of assets, the separation of legal and equitable title, and the management of affairs for the benefit of the beneficiary, outside of statutory public jurisdiction.

This Declaration stands as the foundational document of this trust."""
    return compose(create_header(fields, issue_date), body, create_footer(fields))


def render_appointment_of_trustee(
    fields: FieldRecord, context: RenderContext, issue_date: date
) -> str:
    """Render an Appointment of Trustee."""
    man_name = placeholders.fill(fields.man_name, placeholders.LAWFUL_NAME)
    trust_name = placeholders.fill(fields.trust_name, placeholders.TRUST_NAME)
    trustee_name = placeholders.fill(fields.trustee_name, placeholders.TRUSTEE_NAME)
    body = f"""APPOINTMENT OF TRUSTEE

I, {man_name}, in my capacity as Grantor of the {trust_name}, do hereby appoint the following individual to act as Trustee:

**Trustee:** {trustee_name}

The appointed Trustee shall have the full power and authority to administer the trust according to its terms, for the benefit of the beneficiary. This appointment is effective immediately.

The Trustee accepts this appointment and acknowledges their fiduciary duty to act always in the best interest of the trust and its beneficiary."""
    return compose(create_header(fields, issue_date), body, create_footer(fields))


def render_proof_of_funds(
    fields: FieldRecord, context: RenderContext, issue_date: date
) -> str:
    """Render a trustee's proof of funds and intent to purchase a vehicle.

    The addressee is the dealership held in the ``creditor`` field.
    """
    trust_name = placeholders.fill(fields.trust_name, placeholders.TRUST_NAME)
    trustee_name = placeholders.fill(fields.trustee_name, placeholders.TRUSTEE_NAME)
    dealership = placeholders.fill(fields.creditor, placeholders.DEALERSHIP)
    vin = placeholders.fill(fields.vehicle_vin, placeholders.VEHICLE_VIN)
    price = placeholders.format_price(fields.purchase_price)
    body = f"""TO: {dealership}

RE: PROOF OF FUNDS & INTENT TO PURCHASE
VEHICLE IDENTIFICATION NUMBER (VIN): {vin}

Dear Sirs/Madams,

This letter serves as formal notification that the {trust_name} (hereinafter "the Trust") has approved the acquisition of the above-referenced vehicle.

The Trustee for the Trust, {trustee_name}, is authorized to tender the agreed upon purchase price of {price}.

This letter shall serve as sufficient proof of funds for this private, non-commercial conveyance. The Trust will be providing its own financing and will not be seeking or accepting any third-party, dealer-arranged financing.

Please prepare the buyer's order or purchase agreement reflecting the Trust as the purchaser and forward it to the Trustee for execution.

This is not an application for credit. No credit inquiry is authorized."""
    return compose(
        create_trustee_letterhead(fields, issue_date),
        body,
        create_trustee_signature(fields),
    )


def render_trust_amendment(
    fields: FieldRecord, context: RenderContext, issue_date: date
) -> str:
    """Render an Amendment to the Declaration of Trust."""
    man_name = placeholders.fill(fields.man_name, placeholders.LAWFUL_NAME)
    trust_name = placeholders.fill(fields.trust_name, placeholders.TRUST_NAME)
    details = placeholders.fill(fields.amendment_details, placeholders.AMENDMENT_DETAILS)
    body = f"""AMENDMENT TO THE DECLARATION OF TRUST
OF
{trust_name}

BE IT KNOWN TO ALL, that I, {man_name}, the Grantor, having reserved the right to amend the trust, do hereby make the following amendment to the Declaration of Trust dated [Original Date of Declaration].

Article [Number] is hereby amended to read as follows:

{details}

All other provisions of the Declaration of Trust shall remain in full force and effect.

IN WITNESS WHEREOF, the Grantor has executed this amendment on this day."""
    return compose(create_header(fields, issue_date), body, create_footer(fields))


def render_asset_transfer(
    fields: FieldRecord, context: RenderContext, issue_date: date
) -> str:
    """Render a trustee's Notice of Asset Transfer."""
    trust_name = placeholders.fill(fields.trust_name, placeholders.TRUST_NAME)
    trustee_name = placeholders.fill(fields.trustee_name, placeholders.TRUSTEE_NAME)
    description = placeholders.fill(fields.asset_description, placeholders.ASSET_DESCRIPTION)
    recipient = placeholders.fill(fields.asset_recipient, placeholders.ASSET_RECIPIENT)
    body = f"""NOTICE OF ASSET TRANSFER

This document serves as notice that the Trustee of the {trust_name}, {trustee_name}, has authorized the transfer of the following trust asset:

Asset Description:
{description}

This asset is hereby conveyed from the Trust to:
{recipient}

This transfer is made in accordance with the powers granted to the Trustee under the terms of the Declaration of Trust."""
    return compose(
        create_trustee_letterhead(fields, issue_date),
        body,
        create_trustee_signature(fields),
    )
