"""Templates for the remedy family of instruments.

Each renderer has the signature ``(fields, context, issue_date) -> str`` and
composes the shared correspondence header and footer around its own body.
"""

import logging
from datetime import date

from instrument_engine.models.field_record import FieldRecord
from instrument_engine.models.render_context import RenderContext
from instrument_engine.template import placeholders
from instrument_engine.template.dates import compute_deadline, format_long_date
from instrument_engine.template.header_footer import (
    compose,
    create_footer,
    create_header,
    create_proof_points,
)

logger = logging.getLogger(__name__)


def _names(fields: FieldRecord) -> tuple[str, str]:
    return (
        placeholders.fill(fields.man_name, placeholders.LAWFUL_NAME),
        placeholders.fill(fields.fiction_name, placeholders.FICTION_NAME),
    )


def render_conditional_acceptance(
    fields: FieldRecord, context: RenderContext, issue_date: date
) -> str:
    """Render a Notice of Conditional Acceptance for Value.

    The body demands sworn evidence of each proof point and sets a ten-day
    window for the response.
    """
    man_name, fiction_name = _names(fields)
    body = f"""NOTICE OF CONDITIONAL ACCEPTANCE FOR VALUE

Dear Sirs/Madams,

I, {man_name}, am in receipt of your presentment dated [Insert Date of Presentment], which attempts to establish an obligation on the legal fiction/person, {fiction_name}.

I conditionally agree to settle any alleged obligation ON CONDITION that you provide SWORN EVIDENCE (AFFIDAVIT), under your full commercial liability, of the following points. This demand for proof of jurisdiction is made pursuant to my right to challenge administrative authority as recognized in cases such as U.S. v. Minker (1956). Furthermore, should this matter involve a government entity acting in a commercial capacity, it is bound by commercial law as per Clearfield Trust Co. v. United States (1943).

{create_proof_points(fields.proof_points)}

Failure to provide the requested sworn, point-for-point evidence, within TEN (10) days of the date of this Notice, will constitute your tacit agreement (Estoppel) that no such obligation exists, that any claim is void, and that you will cease all further communication and collection activity immediately [Commercial Maxim 8]."""
    return compose(create_header(fields, issue_date), body, create_footer(fields))


def render_estoppel_notice(
    fields: FieldRecord,
    context: RenderContext,
    issue_date: date,
    default_offset: int = 10,
) -> str:
    """Render a Notice of Estoppel by Tacit Agreement.

    The deadline is ``context.start_date`` plus ``context.day_offset`` days
    (or ``default_offset`` when the context carries no offset). Without a
    start date the deadline is left as a placeholder.

    Args:
        fields: Field record
        context: Start date and optional window length
        issue_date: Date stamped on the letter
        default_offset: Window length of the selected estoppel type

    Returns:
        Rendered notice
    """
    man_name, fiction_name = _names(fields)
    creditor = placeholders.fill(fields.creditor, placeholders.RECIPIENT)
    days = context.day_offset if context.day_offset is not None else default_offset

    if context.start_date is not None:
        deadline = format_long_date(compute_deadline(context.start_date, days))
    else:
        deadline = placeholders.DEADLINE_DATE
    logger.debug(f"Estoppel deadline ({days} days): {deadline}")

    body = f"""NOTICE OF ESTOPPEL BY TACIT AGREEMENT ({days}-DAY DEFAULT)

Dear Sirs/Madams,

I, {man_name}, refer to my previous Notice of Conditional Acceptance dated [Insert Date of Previous Notice].

WHEREAS: The deadline for your point-for-point rebuttal and presentation of Lawful proof of claim was {deadline}.

WHEREAS: {creditor} has failed to provide a sworn, timely, and lawful rebuttal of my Affidavit, thereby leaving the facts stated therein unrebutted.

NOW, THEREFORE, BE IT KNOWN: Pursuant to the Maxims of Commercial Law, my Affidavit stands as Truth in Commerce, and by your silence, Estoppel by Tacit Agreement is fully established. This is consistent with the principle that an unrebutted affidavit stands as the judgment in commerce.

This constitutes a Final and Binding Legal Determination that the alleged obligation is void and all collection attempts against {man_name} and the legal fiction {fiction_name} are now fraudulent."""
    return compose(create_header(fields, issue_date), body, create_footer(fields))


def render_fault_and_cure(
    fields: FieldRecord, context: RenderContext, issue_date: date
) -> str:
    """Render a Notice of Fault and Opportunity to Cure (three-day cure window)."""
    man_name, fiction_name = _names(fields)
    body = f"""NOTICE OF FAULT AND OPPORTUNITY TO CURE

Dear Sirs/Madams,

This notice follows my previous correspondence, including a Notice of Conditional Acceptance and a Notice of Estoppel, to which you have failed to lawfully respond. Your continued collection activities, despite the established estoppel, place you in FAULT.

You are in breach of our binding agreement established by your tacit consent.

This is your final opportunity to CURE THIS FAULT within THREE (3) days of receipt of this notice. To cure, you must:

1.  Cease all collection activities against {man_name} and the fiction {fiction_name}.
2.  Correct your records to reflect a zero balance for the reference number above.
3.  Send written confirmation via mail that the account is closed and the matter is resolved.

Failure to cure will result in the immediate issuance of a commercial lien, reporting of your unlawful activities to relevant authorities, and all other available lawful remedies."""
    return compose(create_header(fields, issue_date), body, create_footer(fields))


def render_affidavit_of_status(
    fields: FieldRecord, context: RenderContext, issue_date: date
) -> str:
    """Render an Affidavit of Status."""
    man_name, fiction_name = _names(fields)
    body = f"""AFFIDAVIT OF STATUS

I, {man_name}, being of sound mind and competent to testify, do hereby state, declare, and affirm under my unlimited liability, signing under penalty of perjury, that the following is true, correct, and complete to the best of my knowledge and belief:

1.  I am a living man/woman on the land, a creation of God, and not a legal fiction, corporate entity, or ward of the state.
2.  My lawful appellation is as styled above and is not to be confused with the legal fiction, {fiction_name}, which is a creation of the state. This distinction between the individual and the state's creation is foundational, as affirmed in principles derived from cases like Hale v. Henkel, 201 U.S. 43 (1906).
3.  I am sovereign and subject only to the laws of God and the common law which demands I do not harm others or their property.
4.  I reserve all my rights and waive no privileges, now and forever.

This Affidavit stands as truth in commerce unless rebutted point-for-point by a sworn affidavit from another living soul with first-hand knowledge of the facts."""
    return compose(create_header(fields, issue_date), body, create_footer(fields))


def render_notice_to_agent(
    fields: FieldRecord, context: RenderContext, issue_date: date
) -> str:
    """Render a Notice to Agent is Notice to Principal."""
    creditor = placeholders.fill(fields.creditor, placeholders.RECIPIENT)
    body = f"""NOTICE TO AGENT IS NOTICE TO PRINCIPAL;
NOTICE TO PRINCIPAL IS NOTICE TO AGENT

This is a lawful notice.

Be advised that you, {creditor}, are considered an agent acting on behalf of a principal. Any and all communication, presentments, or claims sent by you are considered to have been sent with the full knowledge and authority of your principal.

Conversely, this notice, served upon you as agent, shall be deemed to be simultaneously served upon your principal. Ignorance of this notice by your principal will not be considered a defense.

You and your principal are now bound by the contents of this and all related correspondence. Govern yourselves accordingly."""
    return compose(create_header(fields, issue_date), body, create_footer(fields))
