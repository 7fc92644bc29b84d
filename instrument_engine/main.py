"""Main entry point for the instrument engine.

This module renders an instrument from command-line arguments and prints it
to stdout. Proof points can be given directly or suggested by the AI agent
from a situation description.

Example:
    ```python
    from instrument_engine.main import generate_instrument

    text = generate_instrument("AOS", {"manName": "John Henry", "fictionName": "JOHN H DOE"})
    ```

    Or as a command-line tool:
    ```bash
    python -m instrument_engine.main E10 --man-name "John Henry" --start-date 2024-01-01
    ```
"""

import argparse
import logging
import sys
from datetime import date
from typing import Any, Mapping

from langchain_groq import ChatGroq

from instrument_engine.agents.proof_point_agent import ProofPointAgent
from instrument_engine.config import get_config
from instrument_engine.exceptions.base import BaseInstrumentError
from instrument_engine.models.document_type import (
    ESTOPPEL_DAY_OFFSETS,
    DocumentFamily,
    DocumentType,
    documents_for_family,
    process_phase,
)
from instrument_engine.models.field_record import FieldRecord
from instrument_engine.models.render_context import RenderContext
from instrument_engine.template.dates import estoppel_deadlines, parse_start_date
from instrument_engine.template.template_engine import DefaultTemplateEngine

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# CLI flag -> FieldRecord attribute
FIELD_ARGUMENTS = {
    "--man-name": "man_name",
    "--fiction-name": "fiction_name",
    "--creditor": "creditor",
    "--claim-ref": "claim_ref",
    "--trust-name": "trust_name",
    "--trustee-name": "trustee_name",
    "--vehicle-vin": "vehicle_vin",
    "--purchase-price": "purchase_price",
    "--amendment-details": "amendment_details",
    "--asset-description": "asset_description",
    "--asset-recipient": "asset_recipient",
}


def initialize_llm(config: Any) -> ChatGroq:
    """Initialize Groq LLM with configuration.

    Args:
        config: Config instance from get_config()

    Returns:
        Initialized ChatGroq LLM instance

    Raises:
        ValueError: If no Groq API key is configured
    """
    if not config.groq_api_key:
        raise ValueError("GROQ_API_KEY must be set to generate proof points with AI")

    logger.info(f"Initializing Groq LLM with model: {config.llm_model}")
    return ChatGroq(
        api_key=config.groq_api_key,
        model=config.llm_model,
        temperature=config.llm_temperature,
    )


def generate_instrument(
    doc_type: DocumentType | str,
    fields: FieldRecord | Mapping[str, Any],
    start_date: date | str | None = None,
    day_offset: int | None = None,
    issue_date: date | None = None,
    agent: ProofPointAgent | None = None,
) -> str:
    """Render an instrument, optionally asking the AI agent for proof points first.

    Args:
        doc_type: DocumentType or its string value
        fields: Field record or mapping of form values
        start_date: Optional start of the estoppel window
        day_offset: Optional estoppel window length
        issue_date: Date stamped on the letter (defaults to today)
        agent: Optional ProofPointAgent. When given, proof points are replaced
            by suggestions for the record's situation description.

    Returns:
        Rendered instrument text

    Raises:
        InputValidationError: If the agent is used without a usable situation
        SuggestionError: If the agent cannot produce proof points
        ValueError: If start_date is a malformed string
    """
    if not isinstance(fields, FieldRecord):
        fields = FieldRecord.model_validate(dict(fields))

    if agent is not None:
        fields = agent.apply(fields)

    context = RenderContext(
        start_date=parse_start_date(start_date) if start_date else None,
        day_offset=day_offset,
    )
    engine = DefaultTemplateEngine(issue_date=issue_date or date.today())
    return engine.render(doc_type, fields, context)


def _is_estoppel(doc_type: str) -> bool:
    try:
        return DocumentType(doc_type) in ESTOPPEL_DAY_OFFSETS
    except ValueError:
        return False


def _print_document_types() -> None:
    for family in DocumentFamily:
        print(f"{family.value}:")
        for doc_type in documents_for_family(family):
            phase = process_phase(doc_type, family)
            print(f"  {doc_type.value:<4} {doc_type.label} ({phase.value})")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Render a correspondence instrument from field values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m instrument_engine.main AOS --man-name "John Henry" --fiction-name "JOHN H DOE"
  python -m instrument_engine.main E28 --creditor "ACME Corp" --start-date 2024-01-01
  python -m instrument_engine.main CA --situation "Received a parking notice" --suggest
        """,
    )

    parser.add_argument(
        "doc_type",
        nargs="?",
        help="Document type code or name (e.g. CA, E10, proof-of-funds)",
    )

    for flag, attribute in FIELD_ARGUMENTS.items():
        parser.add_argument(flag, dest=attribute, default=None)

    parser.add_argument(
        "--proof-point",
        dest="proof_points",
        action="append",
        default=[],
        help="Proof point to include (repeatable, order is kept)",
    )
    parser.add_argument("--situation", default=None, help="Situation description")
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Generate proof points from --situation with AI",
    )
    parser.add_argument("--start-date", default=None, help="Estoppel window start (YYYY-MM-DD)")
    parser.add_argument("--day-offset", type=int, default=None, help="Estoppel window length in days")
    parser.add_argument("--issue-date", default=None, help="Date stamped on the letter (YYYY-MM-DD)")
    parser.add_argument(
        "--list-types",
        action="store_true",
        help="List document types and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for command-line usage.

    Args:
        argv: Optional argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure, 130 when interrupted)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level)
    if args.verbose:
        logger.debug("Verbose logging enabled")

    if args.list_types:
        _print_document_types()
        return 0

    if not args.doc_type:
        parser.print_usage(sys.stderr)
        print("Error: a document type is required", file=sys.stderr)
        return 1

    values = {attribute: getattr(args, attribute) for attribute in FIELD_ARGUMENTS.values()}
    fields = FieldRecord(
        situation_context=args.situation,
        proof_points=args.proof_points,
        **values,
    )

    try:
        issue_date = parse_start_date(args.issue_date) if args.issue_date else None
        agent = None
        if args.suggest:
            agent = ProofPointAgent(llm=initialize_llm(config), config=config)

        document = generate_instrument(
            args.doc_type,
            fields,
            start_date=args.start_date,
            day_offset=args.day_offset,
            issue_date=issue_date,
            agent=agent,
        )
    except BaseInstrumentError as e:
        logger.error(f"Instrument generation failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Generation interrupted by user")
        print("\nGeneration interrupted by user.", file=sys.stderr)
        return 130

    print(document)

    if args.start_date and _is_estoppel(args.doc_type):
        deadlines = estoppel_deadlines(args.start_date)
        print("Estoppel deadlines:")
        for window, deadline in deadlines.items():
            print(f"  {window}-day: {deadline}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
