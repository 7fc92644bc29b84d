"""Pytest configuration and shared fixtures.

This module contains pytest configuration and shared fixtures used
across all test files.
"""

from datetime import date
from unittest.mock import Mock

import pytest
from langchain_core.language_models import BaseChatModel

from instrument_engine.config import Config
from instrument_engine.models.field_record import FieldRecord
from instrument_engine.template.template_engine import DefaultTemplateEngine


@pytest.fixture
def issue_date() -> date:
    """Fixed issue date stamped in letter headers."""
    return date(2024, 3, 5)


@pytest.fixture
def engine(issue_date: date) -> DefaultTemplateEngine:
    """Create a template engine with a fixed issue date."""
    return DefaultTemplateEngine(issue_date=issue_date)


@pytest.fixture
def sample_fields() -> FieldRecord:
    """Create a field record for the remedy family."""
    return FieldRecord(
        man_name="John Henry",
        fiction_name="JOHN H DOE",
        creditor="ACME Corp",
        claim_ref="REF-001",
    )


@pytest.fixture
def trust_fields() -> FieldRecord:
    """Create a field record with every trust-operations field filled in."""
    return FieldRecord(
        man_name="John Henry",
        fiction_name="JOHN H DOE",
        creditor="Main Street Motors",
        trust_name="The John Henry Doe Trust",
        trustee_name="Jane Roe",
        vehicle_vin="1HGCM82633A004352",
        purchase_price="24,500",
        amendment_details="The name of the Trustee is hereby changed to Jane Smith.",
        asset_description="100 shares of XYZ Corp stock",
        asset_recipient="Richard Roe",
    )


@pytest.fixture
def mock_llm() -> Mock:
    """Create a mock LLM instance."""
    llm = Mock(spec=BaseChatModel)
    return llm


@pytest.fixture
def mock_config() -> Mock:
    """Create a mock Config instance with no retry backoff."""
    config = Mock(spec=Config)
    config.groq_api_key = "test_api_key"
    config.llm_model = "llama-3.1-8b-instant"
    config.llm_temperature = 0.3
    config.llm_retry_attempts = 3
    config.llm_retry_backoff_min = 0.0
    config.llm_retry_backoff_max = 0.0
    config.min_situation_length = 10
    config.max_situation_length = 5000
    config.max_proof_points = 6
    config.log_level = "INFO"
    return config
