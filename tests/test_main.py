"""Tests for main entry point.

This module contains unit tests for the main entry point to verify
LLM initialization, instrument generation, and command-line handling.
"""

import logging
from datetime import date
from unittest.mock import Mock, patch

import pytest
from langchain_groq import ChatGroq

from instrument_engine.agents.proof_point_agent import ProofPointAgent
from instrument_engine.config import Config
from instrument_engine.exceptions.suggestion_error import SuggestionError
from instrument_engine.main import generate_instrument, initialize_llm, main
from instrument_engine.models.field_record import FieldRecord


class TestInitializeLLM:
    """Tests for initialize_llm function."""

    def test_initialize_llm_success(self) -> None:
        """Test LLM initialization uses config values."""
        config = Mock(spec=Config)
        config.groq_api_key = "test_api_key"
        config.llm_model = "llama-3.1-8b-instant"
        config.llm_temperature = 0.3

        with patch("instrument_engine.main.ChatGroq") as mock_chatgroq:
            mock_llm = Mock(spec=ChatGroq)
            mock_chatgroq.return_value = mock_llm

            llm = initialize_llm(config)

            assert llm == mock_llm
            mock_chatgroq.assert_called_once_with(
                api_key="test_api_key",
                model="llama-3.1-8b-instant",
                temperature=0.3,
            )

    def test_initialize_llm_requires_api_key(self) -> None:
        """Test that a missing API key raises ValueError."""
        config = Mock(spec=Config)
        config.groq_api_key = None

        with pytest.raises(ValueError, match="GROQ_API_KEY"):
            initialize_llm(config)


class TestGenerateInstrument:
    """Tests for generate_instrument function."""

    def test_from_mapping(self) -> None:
        """Test rendering from camelCase form values."""
        text = generate_instrument(
            "AOS",
            {"manName": "John Henry", "fictionName": "JOHN H DOE"},
            issue_date=date(2024, 3, 5),
        )

        assert "John Henry" in text
        assert "JOHN H DOE" in text
        assert "Date: 5 March 2024" in text

    def test_estoppel_deadline(self) -> None:
        """Test that the start date drives the estoppel deadline."""
        text = generate_instrument(
            "E28",
            FieldRecord(creditor="ACME Corp"),
            start_date="2024-01-01",
            issue_date=date(2024, 3, 5),
        )

        assert "Monday, January 29, 2024" in text

    def test_day_offset_override(self) -> None:
        """Test that an explicit day offset overrides the type default."""
        text = generate_instrument(
            "E10",
            FieldRecord(),
            start_date="2024-01-01",
            day_offset=28,
            issue_date=date(2024, 3, 5),
        )

        assert "Monday, January 29, 2024" in text

    def test_invalid_start_date(self) -> None:
        """Test that a malformed start date raises ValueError."""
        with pytest.raises(ValueError):
            generate_instrument("E10", FieldRecord(), start_date="not-a-date")

    def test_agent_supplies_proof_points(self) -> None:
        """Test that the agent's proof points are rendered."""
        fields = FieldRecord(situation_context="Received a parking notice.")
        agent = Mock(spec=ProofPointAgent)
        agent.apply.return_value = fields.model_copy(
            update={"proof_points": ["Provide proof of jurisdiction."]}
        )

        text = generate_instrument("CA", fields, issue_date=date(2024, 3, 5), agent=agent)

        agent.apply.assert_called_once_with(fields)
        assert "1.  Provide proof of jurisdiction." in text


class TestMain:
    """Tests for main function."""

    def test_list_types(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --list-types prints both families."""
        assert main(["--list-types"]) == 0

        output = capsys.readouterr().out
        assert "remedy:" in output
        assert "trust_operations:" in output
        assert "POF" in output

    def test_renders_document(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test rendering a document to stdout."""
        exit_code = main([
            "AOS",
            "--man-name", "John Henry",
            "--fiction-name", "JOHN H DOE",
            "--issue-date", "2024-03-05",
        ])

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "John Henry" in output
        assert "Date: 5 March 2024" in output

    def test_prints_estoppel_deadlines(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that both deadlines are printed after the document."""
        assert main(["E10", "--start-date", "2024-01-01"]) == 0

        output = capsys.readouterr().out
        assert "Estoppel deadlines:" in output
        assert "10-day: Thu, Jan 11, 2024" in output
        assert "28-day: Mon, Jan 29, 2024" in output

    def test_proof_points_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that repeated --proof-point flags keep their order."""
        assert main(["CA", "--proof-point", "First.", "--proof-point", "Second."]) == 0

        output = capsys.readouterr().out
        assert "1.  First.\n\n2.  Second." in output

    def test_unknown_type_prints_fallback(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that an unknown type renders the fallback line."""
        assert main(["XYZ"]) == 0
        assert "No generator found for document type: XYZ" in capsys.readouterr().out

    def test_missing_doc_type(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a missing document type returns exit code 1."""
        assert main([]) == 1
        assert "document type is required" in capsys.readouterr().err

    def test_invalid_start_date(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a malformed start date returns exit code 1."""
        assert main(["E10", "--start-date", "01/02/2024"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_suggestion_failure(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a failed AI suggestion returns exit code 1."""
        with patch("instrument_engine.main.get_config") as mock_get_config, \
             patch("instrument_engine.main.initialize_llm"), \
             patch("instrument_engine.main.ProofPointAgent") as mock_agent_class:
            mock_get_config.return_value = Mock(spec=Config)
            mock_get_config.return_value.log_level = "INFO"
            mock_agent_class.return_value.apply.side_effect = SuggestionError(
                "Invalid response format from AI."
            )

            exit_code = main(["CA", "--situation", "Received a notice.", "--suggest"])

        assert exit_code == 1
        assert "Invalid response format from AI." in capsys.readouterr().err

    def test_keyboard_interrupt(self) -> None:
        """Test that an interrupt returns exit code 130."""
        with patch("instrument_engine.main.generate_instrument") as mock_generate:
            mock_generate.side_effect = KeyboardInterrupt()

            assert main(["AOS"]) == 130

    def test_deadlines_only_for_estoppel(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that other document types do not print the deadline summary."""
        assert main(["AOS", "--start-date", "2024-01-01"]) == 0
        assert "Estoppel deadlines:" not in capsys.readouterr().out

    def test_applies_configured_log_level(self) -> None:
        """Test that the configured log level is set on the root logger."""
        root = logging.getLogger()
        previous = root.level
        try:
            with patch("instrument_engine.main.get_config") as mock_get_config:
                mock_get_config.return_value = Config(_env_file=None, log_level="warning")

                assert main(["--list-types"]) == 0

            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)

    def test_verbose_overrides_log_level(self) -> None:
        """Test that --verbose switches the root logger to DEBUG."""
        root = logging.getLogger()
        previous = root.level
        try:
            assert main(["--list-types", "--verbose"]) == 0
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_invalid_configuration(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that an invalid configuration returns exit code 1."""
        with patch("instrument_engine.main.get_config") as mock_get_config:
            mock_get_config.side_effect = ValueError("log_level must be one of ...")

            assert main(["AOS"]) == 1

        assert "invalid configuration" in capsys.readouterr().err
