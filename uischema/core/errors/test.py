"""Tests for the analysis exception hierarchy."""

import pytest

from .lib import AnalysisError, AnalysisStage, ExtractionFailure, ParseFailure


class TestAnalysisErrors:
    """Tests for error attributes and inheritance."""

    @pytest.mark.unit
    def test_base_defaults(self):
        """A bare AnalysisError is attributed to the assemble stage."""
        err = AnalysisError("boom")
        assert str(err) == "boom"
        assert err.component is None
        assert err.stage is AnalysisStage.ASSEMBLE
        assert err.cause is None

    @pytest.mark.unit
    def test_stage_accepts_string(self):
        """Stage values are coerced to the enum."""
        err = AnalysisError("boom", stage="detect")
        assert err.stage is AnalysisStage.DETECT

    @pytest.mark.unit
    def test_parse_failure_location(self):
        """ParseFailure carries the first error position."""
        cause = ValueError("bad")
        err = ParseFailure("syntax error", component="Card", cause=cause, line=3, column=7)
        assert isinstance(err, AnalysisError)
        assert err.stage is AnalysisStage.PARSE
        assert err.component == "Card"
        assert err.cause is cause
        assert (err.line, err.column) == (3, 7)

    @pytest.mark.unit
    def test_parse_failure_input_stage(self):
        """Input validation failures report the input stage."""
        err = ParseFailure("no input", stage=AnalysisStage.INPUT)
        assert err.stage is AnalysisStage.INPUT
        assert err.line is None

    @pytest.mark.unit
    def test_extraction_failure_node_kind(self):
        """ExtractionFailure records the node kind and walk stage."""
        err = ExtractionFailure("extractor failed", node_kind="interface_declaration")
        assert err.node_kind == "interface_declaration"
        assert err.stage is AnalysisStage.WALK

    @pytest.mark.unit
    def test_catchable_as_base(self):
        """Subclasses are caught by the base type."""
        with pytest.raises(AnalysisError):
            raise ExtractionFailure("x", node_kind="jsx_element")
