"""Unit tests for source parsing."""

import pytest

from uischema.core.errors import AnalysisStage, ParseFailure

from .lib import first_syntax_error, get_language, parse_source


class TestGetLanguage:
    """Tests for grammar loading."""

    @pytest.mark.unit
    def test_languages_are_cached(self):
        """The same Language object is returned for repeated calls."""
        assert get_language("tsx") is get_language("tsx")

    @pytest.mark.unit
    def test_unknown_grammar(self):
        """Unknown grammar names raise ParseFailure."""
        with pytest.raises(ParseFailure, match="Unknown grammar"):
            get_language("coffeescript")


class TestParseSource:
    """Tests for parse_source."""

    @pytest.mark.unit
    def test_parses_tsx(self):
        """Well-formed TSX parses to a program without errors."""
        parsed = parse_source("const A = () => <div>hi</div>;")
        assert parsed.root.type == "program"
        assert parsed.root.has_error is False
        assert parsed.grammar == "tsx"

    @pytest.mark.unit
    def test_node_text(self):
        """text() slices the source bytes of a node."""
        parsed = parse_source("let label = 'é';")
        assert parsed.text(parsed.root) == "let label = 'é';"
        assert parsed.text(None) == ""

    @pytest.mark.unit
    def test_typescript_grammar(self):
        """The plain TypeScript grammar accepts angle-bracket casts."""
        parsed = parse_source("const n = <number>value;", grammar="typescript")
        assert parsed.root.has_error is False

    @pytest.mark.unit
    @pytest.mark.parametrize("bad_input", [None, 42, b"const a = 1;"])
    def test_non_text_rejected(self, bad_input):
        """Non-str input fails at the input stage."""
        with pytest.raises(ParseFailure) as excinfo:
            parse_source(bad_input, component="Widget")
        assert excinfo.value.stage is AnalysisStage.INPUT
        assert excinfo.value.component == "Widget"

    @pytest.mark.unit
    def test_blank_rejected(self):
        """Whitespace-only source is treated as missing input."""
        with pytest.raises(ParseFailure, match="empty"):
            parse_source("   \n")

    @pytest.mark.unit
    def test_size_limit(self):
        """Sources over the byte limit are rejected."""
        with pytest.raises(ParseFailure, match="limit"):
            parse_source("const a = 1;", max_bytes=4)

    @pytest.mark.unit
    def test_strict_syntax_error(self):
        """Strict mode reports the first syntax error location."""
        with pytest.raises(ParseFailure) as excinfo:
            parse_source("interface Props {\n  text: string;\n  onClick?: (\n")
        assert excinfo.value.stage is AnalysisStage.PARSE
        assert excinfo.value.line is not None

    @pytest.mark.unit
    def test_lenient_keeps_partial_tree(self):
        """Non-strict mode returns the error-containing tree."""
        parsed = parse_source("function (", strict=False)
        assert parsed.root.has_error is True
        assert first_syntax_error(parsed.root) is not None

    @pytest.mark.unit
    def test_unknown_grammar_carries_component(self):
        """Grammar failures are attributed to the component."""
        with pytest.raises(ParseFailure) as excinfo:
            parse_source("let a;", grammar="elm", component="Card")
        assert excinfo.value.component == "Card"


class TestFirstSyntaxError:
    """Tests for first_syntax_error."""

    @pytest.mark.unit
    def test_clean_tree(self):
        """Clean trees have no error node."""
        parsed = parse_source("const a = 1;")
        assert first_syntax_error(parsed.root) is None
