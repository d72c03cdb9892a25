"""Property-based tests for DocumentParser and VariableInterpolator.

Verifies:
- N named blocks between delimiters always yield N statements in order
- Comment lines never reach statement text
- Interpolation leaves text without references untouched and is verbatim
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from sqlyac.usecases.document_parser import DocumentParser
from sqlyac.usecases.interpolator import VariableInterpolator
from sqlyac.usecases.risk_classifier import RiskClassifier

identifiers = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_",
    min_size=1,
    max_size=20,
)

# Content lines that cannot be mistaken for delimiters, comments or SET lines
content_lines = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz0123456789 ,;()*=<>'",
    min_size=1,
    max_size=40,
).filter(lambda s: s.strip() != "" and not s.lstrip().lower().startswith("set"))

# Printable ASCII only, so no newline splits the comment
comment_lines = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=30
).map(lambda s: "-- " + s)

blocks = st.tuples(identifiers, st.lists(content_lines, min_size=1, max_size=5))

# Hypothesis @given doesn't work with pytest fixtures
_parser = DocumentParser()
_interpolator = VariableInterpolator()
_classifier = RiskClassifier()


@pytest.mark.tra("UseCase.DocumentParser")
class TestDocumentParserProperties:
    """Structural properties of parsing."""

    @pytest.mark.tier(3)
    @given(st.lists(blocks, max_size=8))
    @settings(max_examples=100)
    def test_named_blocks_round_trip_in_order(self, generated):
        parts = []
        for name, lines in generated:
            parts.append("---")
            parts.append(f"-- @name {name}")
            parts.extend(lines)
        parts.append("---")

        document = _parser.parse("\n".join(parts))

        assert document.names() == [name for name, _ in generated]
        for statement, (_, lines) in zip(document.statements, generated):
            assert statement.text == "\n".join(lines).strip()

    @pytest.mark.tier(3)
    @given(
        name=identifiers,
        lines=st.lists(content_lines, min_size=1, max_size=5),
        comments=st.lists(comment_lines, min_size=1, max_size=5),
    )
    @settings(max_examples=100)
    def test_comment_lines_never_reach_text(self, name, lines, comments):
        assume(all("@name" not in c for c in comments))
        body = [line for pair in zip(lines, comments) for line in pair]
        document = _parser.parse("\n".join(["---", f"-- @name {name}", *body, "---"]))

        assert document.names() == [name]
        for comment in comments:
            assert comment not in document.statements[0].text.split("\n")

    @pytest.mark.tier(3)
    @given(st.lists(content_lines, max_size=6))
    @settings(max_examples=50)
    def test_unnamed_blocks_are_always_discarded(self, lines):
        text = "\n".join(["---", *lines, "---", *lines, "---"])
        assert len(_parser.parse(text)) == 0


@pytest.mark.tra("UseCase.VariableInterpolator")
class TestInterpolatorProperties:
    """Properties of verbatim substitution."""

    @pytest.mark.tier(3)
    @given(
        text=st.text(max_size=100).filter(lambda s: "@" not in s),
        variables=st.dictionaries(identifiers, st.text(max_size=10), max_size=5),
    )
    @settings(max_examples=100)
    def test_text_without_references_is_unchanged(self, text, variables):
        assert _interpolator.interpolate(text, variables) == text

    @pytest.mark.tier(3)
    @given(name=identifiers, value=st.text(max_size=30))
    @settings(max_examples=100)
    def test_single_reference_becomes_value(self, name, value):
        assert _interpolator.interpolate(f"x @{name} y", {name: value}) == f"x {value} y"

    @pytest.mark.tier(3)
    @given(text=st.text(max_size=100))
    @settings(max_examples=100)
    def test_empty_table_is_identity(self, text):
        assert _interpolator.interpolate(text, {}) == text


@pytest.mark.tra("UseCase.RiskClassifier")
class TestRiskClassifierProperties:
    """Properties of keyword matching."""

    @pytest.mark.tier(3)
    @given(text=st.text(alphabet=st.characters(max_codepoint=127), max_size=100))
    @settings(max_examples=100)
    def test_classification_ignores_case(self, text):
        assert _classifier.classify(text.upper()) == _classifier.classify(text.lower())
