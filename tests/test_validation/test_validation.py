"""Tests for source checks."""

from bidicss.model.diagnostic import Diagnostic, Severity
from bidicss.stylesheet import parse_source
from bidicss.validation import check_source
from bidicss.validation.rules import check_comment_tokens, check_has_tokens, check_unknown_tokens


class TestCheckUnknownTokens:
    def test_reports_stray_interpolation(self):
        diags = check_unknown_tokens(parse_source(".a { float: #{default-float}; }"))
        assert len(diags) == 1
        assert "#{default-float}" in diags[0].message

    def test_reports_each_unknown(self):
        diags = check_unknown_tokens(parse_source(".a { float: <fooBar>; color: <baz>; }"))
        assert len(diags) == 2
        assert all(d.severity is Severity.ERROR for d in diags)
        assert "<fooBar>" in diags[0].message
        assert (diags[0].line, diags[0].column) == (1, 13)

    def test_known_tokens_clean(self):
        assert check_unknown_tokens(parse_source(".a { float: <defaultFloat>; }")) == []


class TestCheckHasTokens:
    def test_info_without_tokens(self):
        diags = check_has_tokens(parse_source(".a { float: left; }"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO

    def test_silent_with_tokens(self):
        assert check_has_tokens(parse_source("<defaultFloat>")) == []


class TestCheckCommentTokens:
    def test_warns_on_comment_token(self):
        diags = check_comment_tokens(parse_source("/* <defaultFloat> */"))
        assert [d.severity for d in diags] == [Severity.WARNING]


class TestCheckSource:
    def test_accepts_text(self):
        diags = check_source(".a { float: <fooBar>; }")
        assert [d.rule for d in diags] == ["unknown_token"]

    def test_clean_source(self):
        assert check_source(".a { float: <defaultFloat>; }") == []

    def test_extra_rules(self):
        def always(source):
            return [Diagnostic(rule="custom", severity=Severity.INFO, message="hi")]

        diags = check_source("<defaultFloat>", extra_rules=[always])
        assert [d.rule for d in diags] == ["custom"]


class TestDiagnosticStr:
    def test_with_location(self):
        d = Diagnostic(rule="r", severity=Severity.ERROR, message="bad", line=3, column=4)
        assert str(d) == "ERROR [3:4]: bad"
        assert d.is_error

    def test_without_location(self):
        d = Diagnostic(rule="r", severity=Severity.INFO, message="fyi")
        assert str(d) == "INFO: fyi"
