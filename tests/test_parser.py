"""Tests for claim parsing."""

from __future__ import annotations

import itertools
import logging

import pytest

from claimcore import Claim, ClaimConfig, ClaimParser, ClaimSyntaxError, parse, parse_many
from claimcore.claims.parser import normalize_subject


class TestParse:
    """Tests for parse()."""

    def test_parse_subject(self) -> None:
        assert parse("read:orgs.42.billing") == Claim("read", "orgs.42.billing")

    def test_parse_global(self) -> None:
        assert parse("read:*") == Claim("read", "")

    def test_wildcard_suffix_is_cosmetic(self) -> None:
        """verb:a.* parses to the same claim as verb:a."""
        assert parse("read:a.*") == parse("read:a")
        assert parse("read:paco.el.flaco.*") == Claim("read", "paco.el.flaco")

    def test_parse_hyphens_and_underscores(self) -> None:
        claim = parse("admin:some-like_this.stuff-or_o_.even-with-99")
        assert claim.verb == "admin"
        assert claim.subject == "some-like_this.stuff-or_o_.even-with-99"

    @pytest.mark.parametrize(
        "text",
        [
            "admin:stuff-has-spaces ",
            "  admin:stuff-has-spaces",
            "admin:stuff:has-other-colons",
            "read:**",
            "read:*.*",
            "read:*.some.stuff",
            "read:.paco",
            "read:",
            "whatever-this-is",
        ],
    )
    def test_invalid_text_raises(self, text: str) -> None:
        """Invalid text raises ClaimSyntaxError carrying the offending input."""
        with pytest.raises(ClaimSyntaxError) as exc_info:
            parse(text)
        assert exc_info.value.claim_str == text
        assert exc_info.value.code == "CLAIM_SYNTAX_ERROR"
        assert repr(text) in str(exc_info.value)

    def test_syntax_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse("bad")

    def test_non_string_raises(self) -> None:
        with pytest.raises(ClaimSyntaxError):
            parse(None)

    def test_trailing_dot_rejected_by_default(self) -> None:
        with pytest.raises(ClaimSyntaxError):
            parse("read:a.")

    def test_trailing_dot_stripped_when_allowed(self) -> None:
        assert parse("read:a.", allow_trailing_dot=True) == Claim("read", "a")
        assert parse("read:a.b.", allow_trailing_dot=True) == Claim("read", "a.b")

    def test_round_trip(self) -> None:
        """Parsing the text of a claim gives back the same claim."""
        claims = [
            Claim("read", ""),
            Claim("read", "a"),
            Claim("admin", "orgs.42.billing"),
            Claim("A", "1-9"),
            Claim("x_y-z", "some-like_this.stuff-or_o_.even-with-99"),
        ]
        for claim in claims:
            assert parse(str(claim)) == claim

    def test_logs_rejection(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="claimcore.claims.parser"):
            with pytest.raises(ClaimSyntaxError):
                parse("read: orgs")
        assert any("read: orgs" in record.getMessage() for record in caplog.records)


class TestNormalizeSubject:
    """Tests for normalize_subject()."""

    def test_global(self) -> None:
        assert normalize_subject("") == ""
        assert normalize_subject("*") == ""

    def test_suffix(self) -> None:
        assert normalize_subject("paco") == "paco"
        assert normalize_subject("paco.el.flaco") == "paco.el.flaco"
        assert normalize_subject("paco.el.flaco.*") == "paco.el.flaco"
        assert normalize_subject("paco.") == "paco"


class TestParseMany:
    """Tests for parse_many()."""

    def test_sorted_and_deduplicated(self) -> None:
        result = parse_many(["read:something", "read:*", "read:*", "read:something"])
        assert result == (Claim("read", ""), Claim("read", "something"))

    def test_first_invalid_element_wins(self) -> None:
        """The error references the first invalid element in input order."""
        with pytest.raises(ClaimSyntaxError) as exc_info:
            parse_many(["read:*", "read:something", "bad", "another-bad"])
        assert exc_info.value.claim_str == "bad"
        assert "bad" in str(exc_info.value)

    def test_output_independent_of_input_order(self) -> None:
        texts = ["write:b", "read:a.*", "read:*", "admin:x.y", "read:a"]
        expected = (
            Claim("admin", "x.y"),
            Claim("read", ""),
            Claim("read", "a"),
            Claim("write", "b"),
        )
        for permutation in itertools.permutations(texts):
            assert parse_many(permutation) == expected

    def test_empty(self) -> None:
        assert parse_many([]) == ()

    def test_accepts_generators(self) -> None:
        result = parse_many(f"read:orgs.{i}" for i in (3, 1, 2, 1))
        assert [str(c) for c in result] == ["read:orgs.1", "read:orgs.2", "read:orgs.3"]

    def test_trailing_dot_mode(self) -> None:
        with pytest.raises(ClaimSyntaxError):
            parse_many(["read:a", "read:a."])
        assert parse_many(["read:a", "read:a."], allow_trailing_dot=True) == (Claim("read", "a"),)


class TestClaimParser:
    """Tests for the config-bound ClaimParser."""

    def test_default_is_strict(self) -> None:
        parser = ClaimParser()
        assert not parser.allow_trailing_dot
        assert not parser.is_valid("read:a.")

    def test_from_config(self) -> None:
        parser = ClaimParser.from_config(ClaimConfig(allow_trailing_dot=True))
        assert parser.allow_trailing_dot
        assert parser.is_valid("read:a.")
        assert parser.parse("read:a.") == Claim("read", "a")
        assert parser.parse_many(["read:b.", "read:*"]) == (Claim("read", ""), Claim("read", "b"))

    def test_strict_parser_raises(self) -> None:
        parser = ClaimParser.from_config(ClaimConfig())
        with pytest.raises(ClaimSyntaxError):
            parser.parse("read:a.")

    def test_repr(self) -> None:
        assert repr(ClaimParser(allow_trailing_dot=True)) == "ClaimParser(allow_trailing_dot=True)"
