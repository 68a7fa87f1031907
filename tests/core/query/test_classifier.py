"""Tests for single- and multi-character token classification."""

from datetime import datetime

import pytest

from tskquery.core.query.classifier import (
    DATE_FORMATS,
    STRUCTURAL_CHARS,
    classify,
    classify_char,
    parse_date,
    parse_number,
)
from tskquery.core.query.tokens import (
    And,
    Date,
    End,
    Eq,
    Float,
    Gt,
    GtEq,
    Like,
    LParen,
    Lt,
    LtEq,
    NotEq,
    NotLike,
    Or,
    RParen,
    Str,
    Unexpected,
)


class TestClassifyChar:
    """Tests for single-character classification."""

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("(", LParen()),
            (")", RParen()),
            (">", Gt()),
            ("<", Lt()),
            ("=", Eq()),
            ("^", Like()),
            ("~", Like()),
        ],
        ids=["lparen", "rparen", "gt", "lt", "eq", "caret", "tilde"],
    )
    def test_structural_chars(self, char, expected):
        """Test that structural characters map to their tokens."""
        assert classify_char(char) == expected

    @pytest.mark.parametrize("char", ["*", "!", "a", "1", " ", '"', "é"])
    def test_other_chars_are_unexpected(self, char):
        """Test that any other character is carried by an Unexpected token."""
        assert classify_char(char) == Unexpected(char)

    def test_like_spellings_are_equal(self):
        """Test that both like spellings give the same token."""
        assert classify_char("^") == classify_char("~")

    def test_structural_chars_constant(self):
        """Test the exposed set of structural characters."""
        assert STRUCTURAL_CHARS == {"(", ")", ">", "<", "=", "^", "~"}


class TestClassifyNumbers:
    """Tests for numeric literal classification."""

    @pytest.mark.parametrize(
        "lexeme,expected",
        [
            ("1.0", 1.0),
            ("5", 5.0),
            ("-3.25", -3.25),
            ("+7", 7.0),
            ("0", 0.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2.5E-2", 0.025),
            ("20180704", 20180704.0),
        ],
    )
    def test_numbers(self, lexeme, expected):
        """Test that full numeric lexemes become Float tokens."""
        assert classify(lexeme) == Float(expected)

    @pytest.mark.parametrize(
        "lexeme",
        ["5abc", "1.2.3", "-", ".", "1e", "1_000", "inf", "nan", " 5", "5 ", "e5"],
    )
    def test_partial_or_non_decimal_numbers_fall_through(self, lexeme):
        """Test that only complete decimal numbers are numeric."""
        assert parse_number(lexeme) is None
        assert classify(lexeme) == Str(lexeme)

    def test_negative_zero_keeps_its_sign(self):
        """Test that a negative zero literal renders with its sign."""
        assert classify("-0").render() == "(Float, -0)"
        assert classify("0").render() == "(Float, 0)"


class TestClassifyDates:
    """Tests for date-time literal classification."""

    @pytest.mark.parametrize(
        "lexeme,expected",
        [
            ("2018-07-04 12:00 pm", (2018, 7, 4, 12, 0)),
            ("2018-07-04 12:00 am", (2018, 7, 4, 0, 0)),
            ("2018-07-04 01:30 pm", (2018, 7, 4, 13, 30)),
            ("2018-07-04 11:59 am", (2018, 7, 4, 11, 59)),
            ("2018-07-04 12:00 PM", (2018, 7, 4, 12, 0)),
            ("2018-07-04 12:00 AM", (2018, 7, 4, 0, 0)),
            ("2018-07-04 09:15 PM", (2018, 7, 4, 21, 15)),
            ("2018-07-04 12:00", (2018, 7, 4, 12, 0)),
            ("2018-07-04 00:00", (2018, 7, 4, 0, 0)),
            ("2018-12-31 23:59", (2018, 12, 31, 23, 59)),
        ],
        ids=[
            "noon_lower",
            "midnight_lower",
            "afternoon_lower",
            "morning_lower",
            "noon_upper",
            "midnight_upper",
            "evening_upper",
            "noon_24h",
            "midnight_24h",
            "end_of_year_24h",
        ],
    )
    def test_accepted_formats(self, tz, at, lexeme, expected):
        """Test each accepted format against the directly built timestamp."""
        assert classify(lexeme, tz) == Date(at(*expected))

    def test_accepted_format_matches_strptime(self, tz):
        """Test that parsing agrees with strptime in the same zone."""
        expected = datetime.strptime("2018-07-04 12:00 PM", "%Y-%m-%d %I:%M %p")
        assert classify("2018-07-04 12:00 PM", tz) == Date(
            expected.replace(tzinfo=tz)
        )

    def test_default_zone_is_local(self):
        """Test that without a zone the local zone of the host is used."""
        token = classify("2018-07-04 12:00")
        expected = datetime(2018, 7, 4, 12, 0).astimezone()
        assert token == Date(expected)
        assert token.value.tzinfo is not None

    @pytest.mark.parametrize(
        "zone,lexeme",
        [
            ("UTC", "0001-01-01 00:00"),
            ("UTC", "0001-01-01 12:00 am"),
            ("Asia/Kolkata", "0001-01-01 00:00"),
            ("Asia/Kolkata", "0001-01-01 12:00 am"),
            ("Asia/Kolkata", "9999-12-31 23:59"),
            ("America/New_York", "0001-01-01 00:00"),
            ("America/New_York", "0001-01-01 12:00 AM"),
        ],
        ids=[
            "utc_first_minute",
            "utc_first_minute_12h",
            "kolkata_first_minute",
            "kolkata_first_minute_12h",
            "kolkata_last_minute",
            "new_york_first_minute",
            "new_york_first_minute_12h",
        ],
    )
    def test_unrepresentable_local_timestamps_are_strings(
        self, local_zone, zone, lexeme
    ):
        """Test that timestamps at the calendar limits fall back to strings."""
        local_zone(zone)
        assert parse_date(lexeme) is None
        assert classify(lexeme) == Str(lexeme)

    def test_calendar_limits_with_explicit_zone(self, tz, at):
        """Test that an explicit zone still accepts the calendar limits."""
        assert classify("0001-01-01 00:00", tz) == Date(at(1, 1, 1))
        assert classify("9999-12-31 23:59", tz) == Date(at(9999, 12, 31, 23, 59))

    def test_all_spellings_agree(self, tz):
        """Test that the three formats give the same instant for noon."""
        assert (
            classify("2018-07-04 12:00 pm", tz)
            == classify("2018-07-04 12:00 PM", tz)
            == classify("2018-07-04 12:00", tz)
        )

    @pytest.mark.parametrize(
        "lexeme",
        [
            "2018-07-04",
            "2018-07-04 12:00 Pm",
            "2018-07-04 13:00 PM",
            "2018-07-04 00:30 am",
            "2018-7-4 12:00",
            "2018-07-04 9:15 PM",
            "2018-07-04 24:00",
            "2018-02-30 10:00",
            "2018-07-04T12:00",
            "2018-07-04 12:00:00",
            "2018-07-04  12:00",
            "2018-07-04 12:00 PM ",
            "July 4 2018",
        ],
    )
    def test_non_matching_dates_are_strings(self, tz, lexeme):
        """Test that text outside the accepted formats is not a date."""
        assert parse_date(lexeme, tz) is None
        assert classify(lexeme, tz) == Str(lexeme)

    def test_formats_are_tried_in_order(self):
        """Test the order of the accepted formats."""
        assert [fmt.name for fmt in DATE_FORMATS] == [
            "12-hour clock, lowercase am/pm",
            "12-hour clock, uppercase AM/PM",
            "24-hour clock",
        ]


class TestClassifyLexemeTable:
    """Tests for operator and keyword classification."""

    @pytest.mark.parametrize(
        "lexeme,expected",
        [
            (">=", GtEq()),
            ("<=", LtEq()),
            ("!=", NotEq()),
            ("^=", NotEq()),
            ("!~", NotLike()),
            ("^^", NotLike()),
            ("", End()),
            ("EOF", End()),
            ("AND", And()),
            ("and", And()),
            ("OR", Or()),
            ("or", Or()),
        ],
    )
    def test_table_entries(self, lexeme, expected):
        """Test exact matches in the operator and keyword table."""
        assert classify(lexeme) == expected

    @pytest.mark.parametrize(
        "lexeme", ["And", "aND", "Or", "oR", "eof", "Eof", "=>", "=<", "~=", "!"]
    )
    def test_other_casings_and_spellings_are_strings(self, lexeme):
        """Test that the table is case-sensitive and has no extra aliases."""
        assert classify(lexeme) == Str(lexeme)

    @pytest.mark.parametrize("lexeme", [">", "<", "=", "(", ")", "~", "^"])
    def test_single_char_operators_are_not_in_the_table(self, lexeme):
        """Test that single structural characters are left to classify_char."""
        assert classify(lexeme) == Str(lexeme)

    def test_operator_aliases_are_equal(self):
        """Test that alternate operator spellings give the same token."""
        assert classify("^=") == classify("!=")
        assert classify("^^") == classify("!~")


class TestClassifyFallback:
    """Tests for string literal fallback and precedence."""

    @pytest.mark.parametrize(
        "lexeme", ["hello", "priority", "high", "due", "in progress", "a-b", "ünïcode"]
    )
    def test_strings_are_verbatim(self, lexeme):
        """Test that unmatched lexemes become string literals unchanged."""
        token = classify(lexeme)
        assert token == Str(lexeme)

    def test_numbers_take_precedence(self):
        """Test that a numeric lexeme is never classified otherwise."""
        assert classify("2018") == Float(2018.0)
        assert classify("-1") == Float(-1.0)

    def test_classification_is_repeatable(self, tz):
        """Test that classifying the same lexeme twice gives equal tokens."""
        for lexeme in ["5", "2018-07-04 12:00", "AND", "hello"]:
            assert classify(lexeme, tz) == classify(lexeme, tz)
