"""Tests for input cleanup."""

import pytest

from hourglass.normalize import clean
from hourglass.numbers import numerize


def test_removes_filler_words():
    """Test that connective words are dropped."""
    assert clean("4 days and 11 hours") == "4 days 11 hours"
    assert clean("3 weeks plus 2 days") == "3 weeks 2 days"
    assert clean("3 weeks with 2 days") == "3 weeks 2 days"


def test_collapses_whitespace():
    """Test that extra spaces are squeezed and ends trimmed."""
    assert clean("  4 days and 11     hours") == "4 days 11 hours"


def test_splits_numbers_from_units():
    """Test that a unit glued to its number is separated."""
    assert clean("4min11.5s") == "4 minutes 11.5 seconds"
    assert clean("2h20min") == "2 hours 20 minutes"


def test_splits_filler_glued_to_number():
    """Test that a filler word glued to a number is still removed."""
    assert clean("3 weeks and4 days") == "3 weeks 4 days"


def test_strips_commas():
    """Test that commas are not kept."""
    assert clean("3 weeks and, 2 days") == "3 weeks 2 days"
    assert clean("four hours, and fourty minutes") == "4 hours 40 minutes"


def test_canonicalizes_units_ignoring_case():
    """Test that unit spellings become canonical plural names."""
    assert clean("3 Mins 4 Sec") == "3 minutes 4 seconds"
    assert clean("47 yrs 6 mos 4.5d") == "47 years 6 months 4.5 days"


def test_spelled_out_numbers():
    """Test that number words become digits."""
    assert clean("three mins four sec") == "3 minutes 4 seconds"
    assert clean("two hours and twenty minutes") == "2 hours 20 minutes"
    assert clean("Twenty-One minutes") == "21 minutes"
    assert clean("fifty nine seconds") == "59 seconds"


def test_articles_count_as_one():
    """Test that "a" and "an" stand for one."""
    assert clean("an hour and a minute") == "1 hours 1 minutes"


def test_leading_unit_gets_a_count():
    """Test that a phrase starting with a unit is read as one of it."""
    assert clean("day") == "1 days"
    assert clean("minute 30s") == "1 minutes 30 seconds"


def test_unknown_words_are_kept():
    """Test that unrecognized words survive for the parser to report."""
    assert clean("23 gobblygoos") == "23 gobblygoos"
    assert clean("gobblygoo") == "gobblygoo"


def test_empty_input():
    """Test that blank input cleans to an empty string."""
    assert clean("") == ""
    assert clean("  and  ") == ""


@pytest.mark.parametrize(
    "text",
    [
        "4 days and 11 hours",
        "  4 days and 11     hours",
        "4min11.5s",
        "one1",
        "four hours, and fourty minutes",
        "minute 30s",
        "an hour",
        "23 gobblygoos",
        "1:20",
        "",
    ],
)
def test_clean_is_idempotent(text):
    """Test that cleaning twice changes nothing."""
    once = clean(text)
    assert clean(once) == once


def test_numerize_leaves_other_words():
    """Test that numerize only touches whole number words."""
    assert numerize("someone ninety often") == "someone ninety often"
    assert numerize("and then") == "and then"
    assert numerize("zero") == "0"
