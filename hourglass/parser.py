"""Parse duration phrases such as "2 hrs 20 min" or "4:01:01" into seconds."""

import logging
import re
from dataclasses import dataclass
from typing import Any

from hourglass.chrono import expand
from hourglass.errors import (
    DurationParseError,
    MalformedTerm,
    NoDigitsFound,
    UnknownUnit,
    ZeroNotKept,
)
from hourglass.normalize import clean
from hourglass.options import ParseOptions, coerce_options
from hourglass.units import Unit, length_in_seconds, lookup

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")


@dataclass(frozen=True, kw_only=True)
class ParsedTerm:
    magnitude: int | float
    unit: Unit

    @property
    def seconds(self) -> int | float:
        return self.magnitude * length_in_seconds(self.unit)


def _is_number(word: str) -> bool:
    return _NUMBER_RE.fullmatch(word) is not None


def _to_number(literal: str) -> int | float:
    # A decimal point always yields a float, even for "3.0"
    return float(literal) if "." in literal else int(literal)


def _unit_for(word: str) -> Unit:
    unit = lookup(word)
    if unit is None:
        if any(ch.isdigit() for ch in word):
            raise MalformedTerm(word)
        raise UnknownUnit(word)
    return unit


def tokenize(text: str, default_unit: Unit = "second") -> list[ParsedTerm]:
    """Split a cleaned phrase into (magnitude, unit) terms.

    A number followed by a word forms one term. A number with no word after
    it takes ``default_unit``, but only when it is the last token.

    Raises:
        MalformedTerm: A number is followed by another number, a unit has no
            number in front of it, or a token is neither number nor word.
        UnknownUnit: A word does not name any unit.
    """
    words = text.split()
    terms: list[ParsedTerm] = []
    i = 0
    while i < len(words):
        word = words[i]
        if not _is_number(word):
            # A unit here has no number of its own
            if lookup(word) is not None or any(ch.isdigit() for ch in word):
                raise MalformedTerm(word)
            raise UnknownUnit(word)
        magnitude = _to_number(word)

        if i + 1 == len(words):
            terms.append(ParsedTerm(magnitude=magnitude, unit=default_unit))
            break

        following = words[i + 1]
        if _is_number(following):
            raise MalformedTerm(word)
        terms.append(ParsedTerm(magnitude=magnitude, unit=_unit_for(following)))
        i += 2
    return terms


def _calculate(text: str, options: ParseOptions) -> int | float:
    cleaned = clean(expand(text))
    if not any(ch.isdigit() for ch in cleaned):
        raise NoDigitsFound(text)

    total: int | float = 0
    for term in tokenize(cleaned, options.default_unit):
        total += term.seconds

    if total == 0 and not options.keep_zero:
        raise ZeroNotKept(text)
    return total


def parse(
    text: str, options: ParseOptions | None = None, **overrides: Any
) -> int | float | None:
    """Convert a duration phrase into seconds.

    Accepts unit phrases ("3 mins 4 sec", "two hours and twenty minutes",
    "2h20min") and clock notation ("1:20", "4:01:01", "1:20.51"). The result
    is a float only when some number in the phrase has a decimal point.

    Args:
        text: The phrase to parse.
        options: A :class:`ParseOptions`. Its fields may instead be given as
            keyword arguments, e.g. ``parse("5", default_unit="minutes")``.

    Returns:
        Seconds, or None when the phrase cannot be parsed and
        ``raise_on_error`` is off.

    Raises:
        DurationParseError: When ``raise_on_error`` is on and parsing fails.
        TypeError: If ``text`` is not a string.

    Example:
        >>> parse("2 hrs 20 min")
        8400
        >>> parse("0") is None
        True
        >>> parse("0", keep_zero=True)
        0
    """
    opts = coerce_options(ParseOptions, options, overrides)
    if not isinstance(text, str):
        raise TypeError(f"Expected a string to parse, got {type(text).__name__!r}")

    try:
        return _calculate(text, opts)
    except DurationParseError as exc:
        if opts.raise_on_error:
            raise
        logger.debug("Could not parse duration %r: %s", text, exc)
        return None
