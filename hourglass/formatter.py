"""Render a number of seconds as a readable duration."""

import math
from decimal import Decimal
from typing import Any

from hourglass.options import OutputOptions, coerce_options
from hourglass.units import UNIT_ORDER, Unit, display_name, length_in_seconds

# Output never rolls days up into weeks, months or years
LARGEST_UNIT: Unit = "day"

Term = tuple[Unit, int | float]


def _decimal_places(value: float) -> int:
    """Number of digits after the point in the shortest repr of ``value``."""
    exponent = Decimal(repr(value)).as_tuple().exponent
    return max(0, -int(exponent))


def decompose(seconds: int | float, largest: Unit = LARGEST_UNIT) -> list[Term]:
    """Break ``seconds`` into counts from ``largest`` down to seconds.

    Every unit in range is present, zero counts included. Only the seconds
    term carries a fractional part.

    >>> decompose(4 * 3600 + 61)
    [('day', 0), ('hour', 4), ('minute', 1), ('second', 1)]
    """
    whole = int(seconds)
    fraction = seconds - whole

    terms: list[Term] = []
    for unit in UNIT_ORDER[UNIT_ORDER.index(largest) :]:
        count, whole = divmod(whole, length_in_seconds(unit))
        terms.append((unit, count))

    if fraction:
        unit, count = terms[-1]
        terms[-1] = (unit, count + fraction)
    return terms


def _format_count(count: int | float, places: int, width: int = 0) -> str:
    if isinstance(count, float):
        text = f"{count:.{places}f}"
        # width counts integer digits only
        return text.zfill(width + places + 1) if width else text
    return str(count).zfill(width)


def _render_chrono(terms: list[Term], places: int) -> str:
    # Leading zero groups go, but the seconds group always stays
    while len(terms) > 1 and terms[0][1] == 0:
        terms = terms[1:]

    head, *rest = terms
    groups = [_format_count(head[1], places)]
    groups.extend(_format_count(count, places, width=2) for _, count in rest)
    return ":".join(groups)


def output(
    seconds: int | float, options: OutputOptions | None = None, **overrides: Any
) -> str | None:
    """Render ``seconds`` as text in one of the named formats.

    For 4 hours, 1 minute and 1 second:

    - ``micro``: ``4h1min1s``
    - ``short``: ``4h 1min 1s``
    - ``default``: ``4 hrs 1 min 1 sec``
    - ``long``: ``4 hours 1 minute 1 second``
    - ``chrono``: ``4:01:01``

    Args:
        seconds: A non-negative number of seconds.
        options: An :class:`OutputOptions`. Its fields may instead be given
            as keyword arguments, e.g. ``output(80, format="long")``.

    Returns:
        The rendered duration, or None for a zero duration without
        ``keep_zero`` (chrono renders zero as ``"0"`` regardless).

    Raises:
        TypeError: If ``seconds`` is not an int or float.
        ValueError: If ``seconds`` is negative or not finite.
    """
    opts = coerce_options(OutputOptions, options, overrides)
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise TypeError(
            f"Expected seconds as int or float, got {type(seconds).__name__!r}"
        )
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(
            f"Duration must be a finite, non-negative number of seconds, "
            f"got {seconds!r}"
        )

    places = 0
    if isinstance(seconds, float):
        if seconds.is_integer():
            seconds = int(seconds)
        else:
            places = _decimal_places(seconds)

    largest: Unit = "hour" if opts.limit_to_hours else LARGEST_UNIT
    terms = decompose(seconds, largest)

    match opts.format:
        case "chrono":
            return _render_chrono(terms, places)
        case "micro":
            joiner = ""
        case "short" | "default" | "long":
            joiner = " "

    kept = [(unit, count) for unit, count in terms if count]
    if not kept:
        if not opts.keep_zero:
            return None
        kept = [("second", 0)]
    if opts.units is not None:
        kept = kept[: opts.units]

    if opts.joiner is not None:
        joiner = opts.joiner
    return joiner.join(
        f"{_format_count(count, places)}{display_name(unit, opts.format, count)}"
        for unit, count in kept
    )
