"""Unit table shared by the parser and the formatter.

Each unit kind knows its length in seconds, the spellings accepted when
parsing, and the suffixes used when rendering a count in each named style.
"""

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from hourglass.util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

Unit: TypeAlias = Literal[
    "second", "minute", "hour", "day", "week", "month", "year"
]

Style: TypeAlias = Literal["micro", "short", "default", "long"]

# Largest first
UNIT_ORDER: tuple[Unit, ...] = (
    "year",
    "month",
    "week",
    "day",
    "hour",
    "minute",
    "second",
)


@dataclass(frozen=True, kw_only=True)
class UnitSpec:
    unit: Unit
    seconds: int
    names: frozenset[str]
    display: dict[Style, tuple[str, str]] = field(hash=False)

    @property
    def canonical(self) -> str:
        """Plural long name, e.g. ``"minutes"``."""
        return self.display["long"][1].strip()


def _spec(
    unit: Unit,
    seconds: int,
    names: tuple[str, ...],
    symbol: str,
    abbr: str,
) -> UnitSpec:
    return UnitSpec(
        unit=unit,
        seconds=seconds,
        names=frozenset(names),
        display={
            "micro": (symbol, symbol),
            "short": (symbol, symbol),
            "default": (f" {abbr}", f" {abbr}s"),
            "long": (f" {unit}", f" {unit}s"),
        },
    )


UNITS: dict[Unit, UnitSpec] = {
    spec.unit: spec
    for spec in (
        _spec("second", SECOND, ("seconds", "second", "secs", "sec", "s"), "s", "sec"),
        _spec(
            "minute", MINUTE, ("minutes", "minute", "mins", "min", "m"), "min", "min"
        ),
        _spec("hour", HOUR, ("hours", "hour", "hrs", "hr", "h"), "h", "hr"),
        _spec("day", DAY, ("days", "day", "dy", "d"), "d", "day"),
        _spec("week", WEEK, ("weeks", "week", "wks", "wk", "w"), "w", "wk"),
        _spec("month", MONTH, ("months", "month", "mos", "mo"), "mo", "mo"),
        _spec("year", YEAR, ("years", "year", "yrs", "yr", "y"), "y", "yr"),
    )
}

# Built once; every spelling maps to exactly one unit
_NAME_MAP: dict[str, Unit] = {
    name: spec.unit for spec in UNITS.values() for name in spec.names
}


def lookup(token: str) -> Unit | None:
    """Resolve a unit spelling, ignoring case. Partial matches never resolve."""
    return _NAME_MAP.get(token.lower())


def length_in_seconds(unit: Unit) -> int:
    return UNITS[unit].seconds


def canonical_name(unit: Unit) -> str:
    return UNITS[unit].canonical


def display_name(
    unit: Unit, style: Style | Literal["chrono"], count: int | float
) -> str:
    """Return the suffix rendered after ``count`` in the given style.

    Chrono output carries no unit names, so it always yields an empty string.
    """
    if style == "chrono":
        return ""
    singular, plural = UNITS[unit].display[style]
    return singular if count == 1 else plural
