import logging

from .chrono import expand
from .errors import (
    DurationParseError,
    MalformedTerm,
    NoDigitsFound,
    UnknownUnit,
    ZeroNotKept,
)
from .formatter import decompose, output
from .normalize import clean
from .options import Format, OutputOptions, ParseOptions
from .parser import ParsedTerm, parse, tokenize
from .units import UNITS, Unit, UnitSpec, display_name, length_in_seconds, lookup
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "parse",
    "output",
    "clean",
    "expand",
    "tokenize",
    "decompose",
    "ParseOptions",
    "OutputOptions",
    "ParsedTerm",
    "Format",
    "Unit",
    "UnitSpec",
    "UNITS",
    "lookup",
    "length_in_seconds",
    "display_name",
    "DurationParseError",
    "NoDigitsFound",
    "MalformedTerm",
    "UnknownUnit",
    "ZeroNotKept",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
