"""Rewrite clock-style durations ("4:01:01") into unit phrases."""

import re

from hourglass.units import Unit, canonical_name

# Right to left: the last group is always seconds
CHRONO_UNITS: tuple[Unit, ...] = ("second", "minute", "hour", "day")

_CHRONO_RE = re.compile(r"\d+(?::\d+){1,%d}(?:\.\d+)?" % (len(CHRONO_UNITS) - 1))


def expand(text: str) -> str:
    """Turn ``[[D:]H:]MM:SS[.frac]`` into ``"<D> days <H> hours ..."``.

    Text that does not have this shape is returned unchanged.

    >>> expand("3:14")
    '3 minutes 14 seconds'
    >>> expand("4 hours")
    '4 hours'
    """
    compact = text.replace(" ", "")
    if not _CHRONO_RE.fullmatch(compact):
        return text

    groups = compact.split(":")
    last, dot, fraction = groups[-1].partition(".")
    values = [str(int(group)) for group in groups[:-1]]
    values.append(f"{int(last)}{dot}{fraction}")

    parts = [
        f"{value} {canonical_name(unit)}"
        for value, unit in zip(reversed(values), CHRONO_UNITS)
    ]
    return " ".join(reversed(parts))
