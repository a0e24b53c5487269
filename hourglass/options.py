from dataclasses import dataclass
from typing import Any, Literal, TypeAlias, TypeVar, get_args

from hourglass.units import Unit, lookup

Format: TypeAlias = Literal["micro", "short", "default", "long", "chrono"]

FORMATS: tuple[Format, ...] = get_args(Format)


@dataclass(frozen=True, kw_only=True)
class ParseOptions:
    """Per-call settings for :func:`hourglass.parse`.

    ``default_unit`` accepts any spelling the unit table knows ("minutes",
    "min", "m") and is stored in its canonical singular form.
    """

    keep_zero: bool = False
    default_unit: Unit = "second"
    raise_on_error: bool = False

    def __post_init__(self) -> None:
        unit = lookup(self.default_unit) if isinstance(self.default_unit, str) else None
        if unit is None:
            raise ValueError(
                f"Unknown default_unit {self.default_unit!r}.\n"
                f"Hint: use a unit name such as 'seconds', 'minutes' or 'hours'"
            )
        # frozen dataclass
        object.__setattr__(self, "default_unit", unit)


@dataclass(frozen=True, kw_only=True)
class OutputOptions:
    """Per-call settings for :func:`hourglass.output`."""

    format: Format = "default"
    keep_zero: bool = False
    limit_to_hours: bool = False
    units: int | None = None
    joiner: str | None = None

    def __post_init__(self) -> None:
        if self.format not in FORMATS:
            valid = ", ".join(FORMATS)
            raise ValueError(f"Invalid format {self.format!r}. Valid formats: {valid}")
        if self.units is not None and (
            isinstance(self.units, bool)
            or not isinstance(self.units, int)
            or self.units < 1
        ):
            raise ValueError(
                f"units must be a positive integer or None, got {self.units!r}"
            )


Opts = TypeVar("Opts", ParseOptions, OutputOptions)


def coerce_options(
    cls: type[Opts], options: Opts | None, overrides: dict[str, Any]
) -> Opts:
    """Return ``options`` or build one of ``cls`` from keyword overrides."""
    if options is None:
        return cls(**overrides)
    if overrides:
        names = ", ".join(sorted(overrides))
        raise TypeError(
            f"Got both an options object and keyword options ({names}).\n"
            f"Hint: pass one or the other, e.g. "
            f"dataclasses.replace(options, {next(iter(overrides))}=...)"
        )
    if not isinstance(options, cls):
        raise TypeError(
            f"Expected {cls.__name__}, got {type(options).__name__!r}: {options!r}"
        )
    return options
