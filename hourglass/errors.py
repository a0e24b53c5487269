"""Exception hierarchy for duration parsing."""


class DurationParseError(ValueError):
    """A duration phrase could not be turned into seconds."""

    def __init__(self, message: str, fragment: str):
        super().__init__(message)
        self.fragment = fragment


class NoDigitsFound(DurationParseError):
    """The phrase holds no numeric literal at all."""

    def __init__(self, fragment: str):
        super().__init__(f"No duration found in {fragment!r}", fragment)


class MalformedTerm(DurationParseError):
    """A number is missing its unit, or a unit its number."""

    def __init__(self, fragment: str):
        super().__init__(
            f"Malformed duration term {fragment!r}.\n"
            f"Hint: every number except the last needs a unit, e.g. '3 hours 20'",
            fragment,
        )


class UnknownUnit(DurationParseError):
    """A word does not name any known unit."""

    def __init__(self, fragment: str):
        super().__init__(
            f"An invalid word {fragment!r} was used in the string to be parsed",
            fragment,
        )


class ZeroNotKept(DurationParseError):
    """The phrase adds up to zero and ``keep_zero`` was not requested."""

    def __init__(self, fragment: str):
        super().__init__(
            f"{fragment!r} is a zero-length duration.\n"
            f"Hint: pass keep_zero=True to get 0 back",
            fragment,
        )
