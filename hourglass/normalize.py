"""Input cleanup applied before duration phrases are tokenized."""

import re

from hourglass.numbers import numerize
from hourglass.units import canonical_name, lookup

FILLER_WORDS = ("and", "plus", "with")

_FILLER_RE = re.compile(rf"\b(?:{'|'.join(FILLER_WORDS)})\b", re.IGNORECASE)
_DIGIT_LETTER_RE = re.compile(r"(?<=\d)(?=[^\W\d_])")
_LETTER_DIGIT_RE = re.compile(r"(?<=[^\W\d_])(?=\d)")


def clean(text: str) -> str:
    """Normalize a duration phrase into space-separated numbers and unit names.

    Commas and filler words are dropped, number words become digits, numbers
    glued to unit letters are split apart and every recognized unit spelling
    is replaced by its canonical plural name. Unknown words are left alone so
    that the parser can report them.

    Applying ``clean`` twice gives the same result as applying it once.

    >>> clean("4min11.5s")
    '4 minutes 11.5 seconds'
    >>> clean("four hours, and fourty minutes")
    '4 hours 40 minutes'
    """
    text = text.replace(",", " ")
    text = _DIGIT_LETTER_RE.sub(" ", text)
    text = _LETTER_DIGIT_RE.sub(" ", text)
    text = _FILLER_RE.sub(" ", text)
    text = numerize(text)

    words = []
    for word in text.split():
        unit = lookup(word)
        words.append(canonical_name(unit) if unit else word)

    # "day", "minute 30s": a leading unit word stands for one of it
    if words and lookup(words[0]):
        words.insert(0, "1")

    return " ".join(words)
