"""Spelled-out cardinal numbers from zero to fifty-nine."""

import re

ONES = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

TEENS = {
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

# "fourty" is a common misspelling and is accepted on purpose
TENS = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fourty": 40,
    "fifty": 50,
}

WORDS: dict[str, int] = {**ONES, **TEENS, **TENS}

# Compound forms ("twenty-one", "twenty one") must be tried before bare tens
_COMPOUND_RE = re.compile(
    rf"\b({'|'.join(TENS)})[\s-]+({'|'.join(k for k in ONES if k != 'zero')})\b",
    re.IGNORECASE,
)
_WORD_RE = re.compile(
    rf"\b({'|'.join(sorted(WORDS, key=len, reverse=True))})\b", re.IGNORECASE
)
_ARTICLE_RE = re.compile(r"\ban?\b", re.IGNORECASE)


def numerize(text: str) -> str:
    """Replace number words with digits.

    >>> numerize("two hours and twenty-five minutes")
    '2 hours and 25 minutes'
    >>> numerize("an hour")
    '1 hour'
    """
    text = _COMPOUND_RE.sub(
        lambda m: str(TENS[m[1].lower()] + ONES[m[2].lower()]), text
    )
    text = _WORD_RE.sub(lambda m: str(WORDS[m[1].lower()]), text)
    return _ARTICLE_RE.sub("1", text)
