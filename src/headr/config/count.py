"""Parsing of line and byte count arguments."""

import re

from headr.errors import InvalidCount

# An optional plus sign followed by ASCII digits, nothing else.
COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def parse_positive_int(text: str, unit: str = "line") -> int:
    """
    Parse a base-10 count that must be strictly positive.

    Only an optional "+" and ASCII digits are accepted. Zero, negative and
    non-numeric values all raise InvalidCount carrying the original text, so
    callers can report "illegal line count -- <text>".
    """
    if not COUNT_PATTERN.fullmatch(text):
        raise InvalidCount(text, unit)

    try:
        value = int(text)
    except ValueError:
        raise InvalidCount(text, unit) from None

    if value <= 0:
        raise InvalidCount(text, unit)
    return value
