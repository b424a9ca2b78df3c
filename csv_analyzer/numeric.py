"""
numeric.py

Lenient numeric parsing for raw CSV cells.

A cell counts as a number when it STARTS with a decimal literal. Anything
after the literal is ignored, so "42kg" reads as 42 and "3.5 stars" as 3.5.
"""

import math
import re
from typing import NamedTuple, Optional

# sign, then ASCII digits with optional fraction or a bare fraction, then an
# exponent only when it carries digits
_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)


class NumericPrefix(NamedTuple):
    """A parsed leading number and the unparsed rest of the cell."""

    value: float
    remainder: str


def parse_numeric_prefix(text: str) -> Optional[NumericPrefix]:
    """
    Parse the leading numeric token of a string.

    Leading whitespace is skipped. The token is an optional sign followed by
    digits ("12", "12.", "12.5") or a bare fraction (".5"), optionally
    followed by an exponent ("1e3", "2.5E-2").

    Args:
        text: Raw cell value

    Returns:
        NumericPrefix(value, remainder), or None when the string does not
        start with a number or the number is not finite (e.g. "1e999")
    """
    stripped = text.lstrip()
    match = _NUMERIC_PREFIX.match(stripped)
    if match is None:
        return None

    value = float(match.group(0))
    if not math.isfinite(value):
        return None

    return NumericPrefix(value=value, remainder=stripped[match.end():])


def parse_numeric(text: str) -> Optional[float]:
    """Return only the value of parse_numeric_prefix, or None."""
    parsed = parse_numeric_prefix(text)
    return parsed.value if parsed is not None else None
