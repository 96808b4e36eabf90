"""Number parsing, substring counting and random number helpers."""

from __future__ import annotations

import random
import re
import struct

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1
_DEFAULT_SEED = 1

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(
    r"\s*(?P<number>[+-]?(?:"
    r"0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan(?:\([0-9a-z_]*\))?"
    r"|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
    r"))",
    re.IGNORECASE,
)

_static_generator = random.Random(_DEFAULT_SEED)


def convert_to_int(text: str) -> int:
    """Parse the leading integer of text, skipping leading whitespace.

    Raises ValueError when no integer starts the text and OverflowError
    when it does not fit a 32-bit signed integer.
    """
    match = _INT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"integer out of range: {match.group(1)}")
    return number


def convert_to_float(text: str) -> float:
    """Parse the leading number of text as a single-precision float.

    Raises ValueError when no number starts the text and OverflowError
    when it does not fit a single-precision float.
    """
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"no number at start of {text!r}")
    literal = match.group("number")
    sign = -1.0 if literal.startswith("-") else 1.0
    body = literal.lstrip("+-").lower()
    if body.startswith("nan"):
        number = float("nan")
    elif body.startswith("inf"):
        number = sign * float("inf")
    elif body.startswith("0x"):
        number = sign * float.fromhex(body)
    else:
        number = float(literal)
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError as exc:
        raise OverflowError(f"number out of range: {literal}") from exc


def substring_count(text: str, sub: str) -> int:
    """Count the non-overlapping occurrences of sub in text; 0 for an empty sub."""
    if not sub:
        return 0
    return text.count(sub)


def generate_random_number(low: int, high: int, static_seed: bool = False) -> int:
    """Return an integer in [low, high], both unsigned 32-bit values.

    Without static_seed a freshly seeded generator is used, so repeated calls
    with the same bounds give the same number; with static_seed one shared
    generator advances from call to call.
    """
    for bound in (low, high):
        if not 0 <= bound <= _UINT32_MAX:
            raise ValueError(f"bound {bound} is not an unsigned 32-bit value")
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    generator = _static_generator if static_seed else random.Random(_DEFAULT_SEED)
    return generator.randint(low, high)