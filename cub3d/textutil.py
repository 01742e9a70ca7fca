"""Small text helpers used when reading scene and texture files."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import List, Union

_LEADING_SPACE = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return ((value + 2**31) % 2**32) - 2**31


def split_fields(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [field for field in text.split(sep) if field]


def parse_int(text: str) -> int:
    """Read a leading decimal integer the way ``atoi`` does.

    Leading whitespace is skipped, one sign is allowed, and reading stops at
    the first non-digit. Text without digits gives 0. The result wraps to a
    signed 32-bit value.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    value = int(digits) * sign if digits else 0
    return _to_int32(value)


def is_numbers(text: str) -> bool:
    """Return True when every character is an ASCII digit (True for "")."""
    return all("0" <= ch <= "9" for ch in text)


def read_lines(path: Union[str, os.PathLike]) -> List[str]:
    """Return the lines of a file without their newline characters.

    The text after the last newline is always returned as a final line,
    so a file ending in a newline yields a trailing empty string.
    """
    raw = Path(path).read_bytes()
    return raw.decode("utf-8", "surrogateescape").split("\n")