"""Reader for XPM images used as wall and sprite textures."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from cub3d.colornames import lookup_color
from cub3d.textutil import _to_int32, parse_int

# Pixel value written where the colour table says "None".
TRANSPARENT = 0xFF000000

_HEX = re.compile(r"[\t\n\v\f\r ]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_WORD_SEP = re.compile(r"[ \t]")
_QUOTED = re.compile(r'"([^"]*)"')
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when an XPM image cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds 0xAARRGGBB values row by row."""

    width: int
    height: int
    pixels: Tuple[int, ...]


def _words(text: str) -> List[str]:
    return [word for word in _WORD_SEP.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    """Index of the first ``token`` outside double quotes, or -1."""
    quoted = False
    last = len(text) - len(token)
    for pos, ch in enumerate(text):
        if pos > last:
            break
        if ch == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    stop = min(stop, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The text keeps its length. A ``//`` comment swallows its newline.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = end + 2 if end != -1 else begin + 3
        text = _blank(text, begin, stop)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = end + 1 if end != -1 else begin + 2
        text = _blank(text, begin, stop)
    return text


def color_from_text(name: str, extra: Optional[str]) -> int:
    """Turn an XPM colour spec into a colour value.

    ``#rrggbb`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``extra`` when given) is looked up among the named colours; "None" gives
    -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        match = _HEX.match(name[1:])
        digits = match.group(2)
        value = int(digits, 16) if digits else 0
        if match.group(1) == "-":
            value = -value
        return _to_int32(value)
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its strings: header, colours, then pixel rows."""
    rows = iter(lines)
    header = _words(_next_line(rows, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (parse_int(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    colors: Dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        key = line[:cpp]
        words = _words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c': {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        extra = words[at + 1] if at + 1 < len(words) else None
        color = color_from_text(words[at], extra)
        if cpp <= 2:
            colors[key] = color
        else:
            colors.setdefault(key, color)

    pixels: List[int] = []
    for _ in range(height):
        line = _next_line(rows, "pixel row")
        for start in range(0, width * cpp, cpp):
            color = colors.get(line[start:start + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def load_xpm(path: Union[str, os.PathLike]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    text = strip_comments(raw.decode("latin-1"))
    return parse_xpm(_QUOTED.findall(text))