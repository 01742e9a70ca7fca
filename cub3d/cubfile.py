"""Reading the element lines and the map rows of a ``.cub`` scene file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from cub3d.textutil import is_numbers, parse_int, split_fields

Color = Tuple[int, int, int]

UNSET_COLOR: Color = (-1, -1, -1)


class CubError(ValueError):
    """Raised when a scene file is malformed.

    ``what`` names the part of the file that failed the check, or is None
    when no detail is known.
    """

    def __init__(self, what: Optional[str] = None) -> None:
        super().__init__(what or "invalid scene file")
        self.what = what


@dataclass
class SceneSpec:
    """The settings read from the element lines of a scene file."""

    width: int = -1
    height: int = -1
    north: Optional[str] = None
    south: Optional[str] = None
    east: Optional[str] = None
    west: Optional[str] = None
    sprite: Optional[str] = None
    floor: Color = UNSET_COLOR
    ceiling: Color = UNSET_COLOR
    map_start: int = 0

    @property
    def texture_paths(self) -> Tuple[Optional[str], ...]:
        """Texture paths in the order north, south, east, west, sprite."""
        return (self.north, self.south, self.east, self.west, self.sprite)


def _matches(line: str, prefix: str) -> bool:
    # Comparison stops at the end of either string, so "R" matches "R ".
    length = min(len(line), len(prefix))
    return line[:length] == prefix[:length]


def _parse_resolution(line: str, spec: SceneSpec) -> None:
    fields = split_fields(line, " ")
    if len(fields) != 3 or spec.width != -1:
        raise CubError("render count")
    if not (is_numbers(fields[1]) and is_numbers(fields[2])):
        raise CubError("render only num")
    if "R" in fields[0]:
        spec.width = parse_int(fields[1])
        spec.height = parse_int(fields[2])
        spec.map_start += 1


def _path_parser(attr: str) -> Callable[[str, SceneSpec], None]:
    def parse(line: str, spec: SceneSpec) -> None:
        fields = split_fields(line, " ")
        if len(fields) != 2 or getattr(spec, attr) is not None:
            raise CubError("path count")
        setattr(spec, attr, fields[1])
        spec.map_start += 1

    return parse


def _color_parser(attr: str) -> Callable[[str, SceneSpec], None]:
    def parse(line: str, spec: SceneSpec) -> None:
        parts = split_fields(line[2:], ",")
        if len(parts) != 3 or not all(is_numbers(part) for part in parts):
            raise CubError("color")
        red, green, blue = (parse_int(part) for part in parts)
        setattr(spec, attr, (red, green, blue))
        spec.map_start += 1

    return parse


_ELEMENT_PARSERS: Tuple[Tuple[str, Callable[[str, SceneSpec], None]], ...] = (
    ("R ", _parse_resolution),
    ("NO ", _path_parser("north")),
    ("SO ", _path_parser("south")),
    ("EA ", _path_parser("east")),
    ("WE ", _path_parser("west")),
    ("S ", _path_parser("sprite")),
    ("F ", _color_parser("floor")),
    ("C ", _color_parser("ceiling")),
)


def _parse_element(line: str, spec: SceneSpec) -> None:
    for prefix, parse in _ELEMENT_PARSERS:
        if _matches(line, prefix):
            parse(line, spec)
            return


def parse_elements(lines: Sequence[str]) -> SceneSpec:
    """Read resolution, texture paths and colours from the file's lines.

    ``lines`` are the file split on newlines; the last item is the text after
    the final newline. Only newline-terminated lines are read as elements.
    ``map_start`` counts the element lines, plus one when the file ends with
    a newline, and is the number of lines skipped before the map.
    """
    lines = list(lines)
    spec = SceneSpec()
    if not lines:
        return spec
    for line in lines[:-1]:
        if line:
            _parse_element(line, spec)
    if lines[-1] == "":
        spec.map_start += 1
    return spec


def extract_map(lines: Sequence[str], map_start: int) -> Tuple[str, ...]:
    """Return the map rows: every line from ``map_start`` to the end."""
    rows = list(lines)
    if map_start < 0 or map_start >= len(rows):
        raise CubError("map")
    return tuple(rows[map_start:])


__all_parsers__: Dict[str, str] = {prefix.strip(): prefix for prefix, _ in _ELEMENT_PARSERS}