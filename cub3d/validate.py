"""Checks on scene settings and map layout, and loading of whole scenes."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from cub3d.cubfile import CubError, SceneSpec, extract_map, parse_elements
from cub3d.textutil import read_lines

SCREEN_MAX_W = 2560
SCREEN_MAX_H = 1440

_OPEN_CELLS = frozenset("02NSWE")
_EDGE_CELLS = (" ", "1")
_OUTSIDE = "\0"


@dataclass(frozen=True)
class Scene:
    """A checked scene: its settings and its map rows."""

    spec: SceneSpec
    grid: Tuple[str, ...]

    @property
    def map_end(self) -> int:
        """Index of the last map row."""
        return len(self.grid) - 1


def validate_elements(spec: SceneSpec) -> SceneSpec:
    """Clamp the resolution to the screen and check every value's range.

    Returns a new spec; the one given is left unchanged.
    """
    width = min(spec.width, SCREEN_MAX_W)
    height = min(spec.height, SCREEN_MAX_H)
    if width < 0 or height < 0:
        raise CubError("value range")
    for component in (*spec.floor, *spec.ceiling):
        if not 0 <= component <= 255:
            raise CubError("value range")
    return dataclasses.replace(spec, width=width, height=height)


def _cell(rows: Sequence[str], row: int, col: int) -> str:
    if 0 <= row < len(rows) and 0 <= col < len(rows[row]):
        return rows[row][col]
    return _OUTSIDE


def _reject_open_cell(rows: Sequence[str], row: int, col: int) -> None:
    if _cell(rows, row, col) in _OPEN_CELLS:
        raise CubError("map content")


def _check_edge_row(rows: Sequence[str], row: int, neighbour: int, content: bool) -> None:
    line = rows[row]
    for col in range(1, len(line)):
        if content:
            _reject_open_cell(rows, row, col)
        if "1" not in line:
            raise CubError("map content of wall")
        if line[col] == " ":
            around = (
                _cell(rows, row, col + 1),
                _cell(rows, row, col - 1),
                _cell(rows, neighbour, col),
            )
            if any(cell not in _EDGE_CELLS for cell in around):
                raise CubError("map content of wall")


def _check_left_edge(rows: Sequence[str], end: int) -> None:
    for row in range(end):
        _reject_open_cell(rows, row, 0)
        body = rows[row].lstrip(" ")
        if body and body[0] != "1":
            raise CubError("map content")


def _check_right_edge(rows: Sequence[str], end: int) -> None:
    for row in range(end + 1):
        line = rows[row]
        _reject_open_cell(rows, row, len(line) - 1)
        if len(line) > 1:
            body = line.rstrip(" ")
            if not body or body[-1] != "1":
                raise CubError("map content")


def validate_walls(grid: Sequence[str]) -> Tuple[str, ...]:
    """Check that the map is closed by walls on all four sides.

    Returns the rows as a tuple when they pass.
    """
    rows = tuple(grid)
    if not rows:
        raise CubError("map")
    end = len(rows) - 1
    _check_edge_row(rows, 0, 1, content=True)
    _check_edge_row(rows, end, end - 1, content=False)
    _check_left_edge(rows, end)
    _check_right_edge(rows, end)
    return rows


def _check_cell(rows: Sequence[str], row: int, col: int) -> None:
    cell = _cell(rows, row, col)
    around = (
        _cell(rows, row + 1, col),
        _cell(rows, row - 1, col),
        _cell(rows, row, col + 1),
        _cell(rows, row, col - 1),
    )
    if cell in _OPEN_CELLS:
        if " " in around:
            raise CubError("map content")
    elif cell == " ":
        if any(near not in _EDGE_CELLS for near in around):
            raise CubError("map content")
    elif cell == "1" or ord(cell) < 32 or ord(cell) >= 128:
        return
    else:
        raise CubError("map content")


def validate_map(grid: Sequence[str]) -> Tuple[str, ...]:
    """Check the walls and then the inner cells of the map.

    Returns the rows as a tuple when they pass.
    """
    rows = validate_walls(grid)
    columns = len(rows[0])
    last = len(rows) - 2
    for row in range(1, last - 1):
        for col in range(1, columns - 1):
            _check_cell(rows, row, col)
    return rows


def load_scene(path: Union[str, os.PathLike]) -> Scene:
    """Read, check and return the scene stored in a ``.cub`` file."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise CubError("file status") from exc
    spec = validate_elements(parse_elements(lines))
    grid = extract_map(lines, spec.map_start)
    return Scene(spec, validate_map(grid))