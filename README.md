# cub3d

Building blocks for a ray-casting maze game driven by `.cub` scene files:
a scene-file reader and validator, an XPM texture decoder with the X11
colour names, and a 32-bit BMP writer. It has no dependencies beyond the
standard library.

## Installing

```
pip install .
```

## Scene files

A `.cub` file lists its elements first, one per line:

```
R 1024 768
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
S ./textures/sprite.xpm
F 220,100,0
C 225,30,0
```

followed by the map, where `1` is a wall, `0` is floor, `2` is a sprite,
spaces are outside the map and one of `N`, `S`, `E`, `W` marks the player's
start and facing:

```
111111
100101
102001
1000N1
111111
```

The map must be closed by walls. The resolution is clamped to 2560×1440 and
colour components must lie between 0 and 255.

## Using it

### Scenes

```python
from cub3d.validate import load_scene
from cub3d.cubfile import CubError

try:
    scene = load_scene("maps/level.cub")
except CubError as err:
    print("Error")
    if err.what:
        print(f"Check [{err.what}]")
else:
    print(scene.spec.width, scene.spec.height)
    print(scene.spec.texture_paths)   # north, south, east, west, sprite
    print(scene.grid)                  # the map rows, as a tuple of strings
```

The steps are also available separately:

- `cub3d.cubfile.parse_elements(lines)` reads the element lines into a
  `SceneSpec` (`width`, `height`, `north`, `south`, `east`, `west`,
  `sprite`, `floor`, `ceiling`, `map_start`).
- `cub3d.cubfile.extract_map(lines, map_start)` returns the map rows.
- `cub3d.validate.validate_elements(spec)` clamps the resolution, checks the
  value ranges and returns a new spec.
- `cub3d.validate.validate_walls(grid)` and `cub3d.validate.validate_map(grid)`
  check the map layout.

Every problem is raised as `cub3d.cubfile.CubError`, whose `what` attribute
names the part of the file to check (for example `"value range"`,
`"path count"` or `"map content"`).

### Textures

```python
from cub3d.xpm import load_xpm

image = load_xpm("textures/north.xpm")
print(image.width, image.height, hex(image.pixels[0]))
```

`XpmImage.pixels` holds 0xAARRGGBB values row by row; colours given as
`None` come out as `cub3d.xpm.TRANSPARENT`. `parse_xpm(lines)` decodes the
quoted strings of an image directly, `strip_comments(text)` blanks out
C-style comments, and `color_from_text(name, extra)` turns a `#rrggbb` or
named colour into its value. Failures raise `cub3d.xpm.XpmError`.
`cub3d.colornames.lookup_color(name)` looks a colour name up, ignoring case.

### BMP output

```python
from cub3d.bmp import bmp_bytes, save_bmp

save_bmp("screenshot.bmp", 2, 1, [0xFF0000, 0x00FF00])
```

`bmp_bytes(width, height, pixels)` returns the encoded file instead of
writing it. Pixels are given top row first.

### Text helpers

`cub3d.textutil` holds `split_fields`, `parse_int` (leading-integer reading
with 32-bit wrap-around), `is_numbers` and `read_lines`.

## What it does not do

The package does not render the maze, handle the player or keyboard, open a
window or provide a command to run. It reads, checks and encodes the data
such a game works with.

## Running the tests

```
pip install .[test]
pytest
```