import pytest

from cub3d.cubfile import CubError, SceneSpec
from cub3d.validate import (
    SCREEN_MAX_H,
    SCREEN_MAX_W,
    Scene,
    load_scene,
    validate_elements,
    validate_map,
    validate_walls,
)

GOOD_GRID = ["111111", "100001", "10N201", "100001", "111111", ""]

SCENE_TEXT = (
    "R 1920 1080\n"
    "NO ./n.xpm\n"
    "SO ./s.xpm\n"
    "WE ./w.xpm\n"
    "EA ./e.xpm\n"
    "S ./sp.xpm\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
    "111111\n"
    "100001\n"
    "10N201\n"
    "100001\n"
    "111111\n"
)


def good_spec(**changes):
    values = dict(width=640, height=480, floor=(1, 2, 3), ceiling=(4, 5, 6))
    values.update(changes)
    return SceneSpec(**values)


def test_elements_within_range_pass():
    spec = validate_elements(good_spec())
    assert (spec.width, spec.height) == (640, 480)
    assert spec.floor == (1, 2, 3)


def test_resolution_clamped_to_screen():
    original = good_spec(width=5000, height=3000)
    spec = validate_elements(original)
    assert (spec.width, spec.height) == (SCREEN_MAX_W, SCREEN_MAX_H)
    assert original.width == 5000


@pytest.mark.parametrize(
    "changes",
    [
        dict(width=-1),
        dict(height=-1),
        dict(floor=(256, 0, 0)),
        dict(ceiling=(0, 0, -1)),
        dict(floor=(-1, -1, -1)),
    ],
)
def test_values_out_of_range(changes):
    with pytest.raises(CubError) as info:
        validate_elements(good_spec(**changes))
    assert info.value.what == "value range"


def test_good_map_passes():
    assert validate_map(GOOD_GRID) == tuple(GOOD_GRID)
    assert validate_walls(GOOD_GRID) == tuple(GOOD_GRID)


def test_open_cell_on_top_row():
    grid = ["1101", "1001", "1111", ""]
    with pytest.raises(CubError) as info:
        validate_walls(grid)
    assert info.value.what == "map content"


def test_top_row_without_wall():
    grid = ["  ", "11", "11", ""]
    with pytest.raises(CubError) as info:
        validate_walls(grid)
    assert info.value.what == "map content of wall"


def test_row_ending_open():
    grid = ["111", "1N0", "111"]
    with pytest.raises(CubError) as info:
        validate_walls(grid)
    assert info.value.what == "map content"


def test_row_starting_open_after_spaces():
    grid = ["111", " 01", "111"]
    with pytest.raises(CubError) as info:
        validate_walls(grid)
    assert info.value.what == "map content"


def test_leading_spaces_before_wall_allowed():
    grid = [" 111", " 1N1", " 111"]
    assert validate_walls(grid) == tuple(grid)


def test_hole_inside_map():
    grid = ["11111", "10 01", "10001", "10001", "11111", ""]
    with pytest.raises(CubError) as info:
        validate_map(grid)
    assert info.value.what == "map content"


def test_unknown_character_inside_map():
    grid = ["11111", "1X001", "10001", "10001", "11111", ""]
    with pytest.raises(CubError) as info:
        validate_map(grid)
    assert info.value.what == "map content"


def test_empty_grid_rejected():
    with pytest.raises(CubError) as info:
        validate_walls([])
    assert info.value.what == "map"


def test_load_scene(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text(SCENE_TEXT)
    scene = load_scene(path)
    assert isinstance(scene, Scene)
    assert scene.grid == ("111111", "100001", "10N201", "100001", "111111", "")
    assert scene.map_end == len(scene.grid) - 1
    assert (scene.spec.width, scene.spec.height) == (1920, 1080)
    assert scene.spec.ceiling == (225, 30, 0)


def test_load_scene_clamps_resolution(tmp_path):
    path = tmp_path / "big.cub"
    path.write_text(SCENE_TEXT.replace("R 1920 1080", "R 9000 9000"))
    scene = load_scene(path)
    assert (scene.spec.width, scene.spec.height) == (SCREEN_MAX_W, SCREEN_MAX_H)


def test_load_scene_bad_colour(tmp_path):
    path = tmp_path / "bad.cub"
    path.write_text(SCENE_TEXT.replace("F 220,100,0", "F 300,100,0"))
    with pytest.raises(CubError) as info:
        load_scene(path)
    assert info.value.what == "value range"


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(CubError) as info:
        load_scene(tmp_path / "absent.cub")
    assert info.value.what == "file status"