import pytest

from cub3d.colornames import lookup_color
from cub3d.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    color_from_text,
    load_xpm,
    parse_xpm,
    strip_comments,
)


def test_strip_comments_blanks_block_and_line_comments():
    text = '/* a */"x"// b\n"y"'
    assert strip_comments(text) == " " * 7 + '"x"' + " " * 5 + '"y"'


def test_strip_comments_keeps_quoted_text():
    text = '"/* keep */" "// too"'
    assert strip_comments(text) == text


@pytest.mark.parametrize(
    "text",
    ['/* XPM */\n"a"', '"a" // end', '"a" /* open', "plain text", '"q" /* x */ // y'],
)
def test_strip_comments_preserves_length(text):
    assert len(strip_comments(text)) == len(text)


def test_strip_comments_removes_all_markers():
    out = strip_comments('/* one */ "a" /* two */\n// three\n"b"')
    assert "/*" not in out and "//" not in out
    assert '"a"' in out and '"b"' in out


def test_color_from_hex():
    assert color_from_text("#FF0000", None) == 0xFF0000


def test_color_from_hex_lowercase():
    assert color_from_text("#00ff00", None) == 0x00FF00


def test_color_from_name():
    assert color_from_text("red", None) == lookup_color("red")


def test_color_from_two_word_name():
    assert color_from_text("light", "blue") == lookup_color("light blue")


def test_color_none_is_transparent_marker():
    assert color_from_text("None", None) == -1


def test_color_unknown_name_is_zero():
    assert color_from_text("nosuchcolour", None) == 0


def test_parse_xpm_simple():
    image = parse_xpm(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert image == XpmImage(
        2, 2, (0xFF0000, TRANSPARENT, TRANSPARENT, 0xFF0000)
    )


def test_parse_xpm_pixel_count_matches_size():
    image = parse_xpm(["3 2 1 1", ". c #000001", "...", "..."])
    assert len(image.pixels) == image.width * image.height


def test_parse_xpm_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c #000001", "bb c #000002", "bbaa"])
    assert image.pixels == (0x000002, 0x000001)


def test_parse_xpm_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == (0x000002,)


def test_parse_xpm_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert image.pixels == (0x000001,)


def test_parse_xpm_unknown_key_is_zero():
    image = parse_xpm(["2 1 1 1", "a c #000007", "az"])
    assert image.pixels == (0x000007, 0)


def test_parse_xpm_named_colours():
    image = parse_xpm(["2 1 2 1", "w c white", "k c black", "wk"])
    assert image.pixels == (lookup_color("white"), lookup_color("black"))


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c #000000", "aa", "aa"],
        ["2 -2 1 1", "a c #000000"],
        ["1 1 1 1"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_file(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tex[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1 ",\n'
        '"x c #00FF00",\n'
        '". c black",\n'
        '"x."\n'
        "};\n"
        "// trailing comment\n"
    )
    image = load_xpm(path)
    assert (image.width, image.height) == (2, 1)
    assert image.pixels == (0x00FF00, lookup_color("black"))


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")


def test_load_xpm_bad_content(tmp_path):
    path = tmp_path / "bad.xpm"
    path.write_text('static char *tex[] = { "not a header" };')
    with pytest.raises(XpmError):
        load_xpm(path)