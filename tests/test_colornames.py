import pytest

from cub3d.colornames import COLORS, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_occurrence_of_repeated_name_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_unknown_name_gives_none():
    assert lookup_color("no such colour") is None
    assert lookup_color("") is None


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_spaced_and_joined_spellings_agree():
    pairs = [
        ("ghost white", "ghostwhite"),
        ("royal blue", "royalblue"),
        ("hot pink", "hotpink"),
        ("dark red", "darkred"),
    ]
    for spaced, joined in pairs:
        assert lookup_color(spaced) == lookup_color(joined)


def test_all_values_are_rgb_or_transparent():
    for name, value in COLORS.items():
        assert value == -1 or 0 <= value <= 0xFFFFFF, name
        assert name == name.lower()


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLORS["snow"] = 0  # type: ignore[index]
    assert lookup_color("snow") == 0xFFFAFA