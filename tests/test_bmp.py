import struct

import pytest

from cub3d.bmp import bmp_bytes, save_bmp


def test_header_fields():
    data = bmp_bytes(2, 3, [0] * 6)
    assert data[:2] == b"BM"
    assert struct.unpack_from("<i", data, 2)[0] == len(data)
    assert struct.unpack_from("<i", data, 10)[0] == 54
    assert struct.unpack_from("<i", data, 14)[0] == 40
    assert struct.unpack_from("<i", data, 18)[0] == 2
    assert struct.unpack_from("<i", data, 22)[0] == 3
    assert data[26] == 1
    assert data[28] == 32


def test_rows_are_written_bottom_first():
    data = bmp_bytes(2, 2, [1, 2, 3, 4])
    assert data[54:] == struct.pack("<4I", 3, 4, 1, 2)


def test_pixel_data_size():
    data = bmp_bytes(5, 4, list(range(20)))
    assert len(data) - 54 == 5 * 4 * 4


def test_negative_colors_are_wrapped():
    data = bmp_bytes(1, 1, [-1])
    assert data[54:] == b"\xff\xff\xff\xff"


def test_wrong_pixel_count_raises():
    with pytest.raises(ValueError):
        bmp_bytes(2, 2, [0, 0, 0])


def test_save_writes_same_bytes(tmp_path):
    target = tmp_path / "screenshot.bmp"
    pixels = [0x00FF0000, 0x0000FF00, 0x000000FF, 0x00FFFFFF]
    written = save_bmp(target, 2, 2, pixels)
    assert written == target
    assert target.read_bytes() == bmp_bytes(2, 2, pixels)


def test_save_overwrites_existing_file(tmp_path):
    target = tmp_path / "shot.bmp"
    target.write_bytes(b"old content that is long enough to differ" * 3)
    save_bmp(target, 1, 1, [7])
    assert target.read_bytes() == bmp_bytes(1, 1, [7])