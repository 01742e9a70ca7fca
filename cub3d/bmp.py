"""Writing rendered frames as 32-bit BMP files."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Sequence, Union

HEADER_SIZE = 54
INFO_SIZE = 40


def bmp_bytes(width: int, height: int, pixels: Sequence[int]) -> bytes:
    """Encode ``pixels`` (row by row from the top, 0xAARRGGBB) as a BMP file.

    Rows are stored bottom first, each pixel as 4 little-endian bytes.
    """
    if width < 0 or height < 0:
        raise ValueError("image size must not be negative")
    if len(pixels) != width * height:
        raise ValueError(
            f"expected {width * height} pixels, got {len(pixels)}"
        )
    header = bytearray(HEADER_SIZE)
    header[0:2] = b"BM"
    struct.pack_into("<i", header, 2, width * height * 4 + HEADER_SIZE)
    struct.pack_into("<i", header, 10, HEADER_SIZE)
    struct.pack_into("<i", header, 14, INFO_SIZE)
    struct.pack_into("<i", header, 18, width)
    struct.pack_into("<i", header, 22, height)
    header[26] = 1
    header[28] = 32
    ordered = [
        color & 0xFFFFFFFF
        for row in reversed(range(height))
        for color in pixels[row * width:(row + 1) * width]
    ]
    return bytes(header) + struct.pack(f"<{len(ordered)}I", *ordered)


def save_bmp(
    path: Union[str, os.PathLike], width: int, height: int, pixels: Sequence[int]
) -> Path:
    """Write the frame to ``path`` as a BMP file and return the path."""
    target = Path(path)
    target.write_bytes(bmp_bytes(width, height, pixels))
    return target