"""Pytest configuration and blob builders for cel-tools tests."""

import struct
from typing import Callable, Sequence

import pytest

from cel_tools import Palette


def pack_u32(*values: int) -> bytes:
    return struct.pack("<%dI" % len(values), *values)


def build_cel(frames: Sequence[bytes]) -> bytes:
    """Single group with offsets measured from the start of the blob."""
    offsets = [4 + 4 * (len(frames) + 1)]
    for frame in frames:
        offsets.append(offsets[-1] + len(frame))
    return pack_u32(len(frames), *offsets) + b"".join(frames)


def build_cel_archive(groups: Sequence[Sequence[bytes]]) -> bytes:
    """Eight CEL groups stored back to back after a 32-byte table."""
    assert len(groups) == 8
    table = []
    position = 32
    for group in groups:
        table.append(position)
        position += 4 + 4 * (len(group) + 1)
    header = pack_u32(*table)
    data = b""
    data_position = position
    for group in groups:
        offsets = [data_position]
        for frame in group:
            offsets.append(offsets[-1] + len(frame))
        header += pack_u32(len(group), *offsets)
        data += b"".join(group)
        data_position = offsets[-1]
    return header + data


def build_cl2_archive(groups: Sequence[Sequence[bytes]]) -> bytes:
    """Eight CL2 groups, each with offsets relative to its own base."""
    assert len(groups) == 8
    chunks = [build_cel(group) for group in groups]
    bases = []
    position = 32
    for chunk in chunks:
        bases.append(position)
        position += len(chunk)
    return pack_u32(*bases) + b"".join(chunks)


def build_cl2_frame(commands: bytes, marker: int) -> bytes:
    """CL2 frame: 10-byte header with the row-32 offset, then commands."""
    return struct.pack("<5H", 10, marker, 0, 0, 0) + commands


def build_diagonal(
    ascending: bool, lower: bool = True, pixel: int = 5, tail: bytes = b""
) -> bytes:
    """
    Diamond frame drawn with ``pixel``: rows 0-14, then rows 16-32 with an
    empty row 32. With ``lower`` unset only the upper rows are drawn, padded
    to 256 bytes, and ``tail`` is appended as the uncompressed remainder.
    """
    data = bytearray()
    rows = list(range(15)) + (list(range(16, 33)) if lower else [])
    for row in rows:
        upper = row < 16
        even = row % 2 == 0
        if (upper == even) if ascending else (upper != even):
            data += b"\x00\x00"
        width = 2 + 2 * row if upper else 32 - 2 * (row - 16)
        data += bytes([pixel]) * width
    if not lower:
        data = data.ljust(256, b"\x00")
    return bytes(data) + tail


@pytest.fixture
def palette() -> Palette:
    colors = [(i, i, i) for i in range(256)]
    colors[1] = (10, 20, 30)
    colors[2] = (40, 50, 60)
    colors[5] = (200, 100, 50)
    colors[9] = (1, 2, 3)
    return Palette(colors)


@pytest.fixture
def cel_builder() -> Callable[[Sequence[bytes]], bytes]:
    return build_cel


@pytest.fixture
def cel_archive_builder() -> Callable[[Sequence[Sequence[bytes]]], bytes]:
    return build_cel_archive


@pytest.fixture
def cl2_archive_builder() -> Callable[[Sequence[Sequence[bytes]]], bytes]:
    return build_cl2_archive


@pytest.fixture
def cl2_frame_builder() -> Callable[[bytes, int], bytes]:
    return build_cl2_frame


@pytest.fixture
def diagonal_builder() -> Callable[..., bytes]:
    return build_diagonal
