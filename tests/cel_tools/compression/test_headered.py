import pytest

from cel_tools.compression import decode
from cel_tools.compression.context import DecodeContext
from cel_tools.compression.headered import decode as decode_headered
from cel_tools.compression.headered import infer_width, read_commands
from cel_tools.constants import Encoding
from cel_tools.exceptions import FormatError

TRANSPARENT = b"\x00\x00\x00\x00"


def test_headered_literal(palette, cl2_frame_builder):
    data = cl2_frame_builder(b"\x60" + b"\xfd\x01\x02\x05", 11)
    pixels, width = decode(data, Encoding.HEADERED, palette)
    assert width == 3
    assert pixels == (
        TRANSPARENT * 96
        + b"\x0a\x14\x1e\xff"
        + b"\x28\x32\x3c\xff"
        + b"\xc8\x64\x32\xff"
    )


def test_headered_repeat(palette, cl2_frame_builder):
    data = cl2_frame_builder(b"\xbb\x02" + b"\x3c" + b"\xff\x01" + b"\x01", 13)
    pixels, width = decode(data, Encoding.HEADERED, palette)
    assert width == 2
    assert pixels == (
        b"\x28\x32\x3c\xff" * 4 + TRANSPARENT * 60 + b"\x0a\x14\x1e\xff" + TRANSPARENT
    )


@pytest.mark.parametrize(
    "commands, marker, expected",
    [
        (b"\x40\x00", 11, 2),
        (b"\x40\x20", 11, 2),
        (b"\x40\x20\x00", 12, 3),
        (b"\xbf" + b"\x01" * 65 + b"\x1f\x00", 77, 3),
        (b"\x80\x07" + b"\x01\x00", 13, 2),
    ],
)
def test_infer_width(cl2_frame_builder, commands, marker, expected):
    assert infer_width(cl2_frame_builder(commands, marker)) == expected


@pytest.mark.parametrize(
    "commands, marker",
    [
        (b"\xfd\x01\x02\x05", 12),
        (b"\x40", 0),
        (b"\x40", 10),
        (b"\x40", 40),
        (b"\x05\x05", 11),
        (b"\x40", 11),
        (b"\x40\x20", 12),
    ],
)
def test_infer_width_error(cl2_frame_builder, commands, marker):
    with pytest.raises(FormatError):
        infer_width(cl2_frame_builder(commands, marker))


def test_short_frame(palette):
    with pytest.raises(FormatError):
        decode(b"\x0a\x00\x0b\x00", Encoding.HEADERED, palette)


@pytest.mark.parametrize("commands", [b"\x40\xfd\x01", b"\x40\xbb"])
def test_headered_overrun(palette, cl2_frame_builder, commands):
    with pytest.raises(FormatError):
        decode(cl2_frame_builder(commands, 11), Encoding.HEADERED, palette)


def test_passes_consume_same_bytes(palette, cl2_frame_builder):
    data = cl2_frame_builder(b"\xbb\x02" + b"\x3c" + b"\xff\x01" + b"\x01", 13)
    scan = DecodeContext(data, position=10)
    counted = sum(count for _, count, _ in read_commands(scan))

    ctx = DecodeContext(data, palette)
    decode_headered(ctx)
    assert scan.position == ctx.position == len(data)
    assert len(ctx.output) == counted * 4
