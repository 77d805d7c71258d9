import pytest

from cel_tools.compression.context import DecodeContext
from cel_tools.exceptions import FormatError


def test_read(palette):
    ctx = DecodeContext(b"\x01\x02\x03", palette)
    assert ctx.read_byte() == 1
    assert ctx.read(2) == b"\x02\x03"
    assert ctx.at_end()
    with pytest.raises(FormatError):
        ctx.read_byte()


def test_seek_outside_frame():
    ctx = DecodeContext(b"\x01\x02")
    ctx.seek(2)
    with pytest.raises(FormatError):
        ctx.seek(3)


@pytest.mark.parametrize(
    "put", [lambda ctx: ctx.put_colors(b"\x01"), lambda ctx: ctx.put_color(1, 2)]
)
def test_missing_palette(put):
    ctx = DecodeContext(b"\x01")
    with pytest.raises(ValueError, match="palette"):
        put(ctx)
    assert ctx.output == bytearray()


def test_put_color(palette):
    ctx = DecodeContext(b"", palette)
    ctx.put_color(1, 2)
    ctx.fill_transparent(1)
    assert bytes(ctx.output) == b"\x0a\x14\x1e\xff" * 2 + b"\x00" * 4
