"""
Run-length encoding of CL2 frames.

Every CL2 frame starts with a 10-byte header. The u16 at bytes 2-3 is the
offset of the command that starts row 32; the command stream itself runs
from byte 10 to the end of the frame:

- Values 0-127: ``n`` transparent pixels
- Values 191-255: ``256 - n`` literal palette indices follow
- Values 128-190: the next byte is repeated ``256 - n - 65`` times

The width is not stored. Measuring how many pixels the commands before the
row-32 offset produce and dividing by 32 yields it.
"""

import logging
from typing import Iterator

from cel_tools.cel.bin_utils import unpack
from cel_tools.compression.context import DecodeContext, register
from cel_tools.constants import (
    HEADERED_HEADER_SIZE,
    HEADERED_MAX_LITERAL,
    HEADERED_ROWS,
    Encoding,
)
from cel_tools.exceptions import FormatError

logger = logging.getLogger(__name__)

LITERAL, REPEAT, TRANSPARENT = range(3)


def read_commands(ctx: DecodeContext) -> Iterator[tuple[int, int, bytes]]:
    """
    Yield ``(kind, pixel_count, payload)`` for each command up to the end of
    the frame. ``ctx.position`` is the next command offset after each yield.
    """
    while not ctx.at_end():
        command = ctx.read_byte()
        if command > 127:
            value = 256 - command
            if value <= HEADERED_MAX_LITERAL:
                yield LITERAL, value, ctx.read(value)
            else:
                yield REPEAT, value - HEADERED_MAX_LITERAL, ctx.read(1)
        else:
            yield TRANSPARENT, command, b""


def infer_width(data: bytes) -> int:
    """
    Width of a CL2 frame, measured from its row-32 offset.

    :param data: bytes of the frame, header included.
    :return: width in pixels.
    """
    if len(data) < HEADERED_HEADER_SIZE:
        raise FormatError(
            "CL2 frame of %d bytes is shorter than its header" % len(data)
        )
    marker = unpack("H", data[2:4])[0]
    scan = DecodeContext(data, position=HEADERED_HEADER_SIZE)
    pixels = 0
    for _, count, _ in read_commands(scan):
        pixels += count
        # The row-32 command lies inside the frame.
        if scan.position == marker and not scan.at_end():
            break
    else:
        raise FormatError(
            "Command stream never reaches the row offset %d, size=%d"
            % (marker, len(data))
        )

    width = pixels // HEADERED_ROWS
    if width <= 0:
        raise FormatError("Invalid CL2 frame width %d at offset %d" % (width, marker))
    return width


@register(Encoding.HEADERED)
def decode(ctx: DecodeContext) -> int:
    width = infer_width(ctx.data)
    ctx.seek(HEADERED_HEADER_SIZE)
    for kind, count, payload in read_commands(ctx):
        if kind == LITERAL:
            ctx.put_colors(payload)
        elif kind == REPEAT:
            ctx.put_color(payload[0], count)
        else:
            ctx.fill_transparent(count)
    logger.debug("decoded CL2 frame, width=%d, size=%d" % (width, ctx.length))
    return width
