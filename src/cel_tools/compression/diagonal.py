"""
Diamond-shaped frames of isometric floor tiles.

The upper half draws ``2, 4, ..., 30`` pixels on rows 0-14. Row 15 is not
stored. The lower half draws ``32, 30, ..., 2`` pixels on rows 16-31 and
closes with the empty row 32, so the frame is 32x32. The rest of each row is
transparent. Every other row starts with a 2-byte marker. Ascending frames
put the padding before the pixels and have markers on even upper rows and
odd lower rows. Descending frames put it after the pixels and swap the
parity.

Some frames only store the upper half as a diamond; their lower half is a
plain block of palette indices from byte 256 to the end of the frame. The
lower-half signature tells the two apart.
"""

from cel_tools.compression.context import DecodeContext, register
from cel_tools.compression.signature import has_signature
from cel_tools.constants import (
    ASCENDING_LOWER_SIGNATURE,
    DESCENDING_LOWER_SIGNATURE,
    DIAGONAL_FLAT_OFFSET,
    DIAGONAL_HALF_ROWS,
    FRAME_WIDTH,
    Encoding,
)

MARKER_SIZE = 2

UPPER_ROWS = range(0, DIAGONAL_HALF_ROWS - 1)
LOWER_ROWS = range(DIAGONAL_HALF_ROWS, 2 * DIAGONAL_HALF_ROWS + 1)


def row_width(row: int) -> int:
    """Number of opaque pixels drawn on ``row``."""
    if row < DIAGONAL_HALF_ROWS:
        return 2 + row * 2
    return FRAME_WIDTH - (row - DIAGONAL_HALF_ROWS) * 2


def has_marker(row: int, ascending: bool) -> bool:
    """Whether ``row`` starts with a 2-byte marker."""
    upper = row < DIAGONAL_HALF_ROWS
    even = row % 2 == 0
    return (upper == even) == ascending


def _draw_rows(ctx: DecodeContext, rows: range, ascending: bool) -> None:
    for row in rows:
        if has_marker(row, ascending):
            ctx.skip(MARKER_SIZE)
        width = row_width(row)
        if ascending:
            ctx.fill_transparent(FRAME_WIDTH - width)
        ctx.put_colors(ctx.read(width))
        if not ascending:
            ctx.fill_transparent(FRAME_WIDTH - width)


def _decode(ctx: DecodeContext, ascending: bool) -> int:
    _draw_rows(ctx, UPPER_ROWS, ascending)
    lower = ASCENDING_LOWER_SIGNATURE if ascending else DESCENDING_LOWER_SIGNATURE
    if has_signature(ctx.data, lower):
        _draw_rows(ctx, LOWER_ROWS, ascending)
    else:
        # Descending upper halves end 2 bytes short of the block.
        ctx.seek(DIAGONAL_FLAT_OFFSET)
        ctx.put_colors(ctx.read(ctx.length - DIAGONAL_FLAT_OFFSET))
    return FRAME_WIDTH


@register(Encoding.DIAGONAL_ASCENDING)
def decode_ascending(ctx: DecodeContext) -> int:
    return _decode(ctx, True)


@register(Encoding.DIAGONAL_DESCENDING)
def decode_descending(ctx: DecodeContext) -> int:
    return _decode(ctx, False)
