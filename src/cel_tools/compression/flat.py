"""
Run-length encoding of CEL frames.

The command stream spans the whole frame, there is no header:

- Values 0-127: the next ``n`` bytes are palette indices
- Values 128-255: ``256 - n`` transparent pixels

Frames are always 32 pixels wide.
"""

from cel_tools.compression.context import DecodeContext, register
from cel_tools.constants import FRAME_WIDTH, Encoding


@register(Encoding.FLAT)
def decode(ctx: DecodeContext) -> int:
    while not ctx.at_end():
        command = ctx.read_byte()
        if command <= 127:
            ctx.put_colors(ctx.read(command))
        else:
            ctx.fill_transparent(256 - command)
    return FRAME_WIDTH
