"""
Uncompressed 32x32 frames: every byte is a palette index.
"""

from cel_tools.compression.context import DecodeContext, register
from cel_tools.constants import FRAME_WIDTH, Encoding


@register(Encoding.RAW_INDEXED)
def decode(ctx: DecodeContext) -> int:
    ctx.put_colors(ctx.read(ctx.length - ctx.position))
    return FRAME_WIDTH
