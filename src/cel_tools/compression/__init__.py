"""
Frame decoders for CEL and CL2 data.

Frames do not say how they are encoded. :py:func:`classify` sniffs the
encoding from the container family and the frame bytes, and
:py:func:`decode` runs the matching decoder.

Supported encodings:

- **RAW_INDEXED** (``Encoding.RAW_INDEXED``): uncompressed 32x32 block of
  palette indices, recognized by its size of 1024 bytes
- **HEADERED** (``Encoding.HEADERED``): CL2 run-length encoding with a
  10-byte frame header; the width is inferred from the stream
- **FLAT** (``Encoding.FLAT``): CEL run-length encoding, 32 pixels wide
- **DIAGONAL_ASCENDING** / **DIAGONAL_DESCENDING**: diamond-shaped floor
  tiles, recognized by zero-byte signatures

Example usage::

    from cel_tools.compression import classify, decode

    encoding = classify(frame_bytes, headered=False)
    pixels, width = decode(frame_bytes, encoding, palette)

The decoded pixels are RGBA bytes. Opaque pixels have alpha 255 and
transparent pixels are all zero.
"""

import logging

from cel_tools.cel.palette import Palette
from cel_tools.compression import diagonal, flat, headered, raw  # noqa: F401
from cel_tools.compression.context import DECODERS, DecodeContext
from cel_tools.compression.signature import has_signature
from cel_tools.constants import (
    ASCENDING_SIGNATURE,
    DESCENDING_SIGNATURE,
    RAW_FRAME_SIZE,
    Encoding,
)

logger = logging.getLogger(__name__)

__all__ = ["DecodeContext", "classify", "decode", "has_signature"]


def classify(data: bytes, headered: bool = False) -> Encoding:
    """
    Detect the encoding of a frame.

    :param data: bytes of the frame.
    :param headered: whether the frame comes from a CL2 file.
    :return: :py:class:`~cel_tools.constants.Encoding`.
    """
    if headered:
        return Encoding.HEADERED
    if len(data) == RAW_FRAME_SIZE:
        return Encoding.RAW_INDEXED
    if has_signature(data, DESCENDING_SIGNATURE):
        return Encoding.DIAGONAL_DESCENDING
    if has_signature(data, ASCENDING_SIGNATURE):
        return Encoding.DIAGONAL_ASCENDING
    return Encoding.FLAT


def decode(data: bytes, encoding: Encoding, palette: Palette) -> tuple[bytes, int]:
    """
    Decode a frame.

    :param data: bytes of the frame.
    :param encoding: encoding, see :py:func:`classify`.
    :param palette: :py:class:`~cel_tools.cel.palette.Palette`.
    :return: tuple of RGBA bytes and the frame width.
    """
    ctx = DecodeContext(data, palette)
    width = DECODERS[encoding](ctx)
    logger.debug(
        "decoded %s frame, size=%d, pixels=%d"
        % (encoding.value, len(data), len(ctx.output) // 4)
    )
    return bytes(ctx.output), width
