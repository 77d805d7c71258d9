"""
Various constants for cel_tools
"""

from enum import Enum
from typing import NamedTuple


class Encoding(str, Enum):
    """
    Frame encoding.

    CEL and CL2 frames carry no tag naming their encoding, it is sniffed from
    the container family and the frame bytes. See
    :py:func:`~cel_tools.compression.classify`.
    """

    RAW_INDEXED = "raw-indexed"
    HEADERED = "headered"
    FLAT = "flat"
    DIAGONAL_ASCENDING = "diagonal-ascending"
    DIAGONAL_DESCENDING = "diagonal-descending"


class Signature(NamedTuple):
    """
    Zero-byte pattern used to detect diagonal frames.

    A frame matches when it is at least ``min_length`` bytes long and both
    bytes at every offset in ``offsets`` are zero.
    """

    min_length: int
    offsets: tuple[int, ...]


#: Width in pixels of every frame whose width is not stored in the stream.
FRAME_WIDTH = 32

#: Rows covered by the line offset at bytes 2-3 of a CL2 frame header.
HEADERED_ROWS = 32

#: Size of the header that precedes every CL2 frame.
HEADERED_HEADER_SIZE = 10

#: CL2 literal runs are at most this long; longer runs repeat a single index.
HEADERED_MAX_LITERAL = 65

#: Frame size of an uncompressed 32x32 tile.
RAW_FRAME_SIZE = 1024

#: First u32 of a grouped archive, which is also the size of its group table.
GROUPED_HEADER_SIZE = 32

#: Number of groups in a grouped archive.
GROUP_COUNT = 8

#: Rows in each half of a diagonal frame.
DIAGONAL_HALF_ROWS = 16

#: Start of the uncompressed lower half of a diagonal frame.
DIAGONAL_FLAT_OFFSET = 256

# The tables below match the legacy asset corpus byte for byte.
DESCENDING_SIGNATURE = Signature(196, (2, 14, 34, 62, 98, 142, 194))
DESCENDING_LOWER_SIGNATURE = Signature(196, (254, 318, 374, 422, 462, 494, 518, 534))
ASCENDING_SIGNATURE = Signature(226, (0, 8, 24, 48, 80, 120, 168, 224))
ASCENDING_LOWER_SIGNATURE = Signature(530, (288, 348, 400, 444, 480, 508, 528))
