"""
Binary processing utilities.

CEL and CL2 files are little-endian. Every read checks that the requested
bytes exist and raises :py:class:`~cel_tools.exceptions.FormatError`
otherwise.
"""

import array
import struct
import sys
from typing import Any, BinaryIO

from cel_tools.exceptions import FormatError


def unpack(fmt: str, data: bytes) -> tuple[Any, ...]:
    fmt = "<" + fmt
    size = struct.calcsize(fmt)
    if len(data) < size:
        raise FormatError("Expected %d bytes but got %d bytes" % (size, len(data)))
    return struct.unpack_from(fmt, data)


def read_fmt(fmt: str, fp: BinaryIO) -> tuple[Any, ...]:
    """
    Reads data from ``fp`` according to ``fmt``.
    """
    fmt = "<" + fmt
    fmt_size = struct.calcsize(fmt)
    position = fp.tell()
    data = fp.read(fmt_size)
    if len(data) != fmt_size:
        raise FormatError(
            "Truncated data at offset %d: expected %d bytes but got %d bytes"
            % (position, fmt_size, len(data))
        )
    return struct.unpack(fmt, data)


def read_u32_array(count: int, fp: BinaryIO) -> array.array:
    """
    Reads ``count`` little-endian unsigned 32-bit integers.
    """
    position = fp.tell()
    data = fp.read(4 * count)
    if len(data) != 4 * count:
        raise FormatError(
            "Truncated array at offset %d: expected %d items but got %d bytes"
            % (position, count, len(data))
        )
    return le_array_from_bytes("I", data)


def le_array_from_bytes(fmt: str, data: bytes) -> array.array:
    arr = array.array(fmt, data)
    return fix_byteorder(arr)


def fix_byteorder(arr: array.array) -> array.array:
    if sys.byteorder == "big":
        arr.byteswap()
    return arr


def trimmed_repr(data: Any, trim_length: int = 30) -> str:
    if isinstance(data, bytes):
        if len(data) > trim_length:
            return repr(
                data[:trim_length] + b" ... =" + str(len(data)).encode("ascii")
            )
    return repr(data)
