"""
Frame index structure.

A CEL or CL2 blob starts with a table of frame offsets. Three layouts exist:

- a single group: ``count``, then ``count + 1`` offsets measured from the
  start of the blob;
- a CEL archive of 8 groups stored back to back from byte 32;
- a CL2 archive whose first 32 bytes are the base offsets of 8 groups, each
  group's offsets being relative to its own base.

A blob is an archive when its first u32 equals 32, the size of the group
table.
"""

import logging
from typing import Any, BinaryIO, TypeVar

from attrs import define, field
from attrs.validators import ge, instance_of

from cel_tools.cel.base import BaseElement, ListElement
from cel_tools.cel.bin_utils import read_fmt, read_u32_array
from cel_tools.constants import GROUP_COUNT, GROUPED_HEADER_SIZE
from cel_tools.exceptions import FormatError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FrameIndex")


@define(frozen=True)
class FrameDescriptor(BaseElement):
    """
    Byte range of one frame inside the blob.

    .. py:attribute:: offset

        Absolute offset of the first byte of the frame.

    .. py:attribute:: length

        Size of the frame in bytes.
    """

    offset: int = field(validator=[instance_of(int), ge(0)])
    length: int = field(validator=[instance_of(int), ge(0)])

    @property
    def end(self) -> int:
        """Offset just past the last byte of the frame."""
        return self.offset + self.length


@define(repr=False, frozen=True)
class FrameIndex(ListElement):
    """
    Ordered list of :py:class:`FrameDescriptor`; the position in the list is
    the frame number.
    """

    @classmethod
    def read(cls: type[T], fp: BinaryIO, headered: bool = False, **kwargs: Any) -> T:
        """
        Read the frame index.

        :param fp: file-like object positioned at the start of the blob.
        :param headered: whether the blob is a CL2 file.
        """
        start = fp.tell()
        first = read_fmt("I", fp)[0]
        items = []
        if first == GROUPED_HEADER_SIZE:
            if headered:
                fp.seek(start)
                bases = read_u32_array(GROUP_COUNT, fp)
                for base in bases:
                    fp.seek(start + base)
                    items.extend(_read_group(fp, base))
            else:
                fp.seek(start + GROUPED_HEADER_SIZE)
                for _ in range(GROUP_COUNT):
                    items.extend(_read_group(fp, 0))
        else:
            fp.seek(start)
            items.extend(_read_group(fp, 0))

        self = cls(items)
        logger.debug("read frame index, frames=%d" % len(self))
        return self

    @classmethod
    def frombytes(  # type: ignore[override]
        cls: type[T], data: bytes, headered: bool = False, **kwargs: Any
    ) -> T:
        """
        Read the frame index of ``data`` and check every frame lies within it.
        """
        self = super().frombytes(data, headered=headered, **kwargs)
        for number, descriptor in enumerate(self):
            if descriptor.end > len(data):
                raise FormatError(
                    "Frame %d at [%d, %d) exceeds the data size %d"
                    % (number, descriptor.offset, descriptor.end, len(data))
                )
        return self


def _read_group(fp: BinaryIO, base: int) -> list[FrameDescriptor]:
    position = fp.tell()
    count = read_fmt("I", fp)[0]
    offsets = read_u32_array(count + 1, fp)
    frames = []
    for i in range(count):
        length = offsets[i + 1] - offsets[i]
        if length < 0:
            raise FormatError(
                "Decreasing frame offsets in the group at %d: %d then %d"
                % (position, offsets[i], offsets[i + 1])
            )
        frames.append(FrameDescriptor(offset=offsets[i] + base, length=length))
    return frames
