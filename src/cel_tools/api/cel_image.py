"""
CEL Image module.

This module provides the main :py:class:`CelImage` class, the entry point
for reading CEL and CL2 sprite files. A file holds many frames; the frame
index is read once when the file is opened and every frame is decoded on
request with a caller-supplied palette.

Example usage::

    from cel_tools import CelImage, Palette

    palette = Palette.open('town.pal')
    cel = CelImage.open('towners/animals/cow.cel')

    print(f"Frames: {len(cel)}")
    for frame in cel.frames(palette):
        print(frame.width, frame.height)

    cel.topil(0, palette).save('cow.png')

Decoding keeps no state on the image: each call works on its own
:py:class:`~cel_tools.compression.DecodeContext`, so distinct frames can be
decoded from several threads at once.
"""

import logging
import os
from typing import Any, BinaryIO, Iterator, Optional, Union

try:
    from typing import Self  # type: ignore[attr-defined]
except ImportError:
    from typing_extensions import Self

import numpy as np
from PIL import Image

from cel_tools.api.frame import Frame
from cel_tools.api.protocols import ArchiveProtocol
from cel_tools.cel.bin_utils import trimmed_repr
from cel_tools.cel.frame_index import FrameDescriptor, FrameIndex
from cel_tools.cel.palette import Palette
from cel_tools.compression import classify, decode
from cel_tools.constants import Encoding

logger = logging.getLogger(__name__)

HEADERED_EXTENSION = ".cl2"


def is_headered_path(path: Union[str, bytes, os.PathLike]) -> bool:
    """Whether ``path`` names a CL2 file, judging from its extension."""
    name = os.fsdecode(path)
    return os.path.splitext(name)[1].lower() == HEADERED_EXTENSION


class CelImage:
    """
    CEL or CL2 sprite file.

    The low-level frame index is accessible at :py:attr:`CelImage._record`.

    Example::

        from cel_tools import CelImage

        cel = CelImage.open('monsters/zombie/zombiew.cl2')
        frame = cel.get_frame(0, palette)

    :param data: bytes of the whole file.
    :param headered: whether ``data`` is a CL2 file.
    """

    def __init__(self, data: bytes, headered: bool = False):
        self._data = bytes(data)
        self._headered = bool(headered)
        self._record = FrameIndex.frombytes(self._data, headered=self._headered)

    @classmethod
    def open(
        cls,
        fp: Union[BinaryIO, str, bytes, os.PathLike],
        headered: Optional[bool] = None,
    ) -> Self:
        """
        Open a CEL or CL2 file.

        :param fp: filename or file-like object.
        :param headered: whether the file is a CL2 file. When `None`, a
            ``.cl2`` file name extension selects CL2; file-like objects
            without a name are read as CEL.
        :return: A :py:class:`CelImage` object.
        """
        if isinstance(fp, (str, bytes, os.PathLike)):
            if headered is None:
                headered = is_headered_path(fp)
            with open(fp, "rb") as f:
                data = f.read()
        else:
            if headered is None:
                name = getattr(fp, "name", None)
                headered = isinstance(name, (str, bytes)) and is_headered_path(name)
            data = fp.read()
        return cls(data, headered=headered)

    @classmethod
    def load(cls, archive: ArchiveProtocol, path: str) -> Self:
        """
        Read a CEL or CL2 file out of a game archive.

        :param archive: object whose ``open(path)`` returns a binary stream.
        :param path: path of the file inside the archive; a ``.cl2``
            extension selects CL2.
        :return: A :py:class:`CelImage` object.
        """
        with archive.open(path) as f:
            data = f.read()
        logger.debug("loaded %s from archive, size=%d" % (path, len(data)))
        return cls(data, headered=is_headered_path(path))

    @property
    def headered(self) -> bool:
        """Whether this is a CL2 file."""
        return self._headered

    @property
    def frame_count(self) -> int:
        """Number of frames."""
        return len(self._record)

    def __len__(self) -> int:
        return self.frame_count

    def descriptor(self, index: int) -> FrameDescriptor:
        """
        Byte range of a frame.

        :param index: frame number, ``0 <= index < frame_count``.
        :return: :py:class:`~cel_tools.cel.frame_index.FrameDescriptor`.
        """
        if not 0 <= index < self.frame_count:
            raise IndexError(
                "Frame index %r out of range for %d frames" % (index, self.frame_count)
            )
        return self._record[index]

    def frame_data(self, index: int) -> bytes:
        """Raw bytes of a frame."""
        descriptor = self.descriptor(index)
        return self._data[descriptor.offset : descriptor.end]

    def encoding(self, index: int) -> Encoding:
        """
        Encoding of a frame.

        :return: :py:class:`~cel_tools.constants.Encoding`.
        """
        return classify(self.frame_data(index), self._headered)

    def get_frame(self, index: int, palette: Palette) -> Frame:
        """
        Decode a frame.

        :param index: frame number, ``0 <= index < frame_count``.
        :param palette: :py:class:`~cel_tools.cel.palette.Palette`.
        :return: :py:class:`~cel_tools.api.frame.Frame`.
        """
        data = self.frame_data(index)
        encoding = classify(data, self._headered)
        try:
            pixels, width = decode(data, encoding, palette)
            return Frame.assemble(pixels, width)
        except ValueError as e:
            logger.error(f"An error occurred during frame decoding: {e}")
            logger.info(
                f"Decoding of frame {index} failed: encoding={encoding.value} "
                f"size={len(data)}",
                exc_info=True,
            )
            raise

    def frames(self, palette: Palette) -> Iterator[Frame]:
        """
        Decode every frame in order.

        :param palette: :py:class:`~cel_tools.cel.palette.Palette`.
        """
        for index in range(self.frame_count):
            yield self.get_frame(index, palette)

    def topil(self, index: int, palette: Palette) -> Image.Image:
        """
        Get PIL Image of a frame.

        :return: :py:class:`PIL.Image` in ``RGBA`` mode.
        """
        return self.get_frame(index, palette).topil()

    def numpy(self, index: int, palette: Palette) -> np.ndarray:
        """
        Get NumPy array of a frame.

        :return: :py:class:`numpy.ndarray` of shape ``(height, width, 4)``.
        """
        return self.get_frame(index, palette).numpy()

    def __repr__(self) -> str:
        return "%s(frames=%d, headered=%s, data=%s)" % (
            self.__class__.__name__,
            self.frame_count,
            self._headered,
            trimmed_repr(self._data),
        )

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text(self.__repr__())
            return

        with p.group(2, "{name}(".format(name=self.__class__.__name__), ")"):
            p.breakable("")
            for index in range(self.frame_count):
                if index:
                    p.text(",")
                    p.breakable()
                descriptor = self._record[index]
                p.text(
                    "%d: %s offset=%d length=%d"
                    % (
                        index,
                        self.encoding(index).value,
                        descriptor.offset,
                        descriptor.length,
                    )
                )
            p.breakable("")
