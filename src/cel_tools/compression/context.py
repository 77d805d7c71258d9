"""
Per-call decoding state shared by the frame decoders.
"""

from typing import Optional

from attrs import define, field

from cel_tools.cel.palette import Palette
from cel_tools.exceptions import FormatError
from cel_tools.registry import new_registry

#: Maps :py:class:`~cel_tools.constants.Encoding` to ``decode(ctx) -> width``.
DECODERS, register = new_registry(attribute="encoding")

TRANSPARENT = b"\x00\x00\x00\x00"


@define
class DecodeContext:
    """
    Cursor over the bytes of one frame and the RGBA pixels decoded so far.

    A context belongs to a single decode call. Every read is checked against
    the frame size and raises :py:class:`~cel_tools.exceptions.FormatError`
    when it would run past the end of the frame.

    .. py:attribute:: data

        Bytes of the frame.

    .. py:attribute:: palette

        :py:class:`~cel_tools.cel.palette.Palette` used for opaque pixels.
        Passes that only measure the stream leave it unset.

    .. py:attribute:: position

        Offset of the next byte to read, relative to the frame start.

    .. py:attribute:: output

        Accumulated RGBA bytes.
    """

    data: bytes
    palette: Optional[Palette] = None
    position: int = 0
    output: bytearray = field(factory=bytearray, repr=False)

    @property
    def length(self) -> int:
        return len(self.data)

    def at_end(self) -> bool:
        return self.position >= len(self.data)

    def read_byte(self) -> int:
        if self.position >= len(self.data):
            raise FormatError(
                "Unexpected end of frame at offset %d, size=%d"
                % (self.position, len(self.data))
            )
        value = self.data[self.position]
        self.position += 1
        return value

    def read(self, size: int) -> bytes:
        end = self.position + size
        if end > len(self.data):
            raise FormatError(
                "Run of %d bytes at offset %d exceeds the frame size %d"
                % (size, self.position, len(self.data))
            )
        chunk = self.data[self.position : end]
        self.position = end
        return chunk

    def skip(self, size: int) -> None:
        self.read(size)

    def seek(self, position: int) -> None:
        if not 0 <= position <= len(self.data):
            raise FormatError(
                "Offset %d is outside the frame of size %d"
                % (position, len(self.data))
            )
        self.position = position

    def put_colors(self, indices: bytes) -> None:
        self.output += self._get_palette().resolve(indices)

    def put_color(self, index: int, count: int = 1) -> None:
        self.output += self._get_palette().rgba(index) * count

    def _get_palette(self) -> Palette:
        if self.palette is None:
            raise ValueError("A palette is required to decode opaque pixels")
        return self.palette

    def fill_transparent(self, count: int) -> None:
        self.output += TRANSPARENT * count
