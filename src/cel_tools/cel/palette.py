"""
Palette structure.

CEL and CL2 frames store 8-bit palette indices. The palette itself lives in
a separate ``.pal`` file made of 256 packed RGB triples, without alpha.
"""

import logging
import os
from typing import Any, BinaryIO, Sequence, TypeVar, Union

from attrs import define, field

from cel_tools.cel.base import BaseElement

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Palette")

PALETTE_SIZE = 256


def _to_colors(value: Sequence[Sequence[int]]) -> tuple[tuple[int, int, int], ...]:
    return tuple((int(r), int(g), int(b)) for r, g, b in value)


@define(repr=False, frozen=True)
class Palette(BaseElement):
    """
    Table of 256 RGB colors.

    Example::

        from cel_tools.cel.palette import Palette

        palette = Palette.open('town.pal')
        r, g, b = palette[1]

    .. py:attribute:: colors

        `tuple` of 256 ``(r, g, b)`` triples.
    """

    colors: tuple[tuple[int, int, int], ...] = field(converter=_to_colors)
    _rgba: tuple[bytes, ...] = field(init=False, eq=False)

    @colors.validator
    def _validate_colors(self, attribute: Any, value: tuple) -> None:
        if len(value) != PALETTE_SIZE:
            raise ValueError(
                "Palette must have %d colors, got %d" % (PALETTE_SIZE, len(value))
            )
        for color in value:
            if not all(0 <= c <= 255 for c in color):
                raise ValueError("Invalid color %r" % (color,))

    def __attrs_post_init__(self) -> None:
        object.__setattr__(
            self, "_rgba", tuple(bytes((r, g, b, 255)) for r, g, b in self.colors)
        )

    @classmethod
    def read(cls: type[T], fp: BinaryIO, **kwargs: Any) -> T:
        data = fp.read(PALETTE_SIZE * 3)
        if len(data) != PALETTE_SIZE * 3:
            raise ValueError(
                "Palette must be %d bytes, got %d" % (PALETTE_SIZE * 3, len(data))
            )
        return cls([data[i : i + 3] for i in range(0, len(data), 3)])

    @classmethod
    def open(cls: type[T], fp: Union[BinaryIO, str, bytes, os.PathLike]) -> T:
        """
        Open a palette file.

        :param fp: filename or file-like object.
        :return: A :py:class:`Palette` object.
        """
        if isinstance(fp, (str, bytes, os.PathLike)):
            with open(fp, "rb") as f:
                return cls.read(f)
        return cls.read(fp)

    @classmethod
    def grayscale(cls: type[T]) -> T:
        """Palette mapping every index to the gray level of the same value."""
        return cls([(i, i, i) for i in range(PALETTE_SIZE)])

    def __getitem__(self, index: int) -> tuple[int, int, int]:
        if not 0 <= index < PALETTE_SIZE:
            raise IndexError("Palette index out of range: %r" % (index,))
        return self.colors[index]

    def __len__(self) -> int:
        return PALETTE_SIZE

    def rgba(self, index: int) -> bytes:
        """
        Opaque RGBA bytes for the given index.
        """
        if not 0 <= index < PALETTE_SIZE:
            raise IndexError("Palette index out of range: %r" % (index,))
        return self._rgba[index]

    def resolve(self, indices: bytes) -> bytes:
        """
        Opaque RGBA bytes for a sequence of indices.
        """
        rgba = self._rgba
        return b"".join(rgba[i] for i in indices)

    def __repr__(self) -> str:
        return "Palette(colors=%d)" % len(self.colors)
