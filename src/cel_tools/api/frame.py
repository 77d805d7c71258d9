"""
Decoded frame.
"""

from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define, field

from cel_tools.api import numpy_io, pil_io
from cel_tools.exceptions import FormatError

if TYPE_CHECKING:
    import numpy as np
    from PIL import Image

T = TypeVar("T", bound="Frame")


@define(frozen=True, repr=False)
class Frame:
    """
    RGBA image of one frame.

    .. py:attribute:: width

        Width in pixels.

    .. py:attribute:: height

        Height in pixels.

    .. py:attribute:: pixels

        RGBA bytes, row by row from the top, ``width * height * 4`` long.
    """

    width: int
    height: int
    pixels: bytes = field(converter=bytes)

    @pixels.validator
    def _validate_pixels(self, attribute: Any, value: bytes) -> None:
        if len(value) != self.width * self.height * 4:
            raise ValueError(
                "Expected %d bytes for %dx%d pixels, got %d"
                % (self.width * self.height * 4, self.width, self.height, len(value))
            )

    @classmethod
    def assemble(cls: type[T], pixels: bytes, width: int) -> T:
        """
        Build a frame from decoded RGBA bytes, deriving the height.

        :param pixels: RGBA bytes.
        :param width: width in pixels.
        :return: :py:class:`Frame`.
        """
        row_size = width * 4
        if width <= 0 or not pixels or len(pixels) % row_size:
            raise FormatError(
                "%d bytes of pixels do not fill rows of width %d"
                % (len(pixels), width)
            )
        return cls(width, len(pixels) // row_size, pixels)

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    def topil(self) -> "Image.Image":
        """
        Get PIL Image.

        :return: :py:class:`PIL.Image` in ``RGBA`` mode.
        """
        return pil_io.convert_frame_to_pil(self)

    def numpy(self) -> "np.ndarray":
        """
        Get NumPy array of the frame.

        :return: :py:class:`numpy.ndarray` of shape ``(height, width, 4)``
            and dtype ``uint8``.
        """
        return numpy_io.get_array(self)

    def __repr__(self) -> str:
        return "%s(width=%d, height=%d)" % (
            self.__class__.__name__,
            self.width,
            self.height,
        )
