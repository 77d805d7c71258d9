"""
cel-tools: Python package for reading CEL and CL2 sprite files.

CEL and CL2 files pack many run-length encoded, palette-indexed frames into a
single blob. This package locates the frames, detects how each one is
encoded and decodes it into RGBA pixels.

Basic usage::

    from cel_tools import CelImage, Palette

    palette = Palette.open('town.pal')
    cel = CelImage.open('towners/smith/smithn.cel')

    for index, frame in enumerate(cel.frames(palette)):
        frame.topil().save('smith-%d.png' % index)

Architecture:

- :py:mod:`cel_tools.cel`: Low-level frame index and palette structures
- :py:mod:`cel_tools.compression`: Encoding detection and frame decoders
- :py:mod:`cel_tools.api`: High-level user-facing API (primary interface)
"""

from cel_tools.api.cel_image import CelImage
from cel_tools.api.frame import Frame
from cel_tools.cel.palette import Palette
from cel_tools.exceptions import FormatError
from cel_tools.version import __version__

__all__ = ["CelImage", "Frame", "FormatError", "Palette", "__version__"]
