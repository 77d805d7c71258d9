"""
PIL IO module.
"""

import logging
from typing import TYPE_CHECKING, Sequence

from PIL import Image

if TYPE_CHECKING:
    from cel_tools.api.frame import Frame

logger = logging.getLogger(__name__)


def convert_frame_to_pil(frame: "Frame") -> Image.Image:
    """Convert Frame to PIL Image."""
    return Image.frombytes("RGBA", frame.size, frame.pixels)


def make_sheet(frames: Sequence["Frame"], columns: int = 8) -> Image.Image:
    """
    Paste frames into a grid, left to right then top to bottom.

    Each cell is as large as the largest frame.
    """
    if not frames:
        raise ValueError("No frames to arrange")
    columns = max(1, min(columns, len(frames)))
    rows = (len(frames) + columns - 1) // columns
    cell_width = max(frame.width for frame in frames)
    cell_height = max(frame.height for frame in frames)
    sheet = Image.new("RGBA", (cell_width * columns, cell_height * rows))
    for number, frame in enumerate(frames):
        row, column = divmod(number, columns)
        sheet.paste(
            convert_frame_to_pil(frame), (column * cell_width, row * cell_height)
        )
    logger.debug(
        "arranged %d frames in a %dx%d sheet" % (len(frames), columns, rows)
    )
    return sheet
