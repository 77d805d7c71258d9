from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from cel_tools.api.frame import Frame


def get_array(frame: "Frame") -> np.ndarray:
    array = np.frombuffer(frame.pixels, dtype=np.uint8)
    return array.reshape((frame.height, frame.width, 4))


def get_alpha(frame: "Frame") -> np.ndarray:
    """Boolean mask of the opaque pixels."""
    return get_array(frame)[:, :, 3] == 255
