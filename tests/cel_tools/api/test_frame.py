import numpy as np
import pytest

from cel_tools.api.frame import Frame
from cel_tools.api.numpy_io import get_alpha
from cel_tools.api.pil_io import make_sheet
from cel_tools.exceptions import FormatError


@pytest.fixture
def fixture():
    yield Frame.assemble(b"\x01\x02\x03\xff" * 3 + b"\x00" * 4 * 3, 2)


def test_assemble(fixture):
    assert fixture.size == (2, 3)
    assert len(fixture.pixels) == 2 * 3 * 4


@pytest.mark.parametrize(
    "pixels, width",
    [
        (b"", 32),
        (b"\x00" * 16, 32),
        (b"\x00" * 12, 2),
        (b"\x00" * 8, 0),
    ],
)
def test_assemble_error(pixels, width):
    with pytest.raises(FormatError):
        Frame.assemble(pixels, width)


def test_frame_validation():
    with pytest.raises(ValueError):
        Frame(2, 2, b"\x00" * 12)


def test_topil(fixture):
    image = fixture.topil()
    assert image.mode == "RGBA"
    assert image.size == (2, 3)
    assert image.getpixel((0, 0)) == (1, 2, 3, 255)
    assert image.getpixel((1, 2)) == (0, 0, 0, 0)


def test_numpy(fixture):
    array = fixture.numpy()
    assert array.shape == (3, 2, 4)
    assert array.dtype == np.uint8
    assert array[0, 0].tolist() == [1, 2, 3, 255]
    assert get_alpha(fixture).tolist() == [[True, True], [True, False], [False, False]]


def test_make_sheet(fixture):
    other = Frame.assemble(b"\x07\x07\x07\xff" * 4, 4)
    sheet = make_sheet([fixture, other, fixture], columns=2)
    assert sheet.size == (8, 6)
    assert sheet.getpixel((4, 0)) == (7, 7, 7, 255)
    assert sheet.getpixel((0, 3)) == (1, 2, 3, 255)
    with pytest.raises(ValueError):
        make_sheet([])
