import pytest

from cel_tools.compression import classify, has_signature
from cel_tools.constants import (
    ASCENDING_SIGNATURE,
    DESCENDING_SIGNATURE,
    Encoding,
    Signature,
)


@pytest.mark.parametrize(
    "data, headered, expected",
    [
        (b"\x00" * 1024, True, Encoding.HEADERED),
        (b"\x01" * 20, True, Encoding.HEADERED),
        (b"\x00" * 1024, False, Encoding.RAW_INDEXED),
        (b"\x01" * 1024, False, Encoding.RAW_INDEXED),
        (b"\x02\x01\x02\xfe", False, Encoding.FLAT),
        (b"", False, Encoding.FLAT),
        (b"\x01" * 600, False, Encoding.FLAT),
    ],
)
def test_classify(data, headered, expected):
    assert classify(data, headered) == expected


@pytest.mark.parametrize("lower", [True, False])
def test_classify_diagonal(diagonal_builder, lower):
    tail = b"" if lower else b"\x09" * 512
    ascending = diagonal_builder(True, lower=lower, tail=tail)
    descending = diagonal_builder(False, lower=lower, tail=tail)
    assert classify(ascending) == Encoding.DIAGONAL_ASCENDING
    assert classify(descending) == Encoding.DIAGONAL_DESCENDING
    assert classify(ascending, headered=True) == Encoding.HEADERED


def test_descending_checked_first():
    data = b"\x00" * 600
    assert has_signature(data, ASCENDING_SIGNATURE)
    assert has_signature(data, DESCENDING_SIGNATURE)
    assert classify(data) == Encoding.DIAGONAL_DESCENDING


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00" * 8, True),
        (b"\x00" * 7, False),
        (b"\x00\x00\x00\x00\x00\x01\x00\x00", False),
        (b"\x00\x00\x00\x00\x01\x00\x00\x00", False),
        (b"\x00\x00\x01\x01\x00\x00\x00\x00", True),
    ],
)
def test_has_signature(data, expected):
    assert has_signature(data, Signature(8, (0, 4, 6))) is expected


def test_signature_outside_frame():
    assert not has_signature(b"\x00" * 10, Signature(4, (2, 9)))


def test_signature_min_length():
    data = b"\x00" * (DESCENDING_SIGNATURE.min_length - 1)
    assert not has_signature(data, DESCENDING_SIGNATURE)
    assert classify(data) == Encoding.FLAT
