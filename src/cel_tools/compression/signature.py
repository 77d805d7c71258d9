"""
Zero-byte signatures used to recognize diagonal frames.
"""

from cel_tools.constants import Signature


def has_signature(data: bytes, signature: Signature) -> bool:
    """
    Whether ``data`` holds two zero bytes at every offset of ``signature``.

    Frames shorter than ``signature.min_length`` never match, and neither do
    offsets whose bytes fall outside the frame.
    """
    if len(data) < signature.min_length:
        return False
    for offset in signature.offsets:
        if offset + 2 > len(data):
            return False
        if data[offset] != 0 or data[offset + 1] != 0:
            return False
    return True
