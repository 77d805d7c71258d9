"""
Low-level CEL and CL2 structures.

The frame index is read from the head of the blob; frames themselves are
decoded by :py:mod:`cel_tools.compression`.
"""

from cel_tools.cel.frame_index import FrameDescriptor, FrameIndex
from cel_tools.cel.palette import Palette

__all__ = ["FrameDescriptor", "FrameIndex", "Palette"]
