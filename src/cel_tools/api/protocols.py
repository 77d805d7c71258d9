"""
Protocol definitions for the collaborators that supply CEL data.
"""

from typing import BinaryIO, Protocol


class ArchiveProtocol(Protocol):
    """
    Protocol defining the game archive interface.

    Any object whose ``open`` returns a readable binary stream for a path
    inside the archive can feed :py:meth:`~cel_tools.CelImage.load`, e.g. an
    MPQ reader or a directory of extracted files.
    """

    def open(self, path: str) -> BinaryIO:
        """Open the file stored at ``path`` for reading."""
        ...
