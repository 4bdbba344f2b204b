"""
Domain model for a file picked by the user.
"""
import os
from typing import BinaryIO, Optional


class SelectedFile:
    """A named, seekable binary source of known size."""

    def __init__(self, name: str, source: BinaryIO, size: Optional[int] = None):
        self.name = name
        self.source = source
        self.size = size if size is not None else self._measure(source)

    @staticmethod
    def _measure(source: BinaryIO) -> int:
        position = source.tell()
        size = source.seek(0, os.SEEK_END)
        source.seek(position)
        return size

    def __repr__(self):
        return f"SelectedFile(name={self.name}, size={self.size})"
