"""
Domain model for a file chunk.
Describes a byte range of the selected file, not its content.
"""


class Chunk:
    """A contiguous [start, end) slice of a file sent as one request."""

    def __init__(self, index: int, start: int, end: int, is_last: bool):
        self.index = index
        self.start = start
        self.end = end
        self.is_last = is_last

    @property
    def size(self) -> int:
        return self.end - self.start

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented
        return (self.index, self.start, self.end, self.is_last) == (
            other.index, other.start, other.end, other.is_last
        )

    def __repr__(self):
        return f"Chunk(index={self.index}, start={self.start}, end={self.end}, is_last={self.is_last})"
