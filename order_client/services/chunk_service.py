"""
Chunking of selected files into bounded byte ranges.
"""
from typing import BinaryIO, Iterator
from order_client.core.exceptions import ValidationException
from order_client.models.chunk import Chunk


class ChunkPlan:
    """
    Ordered chunk descriptors covering [0, file_size).

    Iterating yields Chunk objects lazily; every iteration starts from
    chunk 0 again. An empty file has no chunks.
    """

    def __init__(self, file_size: int, chunk_size: int):
        if chunk_size <= 0:
            raise ValidationException(f"Chunk size must be positive, got: {chunk_size}")
        if file_size < 0:
            raise ValidationException(f"File size cannot be negative, got: {file_size}")
        self.file_size = file_size
        self.chunk_size = chunk_size

    @property
    def total_chunks(self) -> int:
        return -(-self.file_size // self.chunk_size)

    def __len__(self) -> int:
        return self.total_chunks

    def __iter__(self) -> Iterator[Chunk]:
        total = self.total_chunks
        for index in range(total):
            start = index * self.chunk_size
            end = min(start + self.chunk_size, self.file_size)
            yield Chunk(index=index, start=start, end=end, is_last=index == total - 1)


def read_chunk(source: BinaryIO, chunk: Chunk) -> bytes:
    """Read the bytes of ``chunk`` from a seekable binary source."""
    source.seek(chunk.start)
    return source.read(chunk.size)
