"""
Helpers for consuming streamed HTTP response bodies.
"""
import codecs
import logging
from typing import AsyncIterable

logger = logging.getLogger(__name__)


async def accumulate_text(byte_stream: AsyncIterable[bytes], encoding: str = "utf-8") -> str:
    """
    Decode a byte stream incrementally and return the full text.

    Reads until the stream is exhausted. A multi-byte character split across
    two reads is carried over by the decoder rather than mangled; undecodable
    bytes are replaced.

    Args:
        byte_stream: Async iterable of raw body chunks (e.g. ``response.aiter_bytes()``)
        encoding: Text encoding of the body

    Returns:
        The accumulated decoded text
    """
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    parts = []
    reads = 0

    async for raw in byte_stream:
        reads += 1
        if raw:
            parts.append(decoder.decode(raw))

    # Flush any dangling partial character
    parts.append(decoder.decode(b"", final=True))

    logger.debug("Stream drained after %d reads", reads)
    return "".join(parts)
