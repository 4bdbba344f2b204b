"""
Chunk Transmitter.
Sends a single chunk with its ordering metadata and waits for the streamed reply.
"""
import logging
from order_client.repositories.order_api_repository import OrderApiRepository

logger = logging.getLogger(__name__)


class ChunkTransmitter:
    """Sends one chunk per call; callers decide ordering and abort policy."""

    def __init__(self, order_api_repository: OrderApiRepository):
        self.order_api_repository = order_api_repository

    async def send(
        self,
        chunk_bytes: bytes,
        file_identifier: str,
        chunk_index: int,
        total_chunks: int,
        is_last: bool
    ) -> str:
        """
        Upload one chunk and return the fully drained response text.

        Args:
            chunk_bytes: Chunk payload
            file_identifier: Identifier correlating all chunks of the upload
            chunk_index: Zero-based position of the chunk
            total_chunks: Number of chunks in the upload
            is_last: Whether this is the final chunk

        Returns:
            str: Decoded response body, opaque to the client

        Raises:
            NetworkException: On transport failure
            ServerException: When the service reports a failure
        """
        fields = {
            'fileName': file_identifier,
            'fileChunkIndex': str(chunk_index),
            'totalChunks': str(total_chunks),
            'isLastChunk': 'true' if is_last else 'false'
        }

        result = await self.order_api_repository.upload_chunk(chunk_bytes, fields)

        logger.info(
            "Chunk %d/%d of %s sent (%d bytes)",
            chunk_index + 1, total_chunks, file_identifier, len(chunk_bytes)
        )
        logger.debug("Final result data for chunk %d: %s", chunk_index, result)
        return result
