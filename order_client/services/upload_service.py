"""
Upload Service.
Orchestrates validation, chunking and sequential transmission of a selected file.
"""
import logging
import uuid
from typing import Awaitable, Callable, Optional
from order_client.core import config
from order_client.core.exceptions import NetworkException, ServerException, TransmissionException
from order_client.models.selected_file import SelectedFile
from order_client.models.upload_session import UploadSession
from order_client.services.chunk_service import ChunkPlan, read_chunk
from order_client.services.file_service import FileService
from order_client.services.transmitter_service import ChunkTransmitter

logger = logging.getLogger(__name__)

SessionListener = Callable[[UploadSession], Awaitable[None]]


class UploadService:
    """Service driving one chunked upload from start to finish."""

    def __init__(
        self,
        transmitter: ChunkTransmitter,
        file_service: Optional[FileService] = None,
        chunk_size: Optional[int] = None
    ):
        self.transmitter = transmitter
        self.file_service = file_service or FileService()
        self.chunk_size = chunk_size

    async def upload(
        self,
        selected_file: SelectedFile,
        on_session_started: Optional[SessionListener] = None
    ) -> UploadSession:
        """
        Handle the chunked upload workflow.

        The session listener is awaited after validation and before the first
        chunk goes out, so whoever tracks the upload sees the new identifier
        before the server does.

        Args:
            selected_file: File picked by the user
            on_session_started: Called once with the new session

        Returns:
            UploadSession describing how far the upload got

        Raises:
            ValidationException: If the file is rejected; nothing is sent
        """
        # Validate before touching any state
        self.file_service.validate_selected_file(selected_file)

        plan = ChunkPlan(selected_file.size, self.chunk_size or config.settings.chunk_size_bytes)

        session = UploadSession(
            file_identifier=f"{uuid.uuid4()}_{selected_file.name}",
            original_filename=selected_file.name,
            file_size=selected_file.size,
            total_chunks=plan.total_chunks
        )

        if plan.total_chunks == 0:
            logger.warning("File %s is empty, nothing to upload", selected_file.name)
            return session

        if on_session_started is not None:
            await on_session_started(session)

        try:
            await self._send_chunks(session, plan, selected_file)
        except TransmissionException as e:
            logger.error("Upload of %s aborted: %s", session.file_identifier, e.message)
            session.error_message = e.message
            return session

        logger.info("Upload of %s finished (%d chunks)", session.file_identifier, session.chunks_sent)
        return session

    async def _send_chunks(self, session: UploadSession, plan: ChunkPlan, selected_file: SelectedFile) -> None:
        """
        Send chunks one at a time in index order.

        Raises:
            TransmissionException: On the first failed chunk; later chunks are not sent
        """
        for chunk in plan:
            chunk_bytes = read_chunk(selected_file.source, chunk)
            try:
                await self.transmitter.send(
                    chunk_bytes,
                    session.file_identifier,
                    chunk.index,
                    session.total_chunks,
                    chunk.is_last
                )
            except (NetworkException, ServerException) as e:
                raise TransmissionException(
                    f"Failed to upload chunk {chunk.index}: {e.message}",
                    chunk_index=chunk.index
                ) from e
            session.chunks_sent += 1
