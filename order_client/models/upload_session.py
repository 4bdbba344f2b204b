"""
Upload Session domain model.
Represents one chunked upload of a selected file.
"""
from typing import Optional


class UploadSession:
    """Domain model for a single file upload."""

    def __init__(
        self,
        file_identifier: str,
        original_filename: str,
        file_size: int,
        total_chunks: int,
        chunks_sent: int = 0,
        error_message: Optional[str] = None
    ):
        self.file_identifier = file_identifier
        self.original_filename = original_filename
        self.file_size = file_size
        self.total_chunks = total_chunks
        self.chunks_sent = chunks_sent
        self.error_message = error_message

    @property
    def is_complete(self) -> bool:
        """True once every chunk has been sent without error."""
        return self.error_message is None and self.chunks_sent == self.total_chunks

    @property
    def failed(self) -> bool:
        return self.error_message is not None

    def __repr__(self):
        return (
            f"UploadSession(file_identifier={self.file_identifier}, "
            f"chunks_sent={self.chunks_sent}/{self.total_chunks})"
        )
