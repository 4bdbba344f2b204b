"""
Custom exceptions for the Order Upload Client.
Provides specific error types for different failure scenarios.
"""
from typing import Optional


class OrderClientException(Exception):
    """Base exception for all client errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(OrderClientException):
    """Raised when a selected file or request fails client-side validation."""
    pass


class PageOutOfRangeException(ValidationException):
    """Raised when a page outside [1, total_pages] is requested."""
    def __init__(self, page: int, total_pages: Optional[int]):
        self.page = page
        self.total_pages = total_pages
        bound = total_pages if total_pages is not None else "unknown"
        super().__init__(f"Page {page} is out of range (total pages: {bound})")


class NetworkException(OrderClientException):
    """Raised when the order service cannot be reached."""
    pass


class ServerException(OrderClientException):
    """Raised when the order service answers with a failure or malformed payload."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TransmissionException(OrderClientException):
    """Raised when a chunk upload fails and the upload is aborted."""
    def __init__(self, message: str, chunk_index: int):
        self.chunk_index = chunk_index
        super().__init__(message)


class PollException(OrderClientException):
    """Raised when a processing status query fails."""
    pass


class FetchException(OrderClientException):
    """Raised when the order listing cannot be fetched."""
    pass
