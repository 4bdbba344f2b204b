"""
Processing Status domain model.
Represents the server-side processing state of an uploaded file.
"""
from enum import Enum


class OrderProcessingStatus(str, Enum):
    """Status values reported by the order service."""
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class ProcessingStatus:
    """Snapshot of one status poll; replaced wholesale on every response."""

    def __init__(
        self,
        status: str,
        total_orders: int = 0,
        duplicate_orders_count: int = 0,
        validation_failed_orders_count: int = 0,
        successfully_processed_count: int = 0
    ):
        self.status = status
        self.total_orders = total_orders
        self.duplicate_orders_count = duplicate_orders_count
        self.validation_failed_orders_count = validation_failed_orders_count
        self.successfully_processed_count = successfully_processed_count

    @property
    def is_completed(self) -> bool:
        """COMPLETED is the only terminal status."""
        return self.status == OrderProcessingStatus.COMPLETED.value

    def __repr__(self):
        return f"ProcessingStatus(status={self.status}, total_orders={self.total_orders})"
