"""
Data Transfer Objects for the order service.
Defines the JSON payloads returned by the status and listing endpoints.
"""
from pydantic import BaseModel, Field


class OrderResponse(BaseModel):
    """One order row as returned by the listing endpoint."""
    id: int
    customer_id: int
    product_id: int
    product_name: str
    quantity: int
    price: float
    order_date: str
    category: str


class OrderListResponse(BaseModel):
    """Response schema for a page of the order listing."""
    orders: list[OrderResponse] = Field(default_factory=list)
    page: int = Field(..., ge=1, description="Page actually served")
    total_number_of_pages: int = Field(..., ge=0, alias="totalNumberOfPages")

    class Config:
        populate_by_name = True


class ProcessingStatusResponse(BaseModel):
    """Response schema for the processing status of an uploaded file."""
    status: str
    total_orders: int = Field(default=0, alias="totalOrders")
    duplicate_orders_count: int = Field(default=0, alias="duplicateOrdersCount")
    validation_failed_orders_count: int = Field(default=0, alias="validationFailedOrdersCount")
    successfully_processed_count: int = Field(default=0, alias="successfullyProcessedCount")

    class Config:
        populate_by_name = True
