"""
Domain model for a page of the order listing.
"""
from typing import List, Optional
from order_client.models.dto.order_dto import OrderResponse


class OrderPage:
    """One page of orders together with its position in the listing."""

    def __init__(self, orders: Optional[List[OrderResponse]] = None, page: int = 1, total_pages: int = 1):
        self.orders = orders or []
        self.page = page
        self.total_pages = total_pages

    def __repr__(self):
        return f"OrderPage(page={self.page}, total_pages={self.total_pages}, orders={len(self.orders)})"
