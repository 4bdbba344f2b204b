"""
Order Service.
Fetches pages of the processed order listing.
"""
import logging
from typing import Optional
from order_client.core import config
from order_client.core.exceptions import (
    FetchException,
    NetworkException,
    PageOutOfRangeException,
    ServerException
)
from order_client.models.order_page import OrderPage
from order_client.repositories.order_api_repository import OrderApiRepository

logger = logging.getLogger(__name__)


class OrderService:
    """Service for paginated order retrieval."""

    def __init__(self, order_api_repository: OrderApiRepository):
        self.order_api_repository = order_api_repository
        # Unknown until the first page has been fetched
        self.total_pages: Optional[int] = None

    def reset(self) -> None:
        """Forget the known page count, e.g. when a new upload replaces the data."""
        self.total_pages = None

    def check_page(self, page: int) -> None:
        """
        Reject pages outside [1, total_pages] without touching the network.

        Raises:
            PageOutOfRangeException: If the page cannot exist
        """
        if page < 1 or (self.total_pages is not None and page > self.total_pages):
            raise PageOutOfRangeException(page, self.total_pages)

    async def fetch_page(self, page: int, page_size: Optional[int] = None) -> OrderPage:
        """
        Retrieve one page of orders.

        Args:
            page: 1-based page number
            page_size: Orders per page (defaults to the configured items per page)

        Returns:
            OrderPage with the orders and the page position reported by the service

        Raises:
            PageOutOfRangeException: If the page is out of range; no request is made
            FetchException: If the listing cannot be retrieved
        """
        self.check_page(page)
        page_size = page_size or config.settings.items_per_page

        try:
            response = await self.order_api_repository.get_orders(page, page_size)
        except (NetworkException, ServerException) as e:
            raise FetchException(f"Failed to fetch orders page {page}: {e.message}") from e

        # An empty listing still has one (empty) page
        total_pages = max(response.total_number_of_pages, 1)
        self.total_pages = total_pages

        logger.debug("Fetched page %d of %d (%d orders)", response.page, total_pages, len(response.orders))
        return OrderPage(orders=response.orders, page=response.page, total_pages=total_pages)
