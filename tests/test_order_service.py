"""
Unit tests for OrderService.
"""
from unittest.mock import AsyncMock, Mock
import pytest
from order_client.core.exceptions import FetchException, NetworkException, PageOutOfRangeException, ServerException
from order_client.models.dto.order_dto import OrderListResponse
from order_client.services.order_service import OrderService


def listing(orders, page, page_size):
    total_pages = -(-len(orders) // page_size)
    start = (page - 1) * page_size
    return OrderListResponse(
        orders=orders[start:start + page_size],
        page=page,
        totalNumberOfPages=total_pages
    )


class TestOrderService:
    """Test suite for OrderService."""

    @pytest.fixture
    def mock_repository(self, orders_25):
        """Mock OrderApiRepository serving a 25-order dataset."""
        repo = Mock()
        repo.get_orders = AsyncMock(side_effect=lambda page, size: listing(orders_25, page, size))
        return repo

    @pytest.fixture
    def order_service(self, mock_repository):
        return OrderService(mock_repository)

    async def test_fetch_second_page(self, order_service, mock_repository):
        """Test page 2 of 25 orders with 10 per page."""
        order_page = await order_service.fetch_page(2, 10)

        assert len(order_page.orders) == 10
        assert order_page.page == 2
        assert order_page.total_pages == 3
        assert order_page.orders[0].id == 11
        mock_repository.get_orders.assert_awaited_once_with(2, 10)

    async def test_fetch_last_partial_page(self, order_service):
        """Test the last page holds the remainder."""
        order_page = await order_service.fetch_page(3, 10)

        assert [order.id for order in order_page.orders] == [21, 22, 23, 24, 25]

    async def test_default_page_size_from_settings(self, order_service, mock_repository):
        """Test the configured items per page is used by default."""
        await order_service.fetch_page(1)

        mock_repository.get_orders.assert_awaited_once_with(1, 10)

    async def test_page_zero_rejected_without_request(self, order_service, mock_repository):
        """Test page 0 never reaches the network."""
        with pytest.raises(PageOutOfRangeException) as exc_info:
            await order_service.fetch_page(0, 10)

        assert exc_info.value.page == 0
        mock_repository.get_orders.assert_not_called()

    async def test_page_beyond_total_rejected_without_request(self, order_service, mock_repository):
        """Test a page past the known total never reaches the network."""
        await order_service.fetch_page(1, 10)
        mock_repository.get_orders.reset_mock()

        with pytest.raises(PageOutOfRangeException) as exc_info:
            await order_service.fetch_page(4, 10)

        assert exc_info.value.total_pages == 3
        mock_repository.get_orders.assert_not_called()

    async def test_reset_forgets_total(self, order_service, mock_repository):
        """Test the upper bound is unknown again after reset."""
        await order_service.fetch_page(1, 10)
        order_service.reset()

        assert order_service.total_pages is None
        await order_service.fetch_page(3, 10)
        assert mock_repository.get_orders.await_count == 2

    async def test_empty_listing_has_one_page(self, mock_repository):
        """Test an empty dataset reports a single empty page."""
        mock_repository.get_orders = AsyncMock(return_value=OrderListResponse(orders=[], page=1, totalNumberOfPages=0))
        order_service = OrderService(mock_repository)

        order_page = await order_service.fetch_page(1, 10)

        assert order_page.orders == []
        assert order_page.total_pages == 1

    @pytest.mark.parametrize("error", [
        NetworkException("Connection refused"),
        ServerException("Internal error", status_code=500),
    ])
    async def test_fetch_failure_raises_fetch_exception(self, order_service, mock_repository, error):
        """Test repository failures surface as FetchException."""
        mock_repository.get_orders.side_effect = error

        with pytest.raises(FetchException) as exc_info:
            await order_service.fetch_page(1, 10)
        assert "Failed to fetch orders page 1" in str(exc_info.value)
