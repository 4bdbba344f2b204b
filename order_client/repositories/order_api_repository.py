"""
Order API Repository for the remote order-processing service.
Handles chunk uploads, status queries and order listing over HTTP.
"""
import logging
from typing import Optional
from urllib.parse import quote
import httpx
from order_client.core import config
from order_client.core.exceptions import NetworkException, ServerException
from order_client.models.dto.order_dto import OrderListResponse, ProcessingStatusResponse
from order_client.models.processing_status import ProcessingStatus
from order_client.utils.stream_utils import accumulate_text

logger = logging.getLogger(__name__)


class OrderApiRepository:
    """Repository for order service HTTP operations."""

    UPLOAD_PATH = "/orders/upload"
    STATUS_PATH = "/orders/processing/{file_identifier}"
    ORDERS_PATH = "/orders"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client or httpx.AsyncClient(
            base_url=config.settings.api_base_url,
            timeout=httpx.Timeout(config.settings.request_timeout_seconds)
        )

    async def upload_chunk(self, chunk_bytes: bytes, fields: dict) -> str:
        """
        POST one chunk as multipart form data and drain the streamed reply.

        Args:
            chunk_bytes: Raw chunk payload, sent as the ``fileChunk`` part
            fields: Remaining form fields, already stringified

        Returns:
            str: The whole response body decoded as text

        Raises:
            NetworkException: If the request or the body stream fails in transit
            ServerException: If the service answers with a non-2xx status
        """
        files = {'fileChunk': ('blob', chunk_bytes, 'application/octet-stream')}
        try:
            async with self.client.stream("POST", self.UPLOAD_PATH, data=fields, files=files) as response:
                if not response.is_success:
                    body = (await response.aread()).decode("utf-8", errors="replace")
                    raise ServerException(
                        f"Chunk upload rejected with status {response.status_code}: {body}",
                        status_code=response.status_code
                    )
                # Body is always UTF-8; the charset header is ignored
                return await accumulate_text(response.aiter_bytes())
        except httpx.RequestError as e:
            raise NetworkException(f"Failed to upload chunk: {str(e)}") from e

    async def get_processing_status(self, file_identifier: str) -> ProcessingStatus:
        """
        Retrieve the processing status of an uploaded file.

        Args:
            file_identifier: Identifier the chunks were uploaded under

        Returns:
            ProcessingStatus domain model

        Raises:
            NetworkException: If the service is unreachable
            ServerException: If the service fails or returns a malformed payload
        """
        path = self.STATUS_PATH.format(file_identifier=quote(file_identifier, safe=''))
        data = await self._get_json(path)
        try:
            dto = ProcessingStatusResponse.model_validate(data)
        except ValueError as e:
            raise ServerException(f"Malformed processing status payload: {str(e)}") from e
        return self._dto_to_processing_status(dto)

    async def get_orders(self, page: int, number_of_items_per_page: int) -> OrderListResponse:
        """
        Retrieve one page of the order listing.

        Raises:
            NetworkException: If the service is unreachable
            ServerException: If the service fails or returns a malformed payload
        """
        params = {'page': page, 'numberOfItemsPerPage': number_of_items_per_page}
        data = await self._get_json(self.ORDERS_PATH, params=params)
        try:
            return OrderListResponse.model_validate(data)
        except ValueError as e:
            raise ServerException(f"Malformed order listing payload: {str(e)}") from e

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get_json(self, path: str, params: Optional[dict] = None):
        try:
            response = await self.client.get(path, params=params)
        except httpx.RequestError as e:
            raise NetworkException(f"Failed to reach order service at {path}: {str(e)}") from e

        if not response.is_success:
            raise ServerException(
                f"Order service returned status {response.status_code} for {path}",
                status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise ServerException(f"Invalid JSON from {path}: {str(e)}") from e

    def _dto_to_processing_status(self, dto: ProcessingStatusResponse) -> ProcessingStatus:
        """Convert wire payload to ProcessingStatus domain model."""
        return ProcessingStatus(
            status=dto.status,
            total_orders=dto.total_orders,
            duplicate_orders_count=dto.duplicate_orders_count,
            validation_failed_orders_count=dto.validation_failed_orders_count,
            successfully_processed_count=dto.successfully_processed_count
        )
