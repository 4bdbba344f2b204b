"""
Order Controller.
Wires file selection, status polling and order pagination around one client state.
"""
import logging
from typing import Optional
from order_client.core import config
from order_client.core.exceptions import FetchException, PageOutOfRangeException, ValidationException
from order_client.models.order_page import OrderPage
from order_client.models.processing_status import ProcessingStatus
from order_client.models.selected_file import SelectedFile
from order_client.models.upload_session import UploadSession
from order_client.repositories.order_api_repository import OrderApiRepository
from order_client.services.order_service import OrderService
from order_client.services.status_poller import StatusPoller
from order_client.services.upload_service import UploadService

logger = logging.getLogger(__name__)


class ClientState:
    """State shown to the user. Each field has one writer in OrderController."""

    def __init__(self):
        self.session: Optional[UploadSession] = None
        self.processing_status: Optional[ProcessingStatus] = None
        self.order_page: OrderPage = OrderPage()
        self.current_page: int = 1
        self.notice: Optional[str] = None

    @property
    def previous_disabled(self) -> bool:
        return self.current_page == 1

    @property
    def next_disabled(self) -> bool:
        return self.current_page == self.order_page.total_pages


class OrderController:
    """
    Glue between the upload pipeline and the order listing.

    Orders are (re)fetched whenever the current page changes or the processing
    status becomes COMPLETED, and only while the status is absent or COMPLETED.
    """

    def __init__(
        self,
        upload_service: UploadService,
        order_service: OrderService,
        status_poller: StatusPoller,
        order_api_repository: Optional[OrderApiRepository] = None
    ):
        self.upload_service = upload_service
        self.order_service = order_service
        self.status_poller = status_poller
        self.order_api_repository = order_api_repository
        self.status_poller.on_status = self._on_status
        self.state = ClientState()

    async def start(self) -> None:
        """Initial load of the order listing."""
        await self._refresh_orders()

    async def select_file(self, selected_file: SelectedFile) -> Optional[UploadSession]:
        """
        Upload a newly selected file, replacing any previous session.

        Returns:
            The upload session, or None if the file was rejected
        """
        self.state.notice = None
        try:
            session = await self.upload_service.upload(selected_file, on_session_started=self._on_session_started)
        except ValidationException as e:
            logger.warning("Rejected %s: %s", selected_file.name, e.message)
            self.state.notice = e.message
            return None

        if session.failed:
            self.state.notice = f"Upload failed: {session.error_message}"
        return session

    async def go_to_page(self, page: int) -> bool:
        """
        Move to ``page`` if it exists.

        Returns:
            bool: False when the page is out of range and nothing happened
        """
        if page < 1 or page > self.state.order_page.total_pages:
            logger.info("Ignoring page change to %d (total pages: %d)", page, self.state.order_page.total_pages)
            return False
        if page == self.state.current_page:
            return True

        self.state.current_page = page
        await self._refresh_orders()
        return True

    async def next_page(self) -> bool:
        return await self.go_to_page(self.state.current_page + 1)

    async def previous_page(self) -> bool:
        return await self.go_to_page(self.state.current_page - 1)

    async def wait_for_processing(self) -> None:
        """Wait until the active session's polling has ended."""
        await self.status_poller.wait()

    async def aclose(self) -> None:
        await self.status_poller.aclose()
        if self.order_api_repository is not None:
            await self.order_api_repository.aclose()

    async def _on_session_started(self, session: UploadSession) -> None:
        # Old status must be gone before the new poll task can tick
        self.state.session = session
        self.state.processing_status = None
        self.state.current_page = 1
        self.order_service.reset()
        self.status_poller.stop()
        await self._refresh_orders()
        self.status_poller.start(session.file_identifier)

    async def _on_status(self, status: ProcessingStatus) -> None:
        previous = self.state.processing_status
        self.state.processing_status = status

        became_completed = status.is_completed and not (previous is not None and previous.is_completed)
        if became_completed:
            logger.info(
                "Processing completed: %d orders, %d duplicates, %d failed validation, %d processed",
                status.total_orders,
                status.duplicate_orders_count,
                status.validation_failed_orders_count,
                status.successfully_processed_count
            )
            await self._refresh_orders()

    async def _refresh_orders(self) -> None:
        status = self.state.processing_status
        if status is not None and not status.is_completed:
            return

        try:
            order_page = await self.order_service.fetch_page(self.state.current_page, config.settings.items_per_page)
        except PageOutOfRangeException as e:
            logger.info(e.message)
            return
        except FetchException as e:
            # Keep showing the previous page
            logger.error("Error fetching orders: %s", e.message)
            return

        self.state.order_page = order_page
        self.state.current_page = order_page.page
