"""
Status Poller.
Periodically queries the processing status of the active upload until it completes.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional
from order_client.core import config
from order_client.core.exceptions import NetworkException, PollException, ServerException
from order_client.models.processing_status import OrderProcessingStatus, ProcessingStatus
from order_client.repositories.order_api_repository import OrderApiRepository

logger = logging.getLogger(__name__)

StatusListener = Callable[[ProcessingStatus], Awaitable[None]]


class StatusPoller:
    """
    Cancellable periodic status check bound to one file identifier.

    ``start`` replaces any running poll task; the task ends by itself once a
    COMPLETED status is observed. Responses for an identifier that is no
    longer active are discarded.
    """

    def __init__(
        self,
        order_api_repository: OrderApiRepository,
        interval_seconds: Optional[float] = None,
        on_status: Optional[StatusListener] = None
    ):
        self.order_api_repository = order_api_repository
        self.interval_seconds = interval_seconds if interval_seconds is not None else config.settings.poll_interval_seconds
        self.on_status = on_status
        self.file_identifier: Optional[str] = None
        self.status: Optional[ProcessingStatus] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, file_identifier: str) -> None:
        """Begin polling for ``file_identifier``, dropping the previous session's state."""
        self.stop()
        self.file_identifier = file_identifier
        self.status = None
        self._task = asyncio.create_task(self._run(file_identifier), name=f"status-poller:{file_identifier}")
        logger.debug("Polling started for %s every %.3fs", file_identifier, self.interval_seconds)

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.file_identifier = None

    async def aclose(self) -> None:
        """Stop polling and wait for the task to unwind."""
        task = self._task
        self.stop()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                pass

    async def wait(self) -> None:
        """Block until the current poll task ends (completion or cancellation)."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _run(self, file_identifier: str) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            if await self.poll_once(file_identifier):
                break
        logger.debug("Polling finished for %s", file_identifier)

    async def poll_once(self, file_identifier: str) -> bool:
        """
        Issue one status query and apply the result.

        Args:
            file_identifier: Identifier the query is made for

        Returns:
            bool: True when polling for this identifier should end
        """
        try:
            status = await self._query(file_identifier)
        except PollException as e:
            logger.warning("Error checking file status: %s", e.message)
            return False

        if file_identifier != self.file_identifier:
            logger.debug("Discarding status for inactive upload %s", file_identifier)
            return True

        self.status = status
        if status.status == OrderProcessingStatus.FAILED.value:
            logger.warning("Upload %s reported FAILED; polling continues until COMPLETED", file_identifier)
        if self.on_status is not None:
            await self.on_status(status)
        return status.is_completed

    async def _query(self, file_identifier: str) -> ProcessingStatus:
        try:
            return await self.order_api_repository.get_processing_status(file_identifier)
        except (NetworkException, ServerException) as e:
            raise PollException(f"Status query for {file_identifier} failed: {e.message}") from e
