"""
Dependency container for the client.
Provides singleton-like behavior for services and repositories.
"""
from functools import lru_cache
import httpx
from order_client.core import config
from order_client.repositories.order_api_repository import OrderApiRepository
from order_client.services.controller import OrderController
from order_client.services.file_service import FileService
from order_client.services.order_service import OrderService
from order_client.services.status_poller import StatusPoller
from order_client.services.transmitter_service import ChunkTransmitter
from order_client.services.upload_service import UploadService


@lru_cache()
def get_http_client() -> httpx.AsyncClient:
    """Get the shared AsyncClient; no timeout unless one is configured."""
    return httpx.AsyncClient(
        base_url=config.settings.api_base_url,
        timeout=httpx.Timeout(config.settings.request_timeout_seconds)
    )


@lru_cache()
def get_order_api_repository() -> OrderApiRepository:
    """Get OrderApiRepository singleton instance."""
    return OrderApiRepository(client=get_http_client())


@lru_cache()
def get_file_service() -> FileService:
    """Get FileService singleton instance."""
    return FileService()


@lru_cache()
def get_upload_service() -> UploadService:
    """Get UploadService singleton instance with injected dependencies."""
    return UploadService(
        transmitter=ChunkTransmitter(get_order_api_repository()),
        file_service=get_file_service(),
        chunk_size=config.settings.chunk_size_bytes
    )


@lru_cache()
def get_order_service() -> OrderService:
    """Get OrderService singleton instance."""
    return OrderService(get_order_api_repository())


@lru_cache()
def get_status_poller() -> StatusPoller:
    """Get StatusPoller singleton instance."""
    return StatusPoller(
        get_order_api_repository(),
        interval_seconds=config.settings.poll_interval_seconds
    )


@lru_cache()
def get_controller() -> OrderController:
    """Get OrderController singleton instance with injected dependencies."""
    return OrderController(
        upload_service=get_upload_service(),
        order_service=get_order_service(),
        status_poller=get_status_poller(),
        order_api_repository=get_order_api_repository()
    )
