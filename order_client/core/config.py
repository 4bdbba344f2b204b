"""
Core configuration for the Order Upload Client.
Manages environment variables, upload limits and polling settings.
"""
import logging
import os
from typing import Optional
from pydantic_settings import BaseSettings


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )

    # Request lines from the HTTP stack are noise at INFO
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # API Configuration
    api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:8080")
    request_timeout_seconds: Optional[float] = None

    # File Upload Limits
    chunk_size_bytes: int = int(os.getenv("CHUNK_SIZE_BYTES", str(1024 * 1024)))
    max_file_size_mb: int = int(os.getenv("MAX_FILE_SIZE_MB", "10"))
    accepted_file_extension: str = os.getenv("ACCEPTED_FILE_EXTENSION", ".csv")

    # Pagination Configuration
    items_per_page: int = int(os.getenv("ITEMS_PER_PAGE", "10"))

    # Status Polling
    poll_interval_ms: int = int(os.getenv("POLL_INTERVAL_MS", "500"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def max_file_size_bytes(self) -> int:
        """Maximum accepted file size in bytes."""
        return self.max_file_size_mb * 1024 * 1024

    @property
    def poll_interval_seconds(self) -> float:
        """Polling interval converted for asyncio.sleep."""
        return self.poll_interval_ms / 1000

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
