"""
File Service for selected-file checks.
Enforces the client-side constraints applied before any upload starts.
"""
from order_client.core import config
from order_client.core.exceptions import ValidationException
from order_client.models.selected_file import SelectedFile


class FileService:
    """Service for file validation operations."""

    def validate_selected_file(self, selected_file: SelectedFile) -> None:
        """
        Validate the extension and size of a selected file.

        Args:
            selected_file: File picked by the user

        Raises:
            ValidationException: If the file cannot be uploaded
        """
        extension = config.settings.accepted_file_extension
        if not selected_file.name.endswith(extension):
            raise ValidationException(f"Only {extension} files are supported")

        max_size_bytes = config.settings.max_file_size_bytes
        if selected_file.size > max_size_bytes:
            raise ValidationException(
                f"File size ({selected_file.size / (1024 * 1024):.2f}MB) exceeds "
                f"the {config.settings.max_file_size_mb}MB limit"
            )
