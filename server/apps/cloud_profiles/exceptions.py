"""Exceptions for cloud profiles app."""


class UploadError(Exception):
    """Base class for failures of a management certificate upload."""


class MissingFileError(UploadError):
    """Raised when the upload request carries no file payload."""

    def __init__(self) -> None:
        """Initialize MissingFileError."""
        super().__init__('No file set')


class InvalidFileNameError(UploadError):
    """Raised when the destination file name is empty or path-like."""


class InvalidUploadStateError(UploadError):
    """Raised when the upload stream can no longer be read."""


class UploadIOError(UploadError):
    """Raised when the destination cannot be created or written."""

    def __init__(self, file_name: str, error: OSError) -> None:
        """Initialize UploadIOError.

        Args:
            file_name: Destination file name.
            error: Underlying operating system error.
        """
        self.file_name = file_name
        self.error = error
        super().__init__(f'Failed to write {file_name}: {error}')
