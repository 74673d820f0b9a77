"""Business logic for management certificate uploads."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO, final

from django.core.files.base import File as DjangoFile
from django.core.files.storage import storages

from server.apps.cloud_profiles.constants import PLUGIN_DATA_STORAGE_ALIAS
from server.apps.cloud_profiles.exceptions import (
    InvalidUploadStateError,
    MissingFileError,
    UploadError,
    UploadIOError,
)
from server.apps.cloud_profiles.infrastructure.validation import (
    validate_upload_name,
)

if TYPE_CHECKING:
    from server.apps.cloud_profiles.infrastructure.storage import (
        PluginDataStorage,
    )

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class UploadRequest:
    """File posted with the certificate upload form."""

    file_name: str | None
    file_content: BinaryIO | DjangoFile | None


@final
@dataclass(frozen=True, slots=True)
class UploadSuccess:
    """Upload stored; ``overwritten`` tells if it replaced a file."""

    file_name: str
    overwritten: bool

    @property
    def message(self) -> str:
        """Confirmation text shown on the next rendered page."""
        action = 'updated' if self.overwritten else 'uploaded'
        return f'Management certificate {self.file_name} was {action}'


@final
@dataclass(frozen=True, slots=True)
class UploadFailure:
    """Upload rejected or failed; ``message`` is shown to the user."""

    message: str


UploadResult = UploadSuccess | UploadFailure


def _get_storage() -> 'PluginDataStorage':
    """Get the storage backend for the plugin data directory.

    Returns:
        PluginDataStorage configured from settings.
    """
    return storages[PLUGIN_DATA_STORAGE_ALIAS]  # type: ignore[return-value]


def handle_upload(
    request: UploadRequest,
    storage: 'PluginDataStorage | None' = None,
) -> UploadResult:
    """Store an uploaded file in the plugin data directory.

    Every failure is converted into an ``UploadFailure``; nothing is
    retried, the user resubmits the form instead.

    Args:
        request: Destination name and content of the upload.
        storage: Storage to write to. Defaults to the configured
            plugin data storage.

    Returns:
        UploadSuccess with the overwrite flag, or UploadFailure.
    """
    try:
        return _store_upload(request, storage or _get_storage())
    except UploadError as exc:
        logger.warning(
            'Upload of %s failed: %s',
            request.file_name,
            exc,
        )
        return UploadFailure(message=str(exc))


def _store_upload(
    request: UploadRequest,
    storage: 'PluginDataStorage',
) -> UploadSuccess:
    """Validate the request and write its content.

    Args:
        request: Upload to store.
        storage: Target storage.

    Returns:
        UploadSuccess for the stored file.

    Raises:
        MissingFileError: If no payload was supplied.
        InvalidFileNameError: If the destination name is not usable.
        InvalidUploadStateError: If the payload stream is closed.
        UploadIOError: If the directory or file cannot be written.
    """
    if request.file_content is None:
        raise MissingFileError

    file_name = validate_upload_name(request.file_name)
    content = _open_content(request.file_content, file_name)

    overwritten = storage.exists(file_name)

    try:
        storage.replace(file_name, content)
    except OSError as exc:
        raise UploadIOError(file_name, exc) from exc
    except ValueError as exc:
        # Raised by file objects on reads after close
        raise InvalidUploadStateError(
            f'Upload stream of {file_name} is not readable: {exc}',
        ) from exc

    if overwritten:
        logger.info('File %s is overwritten', file_name)
    else:
        logger.info('File %s is uploaded', file_name)

    return UploadSuccess(file_name=file_name, overwritten=overwritten)


def _open_content(
    file_content: BinaryIO | DjangoFile,
    file_name: str,
) -> DjangoFile:
    """Wrap the payload as a Django file and check it is still readable.

    Args:
        file_content: Uploaded file or raw binary stream.
        file_name: Destination name, used for the wrapper.

    Returns:
        Django File ready to be chunked by storage.

    Raises:
        InvalidUploadStateError: If the stream was already closed.
    """
    if isinstance(file_content, DjangoFile):
        content = file_content
    else:
        content = DjangoFile(file_content, name=file_name)

    if content.closed:
        raise InvalidUploadStateError(
            f'Upload stream of {file_name} is closed',
        )
    return content
