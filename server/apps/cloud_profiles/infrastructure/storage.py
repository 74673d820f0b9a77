"""Storage backend for the host's plugin data directory."""

import logging
import posixpath
import uuid
from pathlib import Path
from typing import Any, final, override

from django.core.files.storage import FileSystemStorage

logger = logging.getLogger(__name__)

_PARTIAL_SUFFIX = '.part'


@final
class PluginDataStorage(FileSystemStorage):
    """Local storage for files uploaded into the plugin data directory.

    Extends FileSystemStorage with:
    - In-place replacement of existing files (``replace``)
    - Cleanup of partial uploads after a failed write
    - Enhanced error logging

    The directory itself is created lazily on the first write.
    """

    @override
    def save(
        self,
        name: str | None,
        content: Any,
        max_length: int | None = None,
    ) -> str:
        """Save file with error handling and logging.

        Args:
            name: Path for the file, relative to the storage location.
            content: File content (file-like object).
            max_length: Optional maximum length for the filename.

        Returns:
            Actual path used (may differ from name if conflicts).

        Raises:
            OSError: If the directory or file cannot be written.
        """
        try:
            logger.debug('Writing file to plugin data directory: %s', name)
            saved_name = super().save(name, content, max_length)
        except Exception:
            logger.exception(
                'Failed to write file to plugin data directory: %s',
                name,
            )
            raise
        else:
            return saved_name

    def replace(self, name: str, content: Any) -> str:
        """Write content under ``name``, replacing any existing file.

        Content goes to a uniquely named partial file in the same directory
        first, which is then renamed over the destination. The partial name
        has a fixed length, so any name the filesystem accepts can be
        stored. Readers see either the old or the new file under ``name``,
        never a half-written one.

        Note: The existence check done by callers before this call is not
        atomic with the rename. Concurrent writers of the same name race and
        the last rename wins.

        Args:
            name: Destination path relative to the storage location.
            content: File content (file-like object).

        Returns:
            The destination name.

        Raises:
            OSError: If the directory, partial file or rename fails.
        """
        partial_name = posixpath.join(
            posixpath.dirname(name),
            f'.{uuid.uuid4().hex}{_PARTIAL_SUFFIX}',
        )
        saved_partial: str | None = None

        try:
            saved_partial = self.save(partial_name, content)
            Path(self.path(saved_partial)).replace(self.path(name))
        except Exception:
            self.discard_partial(saved_partial or partial_name)
            raise

        logger.info('Stored file in plugin data directory: %s', name)
        return name

    def discard_partial(self, name: str) -> None:
        """Delete a partial upload left behind by a failed write.

        This is a best-effort operation - if deletion fails, the error
        is logged but not raised, as the write has already failed.

        Args:
            name: Path of the partial file.
        """
        try:
            if self.exists(name):
                logger.warning('Discarding partial upload: %s', name)
                self.delete(name)
        except OSError:
            # Leftover *.part files never shadow a real destination name
            logger.exception('Failed to discard partial upload: %s', name)
