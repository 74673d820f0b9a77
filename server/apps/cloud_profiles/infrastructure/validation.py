"""Validation of names supplied by upload forms."""

from pathlib import PurePosixPath, PureWindowsPath

from server.apps.cloud_profiles.exceptions import InvalidFileNameError

_RESERVED_NAMES = frozenset(('.', '..'))


def validate_upload_name(file_name: str | None) -> str:
    """Validate destination file name of an upload.

    The name is joined with the plugin data directory, so it must be a
    single path component: no separators of either platform, no drive
    and no relative markers. The name is used as given; surrounding
    whitespace is rejected rather than stripped.

    Args:
        file_name: Name posted with the upload form.

    Returns:
        The validated name, unchanged.

    Raises:
        InvalidFileNameError: If the name is missing or not a plain name.
    """
    if file_name is None or not file_name.strip():
        raise InvalidFileNameError('No file name set')

    name = file_name
    if name != name.strip():
        raise InvalidFileNameError(
            f'File name must not start or end with whitespace: {name!r}',
        )

    if name in _RESERVED_NAMES or '\x00' in name:
        raise InvalidFileNameError(f'Invalid file name: {name}')

    if (
        PurePosixPath(name).name != name
        or PureWindowsPath(name).name != name
    ):
        raise InvalidFileNameError(
            f'File name must not contain a path: {name}',
        )

    return name
