"""Management command to upload a management certificate from disk."""

from pathlib import Path
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from server.apps.cloud_profiles.logic.upload_operations import (
    UploadFailure,
    UploadRequest,
    handle_upload,
)


class Command(BaseCommand):
    """Copy a local file into the plugin data directory."""

    help = 'Upload a management certificate into the plugin data directory'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            'path',
            type=Path,
            help='Local certificate file to upload',
        )
        parser.add_argument(
            '--name',
            default=None,
            help='Destination file name (default: name of the local file)',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the upload command.

        Args:
            args: Positional arguments (unused).
            options: Command options.

        Raises:
            CommandError: If the file cannot be read or stored.
        """
        source: Path = options['path']
        file_name = options['name'] or source.name

        try:
            source_file = source.open('rb')
        except OSError as exc:
            raise CommandError(f'Cannot read {source}: {exc}') from exc

        with source_file:
            result = handle_upload(UploadRequest(
                file_name=file_name,
                file_content=source_file,
            ))

        if isinstance(result, UploadFailure):
            raise CommandError(result.message)

        self.stdout.write(self.style.SUCCESS(result.message))
