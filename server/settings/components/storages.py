"""Django storage configuration.

Uploaded management certificates go to the host's plugin data directory,
registered under its own alias so they never mix with default media.
"""

from typing import Any, Final

from server.settings.components import BASE_DIR, config

STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
    'plugin_data': {
        'BACKEND': (
            'server.apps.cloud_profiles.infrastructure.storage.PluginDataStorage'
        ),
        'OPTIONS': {
            'location': config(
                'PLUGIN_DATA_DIR',
                default=str(BASE_DIR.joinpath('plugin_data')),
            ),
        },
    },
}
