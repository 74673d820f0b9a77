"""Shared fixtures for cloud profiles app tests."""

import pytest
from django.core.files.base import ContentFile

from server.apps.cloud_profiles.constants import PLUGIN_DATA_STORAGE_ALIAS
from server.apps.cloud_profiles.infrastructure.storage import (
    PluginDataStorage,
)


@pytest.fixture
def plugin_data_dir(settings, tmp_path):
    """Point plugin data storage at a fresh, not yet created directory.

    Returns:
        Path of the plugin data directory.
    """
    data_dir = tmp_path / 'pluginData'
    settings.STORAGES = {
        **settings.STORAGES,
        PLUGIN_DATA_STORAGE_ALIAS: {
            'BACKEND': (
                'server.apps.cloud_profiles.infrastructure.storage.'
                'PluginDataStorage'
            ),
            'OPTIONS': {'location': str(data_dir)},
        },
    }
    return data_dir


@pytest.fixture
def storage(plugin_data_dir):
    """Storage rooted at the plugin data directory.

    Returns:
        PluginDataStorage instance.
    """
    return PluginDataStorage(location=str(plugin_data_dir))


@pytest.fixture
def certificate_content():
    """Sample management certificate content.

    Returns:
        ContentFile with PEM-like data.
    """
    return ContentFile(
        b'-----BEGIN CERTIFICATE-----\nMIIC\n-----END CERTIFICATE-----\n',
        name='management.pem',
    )
