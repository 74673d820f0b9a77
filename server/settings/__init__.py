"""Django settings for the cloud profile settings service.

Settings are split into components and assembled with django-split-settings.
Values that differ between environments are read with python-decouple from
the environment or from ``config/.env``.
"""

from split_settings.tools import include

include(
    'components/common.py',
    'components/logging.py',
    'components/storages.py',
    'components/cloud_profiles.py',
)
