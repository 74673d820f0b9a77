"""Django app configuration for cloud profiles app."""

from django.apps import AppConfig


class CloudProfilesConfig(AppConfig):
    """Configuration for cloud profiles app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.cloud_profiles'
    verbose_name = 'Cloud Profiles'
