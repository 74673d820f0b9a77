"""Root URL configuration."""

from django.urls import include, path

urlpatterns = [
    path(
        'cloud-profiles/',
        include('server.apps.cloud_profiles.urls'),
    ),
]
