"""URL routes for cloud profiles app."""

from django.urls import path

from server.apps.cloud_profiles import views

app_name = 'cloud_profiles'

urlpatterns = [
    path(
        'settings/',
        views.EditProfileView.as_view(),
        name='settings',
    ),
    path(
        'upload-management-certificate/',
        views.upload_management_certificate,
        name='upload_management_certificate',
    ),
]
