"""HTTP views for the cloud profile settings page."""

import logging
from http import HTTPStatus

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, JsonResponse
from django.urls import reverse
from django.views import View
from django.views.decorators.http import require_POST

from server.apps.cloud_profiles.constants import (
    UPLOAD_FILE_FIELD,
    UPLOAD_FILE_NAME_FIELD,
)
from server.apps.cloud_profiles.forms import ProfileSettingsForm
from server.apps.cloud_profiles.logic.profile_operations import (
    ProfileSettings,
    bind_profile_properties,
)
from server.apps.cloud_profiles.logic.upload_operations import (
    UploadFailure,
    UploadRequest,
    handle_upload,
)

logger = logging.getLogger(__name__)


class EditProfileView(View):
    """Settings page model and submission of profile properties."""

    def get(self, request: HttpRequest) -> JsonResponse:
        """Return the model the settings page is rendered from.

        Args:
            request: HTTP request.

        Returns:
            JSON with the refresh URL and plugin resources path.
        """
        return JsonResponse({
            'refreshablePath': reverse('cloud_profiles:settings'),
            'resPath': settings.PLUGIN_RESOURCES_PATH,
        })

    def post(self, request: HttpRequest) -> JsonResponse:
        """Bind and validate posted profile properties.

        Args:
            request: HTTP request with ``prop:*`` parameters.

        Returns:
            JSON with the validated settings, or field errors (400).
        """
        properties = bind_profile_properties(request.POST)
        form = ProfileSettingsForm(
            data=ProfileSettings.from_properties(properties).to_properties(),
        )
        if not form.is_valid():
            logger.info(
                'Rejected profile settings: %s',
                sorted(form.errors),
            )
            return JsonResponse(
                {'errors': {
                    field: list(field_errors)
                    for field, field_errors in form.errors.items()
                }},
                status=HTTPStatus.BAD_REQUEST,
            )

        return JsonResponse(form.to_settings().to_properties())


@require_POST
def upload_management_certificate(request: HttpRequest) -> JsonResponse:
    """Store a management certificate posted as a multipart form.

    The confirmation text is also queued in the messages framework so
    the next rendered page shows it.

    Args:
        request: Multipart request with ``fileName`` and the file part.

    Returns:
        JSON with ``overwritten`` and ``message``, or ``error`` (400).
    """
    result = handle_upload(UploadRequest(
        file_name=request.POST.get(UPLOAD_FILE_NAME_FIELD),
        file_content=request.FILES.get(UPLOAD_FILE_FIELD),
    ))

    if isinstance(result, UploadFailure):
        return JsonResponse(
            {'error': result.message},
            status=HTTPStatus.BAD_REQUEST,
        )

    messages.success(request, result.message)
    return JsonResponse({
        'overwritten': result.overwritten,
        'message': result.message,
    })
