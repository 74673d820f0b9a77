"""Tests for management certificate upload view."""

from http import HTTPStatus

import pytest
from django.contrib.messages import get_messages
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse

_UPLOAD_URL = reverse('cloud_profiles:upload_management_certificate')


def _post_upload(client, file_name, payload=None):
    data = {'fileName': file_name}
    if payload is not None:
        data['file:fileToUpload'] = SimpleUploadedFile(
            'local.pem',
            payload,
            content_type='application/x-pem-file',
        )
    return client.post(_UPLOAD_URL, data)


def test_upload_view_success(client, plugin_data_dir):
    """Test upload stores file and queues confirmation message."""
    response = _post_upload(client, 'cert.pem', b'certificate')

    assert response.status_code == HTTPStatus.OK
    assert response.json() == {
        'overwritten': False,
        'message': 'Management certificate cert.pem was uploaded',
    }
    assert (plugin_data_dir / 'cert.pem').read_bytes() == b'certificate'

    queued = [str(message) for message in get_messages(response.wsgi_request)]
    assert queued == ['Management certificate cert.pem was uploaded']


def test_upload_view_overwrite(client, plugin_data_dir):
    """Test second upload reports overwrite."""
    _post_upload(client, 'cert.pem', b'first')

    response = _post_upload(client, 'cert.pem', b'second')

    assert response.json() == {
        'overwritten': True,
        'message': 'Management certificate cert.pem was updated',
    }
    assert (plugin_data_dir / 'cert.pem').read_bytes() == b'second'


def test_upload_view_without_file(client, plugin_data_dir):
    """Test missing file part returns error model."""
    response = _post_upload(client, 'cert.pem')

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {'error': 'No file set'}
    assert not plugin_data_dir.exists()
    assert not list(get_messages(response.wsgi_request))


def test_upload_view_invalid_name(client, plugin_data_dir):
    """Test path-like file names are rejected."""
    response = _post_upload(client, 'nested/cert.pem', b'certificate')

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert 'must not contain a path' in response.json()['error']


def test_upload_view_io_failure(client, plugin_data_dir):
    """Test directory collision is reported as error."""
    plugin_data_dir.write_bytes(b'not a directory')

    response = _post_upload(client, 'cert.pem', b'certificate')

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()['error'].startswith('Failed to write cert.pem')


@pytest.mark.parametrize('method', ['get', 'put'])
def test_upload_view_requires_post(client, method):
    """Test only POST is accepted."""
    response = getattr(client, method)(_UPLOAD_URL)

    assert response.status_code == HTTPStatus.METHOD_NOT_ALLOWED
