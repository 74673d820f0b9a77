"""Tests for profile settings form."""

from server.apps.cloud_profiles.forms import ProfileSettingsForm
from server.apps.cloud_profiles.logic.profile_operations import (
    ProfileSettings,
)

_SUBSCRIPTION_ID = '6B1E6A4C-0B8F-4B51-9A5C-2D3E4F5A6B7C'


def test_form_valid_normalises_subscription_id():
    """Test GUID is normalised to lower case."""
    form = ProfileSettingsForm(data={
        'subscriptionId': f' {_SUBSCRIPTION_ID} ',
        'managementCertificate': 'cert.pem',
    })

    assert form.is_valid()
    assert form.to_settings() == ProfileSettings(
        subscription_id=_SUBSCRIPTION_ID.lower(),
        management_certificate='cert.pem',
    )


def test_form_rejects_non_guid():
    """Test subscription ID must be a GUID."""
    form = ProfileSettingsForm(data={
        'subscriptionId': 'not-a-guid',
        'managementCertificate': 'cert.pem',
    })

    assert not form.is_valid()
    assert form.errors['subscriptionId'] == ['Subscription ID must be a GUID']


def test_form_requires_fields():
    """Test both properties are required."""
    form = ProfileSettingsForm(data={
        'subscriptionId': '',
        'managementCertificate': '',
    })

    assert not form.is_valid()
    assert set(form.errors) == {'subscriptionId', 'managementCertificate'}
