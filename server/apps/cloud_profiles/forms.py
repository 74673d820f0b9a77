"""Forms for cloud profile settings."""

import uuid
from typing import Any, override

from django import forms

from server.apps.cloud_profiles.constants import (
    MANAGEMENT_CERTIFICATE,
    SUBSCRIPTION_ID,
)
from server.apps.cloud_profiles.logic.profile_operations import (
    ProfileSettings,
)


class ProfileSettingsForm(forms.Form):
    """Validates bound profile properties.

    Field names match the property keys of the settings page, so the
    form can be built straight from ``ProfileSettings.to_properties()``.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Declare fields under their camelCase property keys."""
        super().__init__(*args, **kwargs)
        self.fields[SUBSCRIPTION_ID] = forms.CharField(
            label='Subscription ID',
            strip=True,
        )
        self.fields[MANAGEMENT_CERTIFICATE] = forms.CharField(
            label='Management certificate',
            strip=True,
        )

    @override
    def clean(self) -> dict[str, Any]:
        """Normalise the subscription ID to a lowercase GUID.

        Returns:
            Cleaned data.
        """
        cleaned_data = super().clean()
        subscription_id = cleaned_data.get(SUBSCRIPTION_ID)
        if subscription_id:
            try:
                cleaned_data[SUBSCRIPTION_ID] = str(uuid.UUID(subscription_id))
            except ValueError:
                self.add_error(
                    SUBSCRIPTION_ID,
                    'Subscription ID must be a GUID',
                )
        return cleaned_data

    def to_settings(self) -> ProfileSettings:
        """Build settings from validated data.

        Returns:
            ProfileSettings instance.
        """
        return ProfileSettings.from_properties(self.cleaned_data)
