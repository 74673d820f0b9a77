"""Business logic for binding cloud profile properties."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Self, final

from server.apps.cloud_profiles.constants import (
    ENCRYPTED_PROPERTY_PREFIX,
    MANAGEMENT_CERTIFICATE,
    PROPERTY_PREFIX,
    SUBSCRIPTION_ID,
)

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class ProfileSettings:
    """Typed cloud profile settings posted from the settings page."""

    subscription_id: str
    management_certificate: str

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> Self:
        """Build settings from a bound property map.

        Missing properties become empty strings; validation is left to
        the settings form.

        Args:
            properties: Property map without request prefixes.

        Returns:
            ProfileSettings instance.
        """
        return cls(
            subscription_id=properties.get(SUBSCRIPTION_ID, ''),
            management_certificate=properties.get(MANAGEMENT_CERTIFICATE, ''),
        )

    def to_properties(self) -> dict[str, str]:
        """Property map as used by the settings page."""
        return {
            SUBSCRIPTION_ID: self.subscription_id,
            MANAGEMENT_CERTIFICATE: self.management_certificate,
        }


def bind_profile_properties(params: Mapping[str, str]) -> dict[str, str]:
    """Collect profile properties from request parameters.

    Properties are posted as ``prop:<key>``; secret ones as
    ``prop:encrypted:<key>``. Both are stored under the bare key.
    Parameters without the prefix are ignored.

    Args:
        params: Request parameters (e.g. ``request.POST``).

    Returns:
        Dictionary of property keys to values.
    """
    properties: dict[str, str] = {}
    for param_name, value in params.items():
        if param_name.startswith(ENCRYPTED_PROPERTY_PREFIX):
            key = param_name.removeprefix(ENCRYPTED_PROPERTY_PREFIX)
        elif param_name.startswith(PROPERTY_PREFIX):
            key = param_name.removeprefix(PROPERTY_PREFIX)
        else:
            continue
        if key:
            properties[key] = value

    logger.debug('Bound profile properties: %s', sorted(properties))
    return properties
