"""Names shared between the settings page, views and binding logic."""

from typing import Final

# Profile property keys
SUBSCRIPTION_ID: Final = 'subscriptionId'
MANAGEMENT_CERTIFICATE: Final = 'managementCertificate'

# Request parameter prefixes used by the settings form
PROPERTY_PREFIX: Final = 'prop:'
ENCRYPTED_PROPERTY_PREFIX: Final = 'prop:encrypted:'

# Multipart fields of the certificate upload form
UPLOAD_FILE_NAME_FIELD: Final = 'fileName'
UPLOAD_FILE_FIELD: Final = 'file:fileToUpload'

PLUGIN_DATA_STORAGE_ALIAS: Final = 'plugin_data'
