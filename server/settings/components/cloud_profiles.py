"""Cloud profile settings."""

from server.settings.components import config

# Resource path reported to the settings page
PLUGIN_RESOURCES_PATH = config(
    'PLUGIN_RESOURCES_PATH',
    default='/plugins/cloud-profiles/',
)
