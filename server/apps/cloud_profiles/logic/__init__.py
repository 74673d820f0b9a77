"""Business logic layer for cloud profiles app.

This package contains the logic behind the profile settings page:
- Management certificate upload into the plugin data directory
- Binding of posted profile properties into typed settings

Views only translate HTTP requests to these functions and their
results back to response models.
"""
