"""Infrastructure layer for cloud profiles app.

This package contains integrations with the host environment:
- Plugin data directory storage
- Validation of names coming from upload forms

Keep infrastructure concerns separate from business logic.
"""
