"""
Application package initializer.

The API is organised into layers: ``core`` (configuration, logging,
security, storage, errors), ``schemas`` (pydantic payloads),
``services`` (business rules) and ``api`` (versioned HTTP routers).
"""

from .main import app  # noqa: F401
