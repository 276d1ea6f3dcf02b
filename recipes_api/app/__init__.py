"""
Application package initializer.

The service is organised into small pieces: ``core`` holds settings,
logging and error types, ``schemas`` the Pydantic models, ``services``
the in‑memory recipe store and ``api`` the versioned HTTP routes.

The application object is not built at import time because building
it reads the seed file; call ``create_app`` instead.
"""

from .main import create_app  # noqa: F401
