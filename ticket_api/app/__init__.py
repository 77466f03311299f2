"""
Application package initializer.

The service is split into a few small layers: ``core`` holds
configuration, logging, the record store and the error taxonomy,
``schemas`` holds the pydantic payload models, ``services`` holds the
validation and ticket logic, and ``api/v1/endpoints`` exposes the HTTP
routes.  Routers are aggregated in ``api/v1/router.py`` and mounted by
``main.create_app``.
"""

from .main import app  # noqa: F401
