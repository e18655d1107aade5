"""
Application package initializer.

The service is organised into the usual layers: ``core`` (settings,
logging, the in-memory store and error types), ``schemas`` (Pydantic
payloads), ``services`` (business operations) and ``api`` (HTTP
routes).  ``main`` ties them together into a FastAPI application.
"""

from .main import app  # noqa: F401
