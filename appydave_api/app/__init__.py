"""
Application package initializer.

The API is organised into ``core`` (configuration, database, logging
and errors), ``schemas``, ``services`` (repositories) and ``api``
(versioned routers under ``api/<version>/``).
"""

from .main import app  # noqa: F401
