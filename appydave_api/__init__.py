"""
Top-level package for the AppyDaveApp API.

The web application lives in ``appydave_api.app``; a small HTTP client
for it lives in ``appydave_api.client``.
"""

__all__ = []
