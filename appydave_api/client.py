"""AppyDaveApp API client.

A thin wrapper around the JSON API using the ``requests`` library.  It
exposes one method per endpoint:

* :meth:`AppyDaveAPI.hello` returns the greeting message.
* :meth:`AppyDaveAPI.list_services` returns the service records.

Every method returns a ``(data, error)`` tuple instead of raising.  On
success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class AppyDaveAPI:
    """Client for the AppyDaveApp API."""

    api_prefix = "/api/v1"

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to ``path`` under the API prefix.

        Returns:
            A tuple ``(data, error)`` where ``data`` is the parsed JSON
            body on success.
        """
        url = f"{self.base_url}{self.api_prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    body = exc.response.json()
                except ValueError:
                    body = None
                if isinstance(body, dict):
                    message = str(body.get("detail") or "")
                else:
                    # Proxies may answer with plain text or non-object JSON.
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def hello(self) -> Tuple[Optional[str], Optional[ApiError]]:
        """Fetch the greeting message."""
        data, error = self._request("GET", "/hello")
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get("message"), None
        return None, {"status_code": None, "message": "Unexpected response for greeting"}

    def list_services(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all service records.

        Returns:
            A tuple ``(services, error)``; ``services`` is empty on failure.
        """
        data, error = self._request("GET", "/services")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], {"status_code": None, "message": "Unexpected response for services"}
