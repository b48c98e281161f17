"""
http_client.py - HTTP Client for the Companies House API
========================================================
This module handles the HTTP side of talking to Companies House:
- Basic authentication (API key as username, empty password)
- Making GET requests and decoding the JSON body
- Managing the HTTP session and headers

Requests are not retried. A failed request is raised once as a
RegistryRequestError and the caller decides what to do with it.
"""

import logging

import requests
from requests.auth import HTTPBasicAuth
from .config import Settings


logger = logging.getLogger(__name__)


class RegistryRequestError(RuntimeError):
    """A registry request failed (network error, HTTP error, or bad JSON)."""

    def __init__(self, path: str, message: str, status_code: int = 0):
        super().__init__(f"{message} ({path})")
        self.path = path
        self.status_code = status_code


# =============================================================================
# HTTP CLIENT CLASS
# =============================================================================

class HttpClient:
    """
    HTTP client for the Companies House REST API.

    Usage:
        client = HttpClient(settings)
        data = client.get_json("/company/01234567/charges")
        client.close()
    """

    def __init__(self, settings: Settings):
        """
        Initialize the HTTP client.

        Args:
            settings: Configuration object containing base URL, API key and timeout
        """
        self.settings = settings

        # One Session for the whole run: connection pooling plus shared auth
        self.s = requests.Session()
        self.s.auth = HTTPBasicAuth(settings.api_key, "")
        self.s.headers.update({"Accept": "application/json"})

        self.base = settings.base_url
        self.timeout = settings.timeout_sec

    # -------------------------------------------------------------------------
    # API REQUEST METHODS
    # -------------------------------------------------------------------------

    def get_json(self, path: str, params: dict | None = None):
        """
        Make a GET request to an API endpoint and return the decoded JSON.

        Args:
            path: The API endpoint path (e.g., "/company/01234567/officers")
            params: Optional query parameters

        Returns:
            The decoded JSON body (normally a dict)

        Raises:
            RegistryRequestError: On network errors, non-2xx statuses or
                a body that is not valid JSON
        """
        url = f"{self.base}{path}"

        try:
            r = self.s.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            # Timeout, connection refused, DNS failure, etc.
            raise RegistryRequestError(path, f"Network error: {type(e).__name__}: {e}") from e

        logger.debug(f"GET {path} -> {r.status_code}")

        if not 200 <= r.status_code < 300:
            raise RegistryRequestError(
                path,
                f"HTTP {r.status_code}: {(r.text or '')[:200].strip()}",
                status_code=r.status_code,
            )

        try:
            return r.json()
        except ValueError as e:
            raise RegistryRequestError(
                path, f"Invalid JSON response: {str(e)[:50]}", status_code=r.status_code
            ) from e

    # -------------------------------------------------------------------------
    # CLEANUP METHODS
    # -------------------------------------------------------------------------

    def close(self):
        """Close the HTTP session and release resources."""
        self.s.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
