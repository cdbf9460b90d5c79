"""
Shared HTTP client with optional retry and a default timeout.

Provides a pre-configured ``requests.Session``.  All datasource modules
should use this instead of bare ``requests.get``.

Usage::

    from biotope_map.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from biotope_map import __version__
from biotope_map.config import get_settings

DEFAULT_TIMEOUT = 30  # seconds
USER_AGENT = f"biotope-map/{__version__} (city biodiversity map)"


def build_retry(total: int) -> Retry:
    """Retry strategy for transient errors; ``total=0`` disables retrying."""
    return Retry(
        total=total,
        backoff_factor=2,  # 0s, 2s, 4s, ... between retries
        status_forcelist=[429, 502, 503, 504],
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,  # let resp.raise_for_status() handle it
    )


def create_session(
    retries: int = 0,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retries: Number of retries on transient failures.
        timeout: Default timeout applied to every request (None for no timeout).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=build_retry(retries))
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


def session_from_settings() -> requests.Session:
    """Build a session using the retry/timeout values from settings."""
    settings = get_settings()
    return create_session(
        retries=settings.http_retries,
        timeout=settings.http_timeout or None,
    )


#: Module-level session — import and use directly.
session: requests.Session = session_from_settings()
