"""
Shared HTTP client for the upstream data sources.

Provides a pre-configured ``requests.Session`` with a default timeout and a
project User-Agent.  Every location selection triggers a fresh fetch, so the
default strategy performs no retries: a failed request surfaces immediately.

Usage::

    from earthwatch.services.http import session

    resp = session.get("https://power.larc.nasa.gov/api/temporal/daily/point", params=...)
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from earthwatch import __version__
from earthwatch.config import get_settings

#: Default retry strategy: none.
DEFAULT_RETRY = Retry(
    total=0,
    raise_on_status=False,  # callers inspect resp.ok / resp.json() themselves
)

DEFAULT_TIMEOUT = 30  # seconds


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = f"earthwatch/{__version__}"

    # Wrap send so callers don't need to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session - import and use directly.
session: requests.Session = create_session(timeout=get_settings().http_timeout)
