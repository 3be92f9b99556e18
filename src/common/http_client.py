"""Shared HTTP transport used by the gallery client.

Wraps a single ``requests`` call per operation with consistent headers,
timeouts and DEBUG traces. Transport failures are not translated here;
``requests.RequestException`` reaches the caller unchanged.
"""
from __future__ import annotations

import logging
from typing import Optional

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


class RequestsTransport:
    """Send body-less requests and report only the HTTP status code."""

    def __init__(
        self,
        timeout: Optional[float] = Constants.REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session

    def send(self, method: str, url: str) -> int:
        """Issue ``method`` against ``url`` with an empty body.

        Args:
            method: HTTP verb, e.g. "DELETE" or "POST".
            url: Fully built target URL (may carry secrets in the query).

        Returns:
            int: The response status code.

        Raises:
            requests.RequestException: On connection, DNS, TLS or timeout failures.
        """
        safe_target = safe_url(url)
        headers = {"Content-Length": "0", "User-Agent": Constants.USER_AGENT}
        requester = self.session if self.session is not None else requests
        with Timer() as t:
            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP request",
                    extra=extra_context(
                        event="http_request",
                        component="http_client",
                        action=method,
                        target=safe_target,
                    )
                )
            try:
                res = requester.request(
                    method, url, data=b"", headers=headers, timeout=self.timeout
                )
            except requests.RequestException as exc:
                if is_debug_enabled(logger):
                    logger.debug(
                        "HTTP request exception",
                        extra=extra_context(
                            event="http_exception",
                            component="http_client",
                            action=method,
                            outcome=type(exc).__name__,
                            duration_ms=t.duration_ms(),
                            target=safe_target,
                        )
                    )
                raise
            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP response",
                    extra=extra_context(
                        event="http_response",
                        component="http_client",
                        action=method,
                        status_code=res.status_code,
                        duration_ms=t.duration_ms(),
                        target=safe_target,
                    )
                )
            return res.status_code
