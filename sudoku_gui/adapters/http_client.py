"""Thin ``requests`` wrapper shared by the solver REST adapter.

The wrapper owns the timeout and retry policy and the JSON headers (plus the
optional ``X-API-Key``). It never interprets status codes; that is left to
:func:`sudoku_gui.adapters.api_errors.raise_for_status`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests
from requests import exceptions as req_exc

from sudoku_gui.adapters.api_errors import ApiError, ApiTimeoutError

log = logging.getLogger(__name__)

# Failures worth another attempt; anything else is reported at once.
_RETRYABLE = (req_exc.Timeout, req_exc.ConnectionError)


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds for each attempt.
        retries: Extra attempts after the first one on transport failures.
    """
    request_timeout_s: int = 10
    retries: int = 2

    @property
    def attempts(self) -> int:
        return max(0, self.retries) + 1


class RetryingSession:
    """Persistent ``requests.Session`` with JSON headers and a retry loop."""

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg
        self.headers: Dict[str, str] = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if api_key:
            self.headers["X-API-Key"] = api_key

    def post_json(self, url: str, payload: Any) -> requests.Response:
        """POST ``payload`` as JSON and return the first response received.

        Raises:
            ApiTimeoutError: Every attempt timed out or could not connect.
            ApiError: Any other ``requests`` failure (not retried).
        """
        body = json.dumps(payload)
        return self._with_retries(
            f"POST {url}",
            lambda: self.session.post(
                url, data=body, headers=self.headers, timeout=self.cfg.request_timeout_s
            ),
        )

    def _with_retries(
        self, context: str, send: Callable[[], requests.Response]
    ) -> requests.Response:
        attempts = self.cfg.attempts
        for attempt in range(1, attempts + 1):
            try:
                return send()
            except _RETRYABLE as exc:
                log.debug("%s failed (attempt %d/%d): %s", context, attempt, attempts, exc)
            except req_exc.RequestException as exc:
                raise ApiError(str(exc), context=context) from exc
        raise ApiTimeoutError(
            f"No response after {attempts} attempt(s): {context}", context=context
        )

    def close(self) -> None:
        self.session.close()


__all__ = ["HttpConfig", "RetryingSession"]
