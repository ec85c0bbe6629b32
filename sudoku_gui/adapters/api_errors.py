"""Typed failures raised by the solver REST adapter.

Non-2xx responses are turned into one exception per status class so the use
case layer can map them with ``isinstance`` checks. The solve API reports its
verdict in the ``status`` field (``"INVALID_PUZZLE"``), which becomes
:attr:`ApiError.code`.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

_SNIPPET_LIMIT = 400
_CODE_KEYS = ("status", "code", "error")
_DETAIL_KEYS = ("message", "detail", "title")
_HINT_KEYS = ("hint", "details", "errors")


class ApiError(RuntimeError):
    """Base class for REST adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.hint = hint
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx; the server rejected the request or the puzzle."""


class ApiServerError(ApiError):
    """HTTP 5xx from the solve API."""


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""


class ApiPayloadError(ApiError):
    """2xx response whose body does not match the expected schema."""


def raise_for_status(resp: Any, context: str) -> None:
    """Raise the matching :class:`ApiError` subclass unless ``resp`` is 2xx."""
    status = int(resp.status_code)
    if 200 <= status < 300:
        return
    payload = read_error_payload(resp)
    code, detail, hint = describe_payload(payload)
    summary = detail or code
    message = f"{context}: {summary} (HTTP {status})" if summary else f"{context}: HTTP {status}"
    if 400 <= status < 500:
        cls = ApiClientError
    elif 500 <= status < 600:
        cls = ApiServerError
    else:
        cls = ApiError
    raise cls(message, status=status, code=code, hint=hint, payload=payload, context=context)


def decode_json(resp: Any, context: str) -> Any:
    """Return the decoded body or raise :class:`ApiPayloadError`."""
    try:
        return resp.json()
    except ValueError as exc:
        snippet = (getattr(resp, "text", "") or "")[:_SNIPPET_LIMIT]
        raise ApiPayloadError(
            f"{context}: invalid JSON response: {snippet}",
            status=getattr(resp, "status_code", None),
            payload=snippet,
            context=context,
        ) from exc


def read_error_payload(resp: Any) -> Any:
    """Decoded error body, a text snippet, or ``None``. Never raises."""
    try:
        return resp.json()
    except ValueError:
        return (getattr(resp, "text", "") or "")[:_SNIPPET_LIMIT] or None


def describe_payload(payload: Any) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Split an error body into ``(code, detail, hint)``."""
    if isinstance(payload, dict):
        return (
            _first_text(payload, _CODE_KEYS),
            _first_text(payload, _DETAIL_KEYS),
            _first_text(payload, _HINT_KEYS),
        )
    return None, None, flatten_text(payload)


def flatten_text(data: Any, *, limit: int = 200) -> Optional[str]:
    """Compact one-line rendering of strings, lists, and small dicts."""
    if data is None:
        return None
    if isinstance(data, dict):
        items = []
        for key, value in list(data.items())[:4]:
            value_text = flatten_text(value, limit=limit)
            if value_text:
                items.append(f"{key}={value_text}")
        text = ", ".join(items)
    elif isinstance(data, (list, tuple)):
        parts = [flatten_text(item, limit=limit) for item in data[:3]]
        text = "; ".join(part for part in parts if part)
    else:
        text = str(data).strip()
    return text[:limit] or None


def _first_text(payload: dict, keys: Tuple[str, ...]) -> Optional[str]:
    for key in keys:
        text = flatten_text(payload.get(key))
        if text:
            return text
    return None


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiPayloadError",
    "ApiServerError",
    "ApiTimeoutError",
    "decode_json",
    "describe_payload",
    "flatten_text",
    "raise_for_status",
    "read_error_payload",
]
