"""Turn adapter exceptions into the stable ``UseCaseError`` codes the UI shows."""

from __future__ import annotations


from typing import Optional

from sudoku_gui.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiPayloadError,
    ApiServerError,
    ApiTimeoutError,
    describe_payload,
)
from sudoku_gui.domain.ports import UseCaseError

# HTTP statuses the solve endpoint uses to reject a puzzle.
PUZZLE_REJECTED = (400, 422)
AUTH_REJECTED = (401, 403)


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by an adapter or use case.
        default_code: Code used when ``exc`` is not an adapter error.
        default_message: Message used in that case; falls back to ``str(exc)``.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Check connection.")
    if isinstance(exc, ApiPayloadError):
        return UseCaseError("BAD_RESPONSE", _with_hint("Unexpected solver response", str(exc)))
    if isinstance(exc, ApiClientError):
        return _client_error(exc)
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", "Solver error, try again.")
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))

    return UseCaseError(default_code, default_message or str(exc) or "Unexpected error.")


def _client_error(exc: ApiClientError) -> UseCaseError:
    status = exc.status or 0
    hint = exc.hint or describe_payload(exc.payload)[2]
    if status in PUZZLE_REJECTED:
        label = f"Invalid puzzle ({exc.code})" if exc.code else "Invalid puzzle"
        return UseCaseError("INVALID_PUZZLE", _with_hint(label, hint))
    if status in AUTH_REJECTED:
        return UseCaseError("AUTH_FAILED", "Auth failed / API key invalid.")
    label = f"Request failed (HTTP {status})" if status else "Request failed"
    return UseCaseError("REQUEST_FAILED", _with_hint(label, hint))


def _with_hint(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    return base if base.endswith(".") else f"{base}."


__all__ = ["map_api_error"]
