from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Union

import pytest
from requests import exceptions as req_exc

from sudoku_gui.adapters.api_errors import (
    ApiClientError,
    ApiPayloadError,
    ApiServerError,
    ApiTimeoutError,
)
from sudoku_gui.adapters.solver_rest import SolverRestAdapter
from sudoku_gui.domain.grid import GridModel

SOLVED = [[(row * 3 + row // 3 + col) % 9 + 1 for col in range(9)] for row in range(9)]


class _ResponseStub:
    def __init__(self, payload: Any, status_code: int = 200, *, raw_text: Optional[str] = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = raw_text if raw_text is not None else str(payload)
        self._raw = raw_text is not None

    def json(self) -> Any:
        if self._raw:
            raise ValueError("not JSON")
        return self._payload


class _SessionStub:
    def __init__(self, responses: Sequence[Union[_ResponseStub, Exception]]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def post(
        self,
        url: str,
        *,
        data: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> _ResponseStub:
        self.calls.append({"url": url, "data": data, "headers": dict(headers or {}), "timeout": timeout})
        if not self._responses:
            raise RuntimeError("No stub response configured")
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def close(self) -> None:
        pass


def _adapter(responses, **kwargs) -> tuple[SolverRestAdapter, _SessionStub]:
    adapter = SolverRestAdapter("http://solver.local:8080/", **kwargs)
    stub = _SessionStub(responses)
    adapter.session.session = stub  # type: ignore[assignment]
    return adapter, stub


def test_solve_posts_board_to_solve_endpoint() -> None:
    adapter, stub = _adapter([_ResponseStub({"solvedBoard": SOLVED, "status": "SOLVED"})])
    board = GridModel.demo().to_normalized_matrix()

    result = adapter.solve(board)

    assert result == {"solvedBoard": SOLVED, "status": "SOLVED"}
    call = stub.calls[0]
    assert call["url"] == "http://solver.local:8080/api/solve"
    assert json.loads(call["data"]) == {"board": board}
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["headers"]["Accept"] == "application/json"
    assert call["timeout"] == 10


def test_solve_sends_api_key_header_when_configured() -> None:
    adapter, stub = _adapter([_ResponseStub({"solvedBoard": SOLVED, "status": "SOLVED"})], api_key="secret")

    adapter.solve(GridModel().to_normalized_matrix())

    assert stub.calls[0]["headers"]["X-API-Key"] == "secret"


def test_missing_status_defaults_to_solved() -> None:
    adapter, _ = _adapter([_ResponseStub({"solvedBoard": SOLVED})])

    result = adapter.solve(GridModel().to_normalized_matrix())

    assert result["status"] == "SOLVED"


def test_invalid_puzzle_response_raises_client_error() -> None:
    board = GridModel.demo().to_normalized_matrix()
    adapter, _ = _adapter(
        [_ResponseStub({"solvedBoard": board, "status": "INVALID_PUZZLE"}, status_code=400)]
    )

    with pytest.raises(ApiClientError) as excinfo:
        adapter.solve(board)

    assert excinfo.value.status == 400
    assert excinfo.value.code == "INVALID_PUZZLE"
    assert "HTTP 400" in str(excinfo.value)


def test_server_error_raises_server_error() -> None:
    adapter, _ = _adapter([_ResponseStub("boom", status_code=503)])

    with pytest.raises(ApiServerError) as excinfo:
        adapter.solve(GridModel().to_normalized_matrix())

    assert excinfo.value.status == 503


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"status": "SOLVED"},
        {"solvedBoard": SOLVED[:8], "status": "SOLVED"},
        {"solvedBoard": [row[:8] for row in SOLVED], "status": "SOLVED"},
        {"solvedBoard": [[0] * 9] + SOLVED[1:], "status": "SOLVED"},
        {"solvedBoard": [["1"] * 9] + SOLVED[1:], "status": "SOLVED"},
    ],
)
def test_malformed_success_payload_raises_payload_error(payload: Any) -> None:
    adapter, _ = _adapter([_ResponseStub(payload)])

    with pytest.raises(ApiPayloadError):
        adapter.solve(GridModel().to_normalized_matrix())


def test_non_json_success_body_raises_payload_error() -> None:
    adapter, _ = _adapter([_ResponseStub(None, raw_text="<html>oops</html>")])

    with pytest.raises(ApiPayloadError) as excinfo:
        adapter.solve(GridModel().to_normalized_matrix())

    assert "<html>oops</html>" in str(excinfo.value)


def test_transport_failures_are_retried_then_raise_timeout() -> None:
    adapter, stub = _adapter(
        [req_exc.ConnectionError("down"), req_exc.Timeout("slow"), req_exc.ConnectionError("down")],
        retries=2,
    )

    with pytest.raises(ApiTimeoutError):
        adapter.solve(GridModel().to_normalized_matrix())

    assert len(stub.calls) == 3


def test_transport_failure_recovers_on_retry() -> None:
    adapter, stub = _adapter(
        [req_exc.ConnectionError("down"), _ResponseStub({"solvedBoard": SOLVED, "status": "SOLVED"})],
        retries=1,
    )

    result = adapter.solve(GridModel().to_normalized_matrix())

    assert result["solvedBoard"] == SOLVED
    assert len(stub.calls) == 2


def test_rejects_malformed_request_board_before_sending() -> None:
    adapter, stub = _adapter([])

    with pytest.raises(ValueError):
        adapter.solve([[0] * 9 for _ in range(8)])
    with pytest.raises(ValueError):
        adapter.solve([[10] * 9 for _ in range(9)])

    assert stub.calls == []


def test_requires_base_url() -> None:
    with pytest.raises(ValueError):
        SolverRestAdapter("  ")
