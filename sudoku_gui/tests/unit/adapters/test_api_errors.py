from __future__ import annotations

from typing import Any

import pytest

from sudoku_gui.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiPayloadError,
    ApiServerError,
    decode_json,
    describe_payload,
    flatten_text,
    raise_for_status,
)


class _Resp:
    def __init__(self, status_code: int, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no JSON")
        return self._payload


def test_success_status_does_not_raise() -> None:
    raise_for_status(_Resp(200, {"status": "SOLVED"}), "solve")
    raise_for_status(_Resp(204), "solve")


def test_client_error_carries_status_word_as_code() -> None:
    with pytest.raises(ApiClientError) as excinfo:
        raise_for_status(_Resp(400, {"solvedBoard": [], "status": "INVALID_PUZZLE"}), "solve")

    err = excinfo.value
    assert err.status == 400
    assert err.code == "INVALID_PUZZLE"
    assert err.context == "solve"
    assert str(err) == "solve: INVALID_PUZZLE (HTTP 400)"


def test_message_and_hint_are_extracted() -> None:
    payload = {"status": "BAD_REQUEST", "message": "board is malformed", "errors": ["row 3", "row 5"]}

    with pytest.raises(ApiClientError) as excinfo:
        raise_for_status(_Resp(422, payload), "solve")

    assert str(excinfo.value) == "solve: board is malformed (HTTP 422)"
    assert excinfo.value.hint == "row 3; row 5"


def test_server_error_with_text_body() -> None:
    with pytest.raises(ApiServerError) as excinfo:
        raise_for_status(_Resp(502, None, text="Bad Gateway"), "solve")

    assert excinfo.value.payload == "Bad Gateway"
    assert excinfo.value.hint == "Bad Gateway"
    assert str(excinfo.value) == "solve: HTTP 502"


def test_unexpected_status_class_raises_base_error() -> None:
    with pytest.raises(ApiError) as excinfo:
        raise_for_status(_Resp(302, None), "solve")

    assert type(excinfo.value) is ApiError


def test_decode_json_wraps_invalid_body() -> None:
    with pytest.raises(ApiPayloadError) as excinfo:
        decode_json(_Resp(200, None, text="<html/>"), "solve")

    assert excinfo.value.payload == "<html/>"


def test_describe_payload_for_non_dict() -> None:
    assert describe_payload(["a", "b"]) == (None, None, "a; b")
    assert describe_payload(None) == (None, None, None)


def test_flatten_text_limits_and_skips_empty() -> None:
    assert flatten_text({"a": "", "b": 2}) == "b=2"
    assert flatten_text("  ") is None
    assert flatten_text("x" * 300, limit=10) == "x" * 10
