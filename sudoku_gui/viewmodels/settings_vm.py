from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import urlparse

from ..utils.logging import env_requests_debug

log = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:8080"

# Environment variable -> SettingsConfig field
ENV_VARS: Dict[str, str] = {
    "SUDOKU_API_URL": "api_base_url",
    "SUDOKU_API_KEY": "api_key",
    "SUDOKU_REQUEST_TIMEOUT_S": "request_timeout_s",
    "SUDOKU_RETRIES": "retries",
    "SUDOKU_POLL_INTERVAL_MS": "poll_interval_ms",
}


@dataclass
class SettingsConfig:
    """Typed runtime settings for the solve client."""

    api_base_url: str = DEFAULT_API_BASE_URL
    api_key: str = ""
    request_timeout_s: int = 10
    retries: int = 2
    poll_interval_ms: int = 50


def coerce_url(value: Any) -> str:
    """Accept an http(s) URL with a host; trailing slashes are dropped."""
    text = value.strip().rstrip("/") if isinstance(value, str) else ""
    if not text:
        raise ValueError("api_base_url must be a non-empty string.")
    parsed = urlparse(text)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"api_base_url must be an http(s) URL, got {value!r}.")
    return text


def coerce_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def coerce_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def coerce_int(name: str, value: Any, *, minimum: int = 0) -> int:
    """Parse ints and numeric strings; ``bool`` is refused."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{name} must be an integer.")
    try:
        number = int(value.strip()) if isinstance(value, str) else int(value)
    except (OverflowError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer.") from exc
    if number < minimum:
        raise ValueError(f"{name} must be >= {minimum}.")
    return number


def _at_least(name: str, minimum: int) -> Callable[[Any], int]:
    return lambda value: coerce_int(name, value, minimum=minimum)


_FIELD_RULES: Dict[str, Callable[[Any], Any]] = {
    "api_base_url": coerce_url,
    "api_key": coerce_text,
    "request_timeout_s": _at_least("request_timeout_s", 1),
    "retries": _at_least("retries", 0),
    "poll_interval_ms": _at_least("poll_interval_ms", 1),
}


class SettingsVM:
    """Settings state and validation for the solver connection; no I/O."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()
        self.debug_logging: bool = env_requests_debug()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsVM":
        """Build settings from ``SUDOKU_*`` environment variables.

        Raises:
            ValueError: If a variable is set to an invalid value.
        """
        env = os.environ if environ is None else environ
        vm = cls()
        vm.apply_dict({name: env[var] for var, name in ENV_VARS.items() if env.get(var)})
        return vm

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsVM":
        """Like :meth:`from_env`, but bad variables fall back to the defaults."""
        try:
            return cls.from_env(environ)
        except ValueError as exc:
            log.warning("Ignoring SUDOKU_* environment settings: %s", exc)
            return cls()

    # ---- typed accessors (setters validate) ----
    @property
    def api_base_url(self) -> str:
        return self.config.api_base_url

    @api_base_url.setter
    def api_base_url(self, value: str) -> None:
        self._update(api_base_url=value)

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self._update(api_key=value)

    @property
    def request_timeout_s(self) -> int:
        return self.config.request_timeout_s

    @request_timeout_s.setter
    def request_timeout_s(self, value: int) -> None:
        self._update(request_timeout_s=value)

    @property
    def retries(self) -> int:
        return self.config.retries

    @retries.setter
    def retries(self, value: int) -> None:
        self._update(retries=value)

    @property
    def poll_interval_ms(self) -> int:
        return self.config.poll_interval_ms

    @poll_interval_ms.setter
    def poll_interval_ms(self, value: int) -> None:
        self._update(poll_interval_ms=value)

    # ---- bulk operations ----
    def is_valid(self) -> bool:
        """True when the current config would pass every field rule."""
        try:
            for name, rule in _FIELD_RULES.items():
                rule(getattr(self.config, name))
        except ValueError:
            return False
        return True

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat settings mapping; nothing changes if any value is invalid.

        Raises:
            ValueError: Not a mapping, unknown keys, or an invalid value.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")
        unknown = sorted(str(key) for key in payload if key not in _FIELD_RULES and key != "debug_logging")
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(unknown)}")

        values = {key: value for key, value in payload.items() if key in _FIELD_RULES}
        debug = coerce_flag(payload["debug_logging"]) if "debug_logging" in payload else None
        self._update(**values)
        if debug is not None:
            self.debug_logging = debug

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self.config)
        data["debug_logging"] = bool(self.debug_logging)
        return data

    def _update(self, **raw: Any) -> None:
        coerced = {name: _FIELD_RULES[name](value) for name, value in raw.items()}
        if coerced:
            self.config = replace(self.config, **coerced)


__all__ = ["DEFAULT_API_BASE_URL", "ENV_VARS", "SettingsConfig", "SettingsVM"]
